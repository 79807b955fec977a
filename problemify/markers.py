"""
Marker grammar for problem/solution variants.

A single annotated source file carries both variants of an exercise:

- ``// START SOLUTION`` ... ``// END SOLUTION`` wraps reference-solution code.
- ``/* START PROBLEM`` ... ``END PROBLEM */`` wraps problem-only scaffolding,
  usually commented out so the annotated file still runs as the solution.
- ``/* PROBLEM FILE */`` / ``/* SOLUTION FILE */`` on the first line marks a
  file that only exists in one variant.

Each mode removes the regions that belong to the other variant and only the
tag lines of its own regions.
"""

from __future__ import annotations

import re
from enum import Enum


class Mode(str, Enum):
    """Variant to materialize."""

    PROBLEM = "problem"
    SOLUTION = "solution"


# Byte-exact literals
PROBLEM_FILE = "/* PROBLEM FILE */"
SOLUTION_FILE = "/* SOLUTION FILE */"
START_SOLUTION = "START SOLUTION"
END_SOLUTION = "END SOLUTION"
START_PROBLEM = "START PROBLEM"
END_PROBLEM = "END PROBLEM"

# Line terminator of a removed line; the last line of a file may lack one
_EOL = r"(?:\r?\n|\Z)"

# Building blocks. Only blanks may separate a comment token from its keyword,
# so a marker never spans lines.
_SOLUTION_START = r"^.*//[ \t]*" + re.escape(START_SOLUTION)
_SOLUTION_END = r"^.*//[ \t]*" + re.escape(END_SOLUTION)
_PROBLEM_START = r"^.*/\*[ \t]*" + re.escape(START_PROBLEM)
_PROBLEM_END = r"^.*" + re.escape(END_PROBLEM) + r"[ \t]*\*/"

_SOLUTION_START_LINE = _SOLUTION_START + r".*"
_SOLUTION_END_LINE = _SOLUTION_END + r".*"
_PROBLEM_START_LINE = _PROBLEM_START + r".*"
_PROBLEM_END_LINE = _PROBLEM_END + r".*"

# START line through the nearest END line below it. A START line that closes
# itself on the same line never opens a block.
_SOLUTION_BLOCK = (
    _SOLUTION_START
    + r"(?!.*//[ \t]*" + re.escape(END_SOLUTION) + r").*\n[\s\S]*?"
    + _SOLUTION_END_LINE
    + _EOL
)
_PROBLEM_BLOCK = (
    _PROBLEM_START
    + r"(?!.*" + re.escape(END_PROBLEM) + r"[ \t]*\*/).*\n[\s\S]*?"
    + _PROBLEM_END_LINE
    + _EOL
)

# Problem variant: drop solution blocks whole, keep problem code but drop its tags
PROBLEM_REMOVALS = re.compile(
    "|".join(
        [
            _SOLUTION_BLOCK,
            _PROBLEM_START_LINE + _EOL,
            _PROBLEM_END_LINE + _EOL,
            "^" + re.escape(PROBLEM_FILE) + r"\r?\n",
        ]
    ),
    re.MULTILINE,
)

# Solution variant: the dual
SOLUTION_REMOVALS = re.compile(
    "|".join(
        [
            _PROBLEM_BLOCK,
            _SOLUTION_START_LINE + _EOL,
            _SOLUTION_END_LINE + _EOL,
            "^" + re.escape(SOLUTION_FILE) + r"\r?\n",
        ]
    ),
    re.MULTILINE,
)


def removal_pattern(mode: Mode) -> re.Pattern[str]:
    """Get the combined removal pattern for a mode."""
    return PROBLEM_REMOVALS if mode is Mode.PROBLEM else SOLUTION_REMOVALS


def delete_directive(mode: Mode) -> str:
    """Get the first-line directive that deletes a whole file in this mode.

    A problem run deletes solution-only files and vice versa.
    """
    return SOLUTION_FILE if mode is Mode.PROBLEM else PROBLEM_FILE
