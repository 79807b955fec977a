"""
Region transformer.

Produces the problem or solution variant of a file's content by deleting
every region the marker grammar assigns to the other variant.
"""

from __future__ import annotations

from problemify.markers import Mode, removal_pattern


def transform(content: str, mode: Mode) -> str:
    """
    Remove the marker regions that do not belong to the given variant.

    Every non-overlapping match is removed, scanning top to bottom. Block
    matches stop at the nearest END marker. Unbalanced markers never match
    and stay in the output; content without markers is returned unchanged.

    Args:
        content: Full file content
        mode: Variant to produce

    Returns:
        Transformed content
    """
    return removal_pattern(mode).sub("", content)


def problemify(content: str) -> str:
    """Produce the problem variant of content."""
    return transform(content, Mode.PROBLEM)


def solutionify(content: str) -> str:
    """Produce the solution variant of content."""
    return transform(content, Mode.SOLUTION)
