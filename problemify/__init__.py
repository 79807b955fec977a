"""
problemify: materialize the problem or solution variant of an annotated
source tree.
"""

from problemify.markers import Mode

__version__ = "0.1.0"

__all__ = ["Mode", "__version__"]
