"""Exception hierarchy.

Both concrete errors derive from :class:`ValueError`, so callers that only
care about "bad input" can keep catching that.
"""

from __future__ import annotations


class ArbiterError(Exception):
    """Base class for all errors raised by this package."""


class InvalidBoardError(ArbiterError, ValueError):
    """The board is malformed, e.g. a side has no king or two."""


class IllegalMoveError(ArbiterError, ValueError):
    """A move outside the freshly generated legal set was submitted."""
