"""Exception classes for Simian.

The lexer never raises: unknown input becomes ILLEGAL or INVALID tokens.
These exceptions belong to the layers above it.
"""

from __future__ import annotations


class SimianError(Exception):
    """Base exception for all Simian errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(SimianError):
    """Error during statement parsing.

    The parser records these instead of raising them; see Parser.errors
    and Parser.check().
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            offset: Source offset of the offending token (0-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.offset = offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if offset is not None and offset >= 0:
            location += f"{offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
