"""Exceptions raised while reading shogi notation."""

from __future__ import annotations


class NotationError(ValueError):
    """Base class for every notation parse failure.

    *line* is 1-based within the block; *column* is the 1-based cell index
    inside a board row.  Both are filled in by the parser when the failure
    happens inside a hand or a row.
    """

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.line = line
        self.column = column

    def locate(self, *, line: int | None = None, column: int | None = None) -> None:
        """Attach a location unless one is already known."""
        if self.line is None:
            self.line = line
        if self.column is None:
            self.column = column

    @property
    def location(self) -> str:
        if self.line is None:
            return ""
        if self.column is None:
            return f"line {self.line}"
        return f"line {self.line}, column {self.column}"

    def __str__(self) -> str:
        location = self.location
        if not location:
            return self.message
        return f"{self.message} ({location})"


class UnknownPieceType(NotationError):
    """A piece letter outside ``p b r l n s g k``."""

    def __init__(self, token: str, **kwargs: int | None) -> None:
        super().__init__(f"Unknown piece type {token!r}", token=token, **kwargs)


class UnknownPieceColor(NotationError):
    """A board cell whose owner letter is not ``s``, ``g`` or a space."""

    def __init__(self, token: str, **kwargs: int | None) -> None:
        super().__init__(
            f"Unknown piece color {token!r}, expected s (sente) or g (gote)",
            token=token,
            **kwargs,
        )


class MalformedNotation(NotationError):
    """Structural problem in the block layout or in a cell token."""
