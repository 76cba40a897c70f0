"""Error codes and the exception raised by the graphics toolkit."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numeric codes carried by :class:`MinGLError`."""

    NO_EXCEPTION = 0
    NO_ERROR = 0
    COLOR_OUT_OF_BOUNDS = 100
    FILE_ERROR = 252
    ARGUMENT_ERROR = 253
    STANDARD_ERROR = 254
    UNKNOWN = -1
    TOO_HIGH = 300
    TOO_RIGHT = 301
    FONT_SIZE = 302
    NO_TRIANGLE = 303
    NO_LINE = 304
    NO_RECTANGLE = 305
    NO_CIRCLE = 306
    TYPE_NOT_FOUND = 307


_MESSAGES: dict[int, str] = {
    ErrorCode.TOO_HIGH: "Trop haut",
    ErrorCode.TOO_RIGHT: "Trop à droite",
    ErrorCode.FONT_SIZE: "Taille de police incorrecte",
    ErrorCode.NO_TRIANGLE: "Nombre incorrect de points pour la construction du triangle",
    ErrorCode.NO_LINE: "Nombre incorrect de points pour la construction d'une ligne",
    ErrorCode.NO_RECTANGLE: "Nombre incorrect de points pour la construction d'un rectangle",
    ErrorCode.NO_CIRCLE: "Nombre incorrect de points pour la construction d'un cercle",
    ErrorCode.TYPE_NOT_FOUND: "Instanciation impossible: Pas le bon type",
}


def error_message(code: int) -> str:
    """Return the standard message for ``code``; raise KeyError if it has none."""
    try:
        return _MESSAGES[int(code)]
    except KeyError:
        raise KeyError(code) from None


class MinGLError(Exception):
    """An error with a human-readable label and a numeric code."""

    def __init__(self, label: str = "", code: int = ErrorCode.NO_EXCEPTION) -> None:
        super().__init__(label)
        self.label = label
        self.code = code

    def __str__(self) -> str:
        return self.label