from __future__ import annotations

__all__ = [
    "ConversionError",
    "DisplayError",
    "NotRepresentableError",
    "ReadError",
    "SizedNumberError",
    "UnexpectedEndError",
    "UnsupportedForTypeError",
]


class SizedNumberError(ValueError):
    """
    Base class for sizednum errors.
    """


class ReadError(SizedNumberError):
    """Raised when a value cannot be read from a buffer."""


class UnexpectedEndError(ReadError):
    """Raised when fewer bytes remain than a read requires."""

    _msg = "need {} byte(s) at offset {}, buffer is {} byte(s) long"

    def __init__(self, *args: object) -> None:
        if len(args) == 3:
            super().__init__(self._msg.format(*args))
        else:
            super().__init__(*args)


class ConversionError(SizedNumberError):
    """Raised when a read value cannot be widened to the requested type."""


class NotRepresentableError(ConversionError):
    """Raised when a shape cannot be losslessly represented as the target integer."""

    _msg = "{} cannot be represented as {}"

    def __init__(self, *args: object) -> None:
        if len(args) == 2:
            super().__init__(self._msg.format(*args))
        else:
            super().__init__(*args)


class DisplayError(SizedNumberError):
    """Raised when a value cannot be rendered."""


class UnsupportedForTypeError(DisplayError):
    """Raised when a display mode does not apply to the value's type."""

    _msg = "{} display is not supported for {}"

    def __init__(self, *args: object) -> None:
        if len(args) == 2:
            super().__init__(self._msg.format(*args))
        else:
            super().__init__(*args)
