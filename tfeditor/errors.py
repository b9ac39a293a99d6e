"""Errors raised by the transfer-function model.

Every error is a ``ValueError``: they all describe caller input that was
rejected, and the model state is left exactly as it was before the call.
"""


class TransferFunctionError(ValueError):
    """Base class for rejected transfer-function input."""
    pass


class OutOfRangeError(TransferFunctionError):
    """A position outside the [0, 1] domain."""

    def __init__(self, position: float, what: str = "position"):
        self.position = position
        super().__init__(f"{what} {position!r} is outside the domain [0, 1]")


class InvalidStopSetError(TransferFunctionError):
    """A set of stops that would break the collection invariants."""
    pass


class DegenerateBinsError(TransferFunctionError):
    """A discrete color map needs at least one bin."""

    def __init__(self, bins: int):
        self.bins = bins
        super().__init__(f"bins must be an integer >= 1, got {bins!r}")


class ColorParseError(TransferFunctionError):
    """A color value that cannot be interpreted."""
    pass


class RecordFormatError(TransferFunctionError):
    """A plain record (dict or JSON) that does not describe a transfer function."""
    pass
