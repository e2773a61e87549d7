"""Errors shared by the cube modules."""

CUBE_SIZE = 8


class OutOfBoundsError(IndexError):
    """Raised when a coordinate or layer index lies outside the cube."""

    def __init__(self, message: str = "index out of bounds") -> None:
        super().__init__(message)


def check_bounds(index: int) -> int:
    """Return ``index`` unchanged if it addresses one of the 8 positions of an axis."""
    if not 0 <= index < CUBE_SIZE:
        raise OutOfBoundsError()
    return index