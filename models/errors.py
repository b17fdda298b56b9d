"""Errors raised by the compression pipeline."""


class CompressionError(ValueError):
    """Base class for rejected pipeline inputs."""


class InvalidDimensions(CompressionError):
    """Width or height is not a positive integer."""

    def __init__(self, width: int, height: int):
        super().__init__(f"Image dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height


class BufferSizeMismatch(CompressionError):
    """Pixel buffer length does not equal width*height*4."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Pixel buffer must hold {expected} bytes (RGBA), got {actual}")
        self.expected = expected
        self.actual = actual
