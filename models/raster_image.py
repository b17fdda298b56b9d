"""RGBA raster image container."""

from dataclasses import dataclass

import numpy as np

from models.errors import InvalidDimensions, BufferSizeMismatch


@dataclass(frozen=True)
class RasterImage:
    """Interleaved RGBA8 pixels in row-major order."""

    width: int
    height: int
    pixels: bytes

    def validate(self) -> None:
        """Raise if dimensions or buffer length are inconsistent."""
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(self.width, self.height)
        expected = self.width * self.height * 4
        if len(self.pixels) != expected:
            raise BufferSizeMismatch(expected, len(self.pixels))

    def to_array(self) -> np.ndarray:
        """Copy pixels into an (H, W, 4) uint8 array."""
        self.validate()
        flat = np.frombuffer(self.pixels, dtype=np.uint8)
        return flat.reshape(self.height, self.width, 4).copy()

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'RasterImage':
        """Build from an (H, W, 3) or (H, W, 4) uint8 array. RGB input gets opaque alpha."""
        if array.ndim != 3 or array.shape[2] not in (3, 4):
            raise ValueError(f"Expected (H, W, 3) or (H, W, 4) array, got shape {array.shape}")
        h, w = array.shape[:2]
        if array.shape[2] == 3:
            rgba = np.empty((h, w, 4), dtype=np.uint8)
            rgba[:, :, :3] = array
            rgba[:, :, 3] = 255
        else:
            rgba = array.astype(np.uint8, copy=False)
        return cls(width=w, height=h, pixels=np.ascontiguousarray(rgba).tobytes())
