"""Screenshot image model.

Immutable RGBA raster shared by capture, storage, comparison and diffing.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field

import numpy as np
from PIL import Image as PILImage

from ..base_exceptions import InvalidImageError

Pixel = tuple[int, int, int, int]

TRANSPARENT: Pixel = (0, 0, 0, 0)


@dataclass(frozen=True)
class ScreenshotImage:
    """An immutable RGBA8 raster.

    Pixels are stored as a dense row-major ``bytes`` buffer with the origin at the
    top-left corner, four bytes (R, G, B, A) per pixel. The buffer length always
    equals ``width * height * 4``; construction fails otherwise.

    Pixel access is range checked: :meth:`get_pixel` raises ``IndexError`` for
    coordinates outside the image. Use :meth:`in_bounds` to test first.

    Two images are equal iff their width, height and pixel bytes are identical.
    """

    width: int
    """Width in pixels."""

    height: int
    """Height in pixels."""

    pixels: bytes = field(repr=False)
    """Raw RGBA bytes, row-major."""

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise InvalidImageError(self.width, self.height, len(self.pixels))
        if not isinstance(self.pixels, bytes):
            object.__setattr__(self, "pixels", bytes(self.pixels))
        if len(self.pixels) != self.width * self.height * 4:
            raise InvalidImageError(self.width, self.height, len(self.pixels))

    # Construction
    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes | bytearray | memoryview) -> ScreenshotImage:
        """Create an image from raw RGBA bytes.

        Args:
            width: Width in pixels
            height: Height in pixels
            data: Exactly ``width * height * 4`` bytes

        Returns:
            ScreenshotImage instance

        Raises:
            InvalidImageError: If the buffer length is wrong
        """
        return cls(width, height, bytes(data))

    @classmethod
    def new(cls, width: int, height: int, color: Pixel = TRANSPARENT) -> ScreenshotImage:
        """Create an image filled with a single color."""
        if width < 0 or height < 0:
            raise InvalidImageError(width, height, 0)
        return cls(width, height, bytes(color) * (width * height))

    @classmethod
    def from_pil(cls, pil_image: PILImage.Image) -> ScreenshotImage:
        """Create an image from a PIL Image, converting it to RGBA if necessary."""
        if pil_image.mode != "RGBA":
            pil_image = pil_image.convert("RGBA")
        return cls(pil_image.width, pil_image.height, pil_image.tobytes())

    @classmethod
    def from_array(cls, array: np.ndarray) -> ScreenshotImage:
        """Create an image from a ``(height, width, 4)`` uint8 array."""
        if array.ndim != 3 or array.shape[2] != 4:
            raise ValueError(f"Expected an (h, w, 4) array, got shape {array.shape}")
        height, width = array.shape[:2]
        return cls(width, height, np.ascontiguousarray(array, dtype=np.uint8).tobytes())

    @classmethod
    def decode_png(cls, data: bytes) -> ScreenshotImage:
        """Decode PNG (or any Pillow-readable) bytes into an image."""
        with PILImage.open(io.BytesIO(data)) as pil_image:
            pil_image.load()
            return cls.from_pil(pil_image)

    # Conversion
    def to_pil(self) -> PILImage.Image:
        """Return a new RGBA PIL Image with a copy of the pixels."""
        return PILImage.frombytes("RGBA", self.size, self.pixels)

    def to_array(self) -> np.ndarray:
        """Return a read-only ``(height, width, 4)`` uint8 view of the pixels."""
        array = np.frombuffer(self.pixels, dtype=np.uint8)
        return array.reshape((self.height, self.width, 4))

    def encode_png(self) -> bytes:
        """Encode the image as PNG bytes."""
        buffer = io.BytesIO()
        self.to_pil().save(buffer, format="PNG")
        return buffer.getvalue()

    # Access
    @property
    def size(self) -> tuple[int, int]:
        """Get ``(width, height)``."""
        return (self.width, self.height)

    def is_empty(self) -> bool:
        """Check if the image has zero area."""
        return self.width == 0 or self.height == 0

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if ``(x, y)`` addresses a pixel of this image."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Get the RGBA value at ``(x, y)``.

        Raises:
            IndexError: If the coordinate lies outside the image
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        offset = (y * self.width + x) * 4
        r, g, b, a = self.pixels[offset : offset + 4]
        return (r, g, b, a)
