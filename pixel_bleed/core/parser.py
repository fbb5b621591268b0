"""
Texture Parser - Reads image files into RGBA arrays
The file format is detected from the file content, not the extension
"""

from PIL import Image, UnidentifiedImageError
import numpy as np
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


DEFAULT_FORMAT = 'PNG'


@dataclass
class Texture:
    """A decoded texture"""
    width: int
    height: int
    pixels: np.ndarray  # RGBA numpy array (height, width, 4)
    format: str = DEFAULT_FORMAT
    name: str = "texture"
    source_path: Optional[Path] = None

    @property
    def has_transparency(self) -> bool:
        """Check if texture has any non-opaque pixels"""
        return bool(np.any(self.pixels[:, :, 3] < 255))

    def copy(self) -> 'Texture':
        """Create a deep copy of the texture"""
        return Texture(
            width=self.width,
            height=self.height,
            pixels=self.pixels.copy(),
            format=self.format,
            name=self.name,
            source_path=self.source_path
        )


class TextureParser:
    """Parses image files into Texture objects"""

    @classmethod
    def parse(cls, path: str | Path) -> Texture:
        """Parse an image file into a Texture

        Args:
            path: Path to the image file

        Raises:
            FileNotFoundError: The file does not exist
            ValueError: The file is not an image Pillow can decode
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            with Image.open(path) as img:
                fmt = img.format or DEFAULT_FORMAT
                rgba = img.convert('RGBA')
        except UnidentifiedImageError as e:
            raise ValueError(f"Unsupported or corrupt image: {path}") from e

        return Texture(
            width=rgba.width,
            height=rgba.height,
            pixels=np.array(rgba, dtype=np.uint8),
            format=fmt,
            name=path.stem,
            source_path=path
        )

    @classmethod
    def from_array(cls, pixels: np.ndarray, name: str = "texture") -> Texture:
        """Create a Texture from a numpy array"""
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError("Pixels must be HxWx3 or HxWx4 array")

        # Ensure RGBA
        if pixels.shape[2] == 3:
            alpha = np.full((*pixels.shape[:2], 1), 255, dtype=pixels.dtype)
            pixels = np.concatenate([pixels, alpha], axis=2)

        return Texture(
            width=pixels.shape[1],
            height=pixels.shape[0],
            pixels=pixels.astype(np.uint8),
            name=name
        )
