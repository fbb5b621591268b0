"""
Texture Exporter - Writes RGBA arrays back to image files
"""

from PIL import Image
import numpy as np
from pathlib import Path
from typing import Optional, Union

from .parser import DEFAULT_FORMAT, Texture

# Formats Pillow can write but that carry no alpha channel
OPAQUE_FORMATS = {'JPEG', 'EPS', 'PCX'}


class TextureExporter:
    """Exports textures to image files"""

    @staticmethod
    def supported_formats() -> set:
        """Every format Pillow is able to save"""
        Image.init()
        return set(Image.SAVE.keys())

    @classmethod
    def save(
        cls,
        texture: Union[Texture, np.ndarray],
        path: str | Path,
        format: Optional[str] = None
    ) -> Path:
        """Save a texture (or raw RGBA array)

        Args:
            texture: Texture or RGBA array (height, width, 4)
            path: Destination path
            format: Pillow format name (default: the texture's own format, then PNG)

        Returns:
            Path written to
        """
        path = Path(path)

        if isinstance(texture, Texture):
            pixels = texture.pixels
            format = format or texture.format
        else:
            pixels = texture

        format = (format or DEFAULT_FORMAT).upper()
        if format not in cls.supported_formats():
            raise ValueError(f"Unsupported output format: {format}")

        img = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
        if format in OPAQUE_FORMATS:
            img = img.convert('RGB')

        path.parent.mkdir(parents=True, exist_ok=True)
        img.save(path, format)

        return path
