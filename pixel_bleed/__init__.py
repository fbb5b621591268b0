"""
Pixel Bleed - Jump-flood colour bleeding, UV maps and distance fields for textures
"""

from .core import (
    EdgeMode, OutputMode, VoronoiGrid,
    TextureParser, Texture, TextureExporter,
    BleedConfig, jump_flood, seed_from_alpha, render,
)
from .core.jump_flood import initial_search_radius
from .core.readout import READOUT_MESSAGES

__version__ = "0.1.0"
__all__ = [
    'EdgeMode',
    'OutputMode',
    'VoronoiGrid',
    'TextureParser',
    'Texture',
    'TextureExporter',
    'BleedConfig',
    'jump_flood',
    'seed_from_alpha',
    'render',
    'process',
    'bleed',
]


def process(
    texture: Texture,
    config: BleedConfig = None,
    verbose: bool = True
) -> Texture:
    """
    Flood a decoded texture and paint the requested output.

    Args:
        texture: Source texture
        config: Run settings (defaults: zero edges, bleed, preserve alpha > 0)
        verbose: Print progress

    Returns:
        New Texture with the painted pixels and the source format
    """
    config = (config or BleedConfig()).validate()
    log = print if verbose else (lambda *args, **kwargs: None)

    log(f"Image size is {texture.width} by {texture.height}")
    log(f"Will use a search radius of {initial_search_radius(texture.width, texture.height)}")
    log(f"Will preserve alpha above {config.preserve_above}")
    log(f"Will use {config.edge_mode} edge behaviour")

    log("Preparing Voronoi graph for filling...")
    grid = seed_from_alpha(texture.pixels, config.preserve_above)

    log("Filling Voronoi graph...")
    flooded = jump_flood(grid, config.edge_mode)

    log(READOUT_MESSAGES[config.output_as])
    pixels = render(texture.pixels, flooded, config.output_as, config.edge_mode)

    result = texture.copy()
    result.pixels = pixels
    return result


def bleed(
    image_path: str,
    output_path: str = None,
    edge_mode: str = None,
    output_as: str = None,
    preserve_above: int = None,
    config: BleedConfig = None,
    verbose: bool = True
):
    """
    Load an image, flood it and save the result.

    Args:
        image_path: Path to the source image
        output_path: Where to write (default: overwrite the source image)
        edge_mode: 'clamp', 'repeat' or 'zero' (overrides config)
        output_as: 'bleed', 'coverage', 'uv' or 'distance' (overrides config)
        preserve_above: Alpha threshold for seeds (overrides config)
        config: Base settings, e.g. a preset
        verbose: Print progress

    Returns:
        Path to the written image
    """
    config = (config or BleedConfig()).merged(
        edge_mode=edge_mode,
        output_as=output_as,
        preserve_above=preserve_above,
    )
    log = print if verbose else (lambda *args, **kwargs: None)

    log(f"Loading image from {image_path}...")
    texture = TextureParser.parse(image_path)

    result = process(texture, config, verbose=verbose)

    output_path = output_path or image_path
    log(f"Saving image to {output_path}...")
    path = TextureExporter.save(result, output_path, texture.format)
    log("Completed!")
    return path
