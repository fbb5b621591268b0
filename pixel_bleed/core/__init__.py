"""
Pixel Bleed - Core
"""

from .edges import EdgeMode, resolve, resolve_array
from .grid import VoronoiGrid, NO_SEED
from .jump_flood import (
    # Sample pattern
    SAMPLE_OFFSETS, CARDINAL_MULT, DIAGONAL_MULT,
    # Radius schedule
    initial_search_radius, search_radii,
    # Propagation
    nearest_candidate, propagate_round, jump_flood,
)
from .seeding import seed_from_alpha, seed_from_mask
from .readout import OutputMode, READOUT_MESSAGES, resolved_seeds, distance_field, render
from .parser import TextureParser, Texture
from .exporter import TextureExporter
from .presets import (
    BleedConfig, load_config,
    PresetManager, BUILTIN_PRESETS,
    get_preset_manager, get_preset, list_presets,
)

__all__ = [
    'EdgeMode', 'resolve', 'resolve_array',
    'VoronoiGrid', 'NO_SEED',
    'SAMPLE_OFFSETS', 'CARDINAL_MULT', 'DIAGONAL_MULT',
    'initial_search_radius', 'search_radii',
    'nearest_candidate', 'propagate_round', 'jump_flood',
    'seed_from_alpha', 'seed_from_mask',
    'OutputMode', 'READOUT_MESSAGES', 'resolved_seeds', 'distance_field', 'render',
    'TextureParser', 'Texture', 'TextureExporter',
    'BleedConfig', 'load_config',
    'PresetManager', 'BUILTIN_PRESETS',
    'get_preset_manager', 'get_preset', 'list_presets',
]
