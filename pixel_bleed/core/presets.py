"""
Bleed Presets - Named run configurations
Built-in presets plus user presets stored as YAML files
"""

import yaml
from pathlib import Path
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field

from .edges import EdgeMode
from .readout import OutputMode


# ============================================================================
# Run configuration
# ============================================================================

@dataclass
class BleedConfig:
    """Settings for one bleed run"""

    name: str = "custom"
    description: str = ""

    edge_mode: EdgeMode = EdgeMode.ZERO
    output_as: OutputMode = OutputMode.BLEED

    # Pixels with alpha strictly above this are kept as seeds
    preserve_above: int = 0

    tags: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.edge_mode = EdgeMode.parse(self.edge_mode)
        self.output_as = OutputMode.parse(self.output_as)

    def validate(self) -> 'BleedConfig':
        """Raise ValueError if any setting is out of range"""
        if isinstance(self.preserve_above, bool) or not isinstance(self.preserve_above, int):
            raise ValueError(f"preserve_above must be an integer, got {self.preserve_above!r}")
        if not 0 <= self.preserve_above <= 255:
            raise ValueError(f"preserve_above must be 0-255, got {self.preserve_above}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary for YAML serialization"""
        data = {
            'name': self.name,
            'description': self.description,
            'edge_mode': self.edge_mode.value,
            'output_as': self.output_as.value,
            'preserve_above': self.preserve_above,
            'tags': list(self.tags),
        }
        return {k: v for k, v in data.items() if v or k == 'preserve_above'}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BleedConfig':
        """Create from dictionary, ignoring unknown keys"""
        data = {k.replace('-', '_'): v for k, v in data.items()}
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered).validate()

    def merged(self, **overrides) -> 'BleedConfig':
        """Copy with every non-None override applied"""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return BleedConfig.from_dict(data)


def load_config(path: str | Path) -> BleedConfig:
    """Load a single run configuration from a YAML file"""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    data.setdefault('name', path.stem)
    return BleedConfig.from_dict(data)


# ============================================================================
# Built-in Presets
# ============================================================================

BUILTIN_PRESETS: Dict[str, Dict[str, Any]] = {
    "texture_padding": {
        "description": "Bleed opaque colours into transparent padding",
        "edge_mode": "zero",
        "output_as": "bleed",
        "tags": ["bleed", "padding"],
    },

    "tiling_padding": {
        "description": "Bleed colours across edges of a tiling texture",
        "edge_mode": "repeat",
        "output_as": "bleed",
        "tags": ["bleed", "tiling"],
    },

    "soft_edge_padding": {
        "description": "Keep only mostly-opaque pixels, bleed over soft edges",
        "edge_mode": "clamp",
        "output_as": "bleed",
        "preserve_above": 127,
        "tags": ["bleed", "padding"],
    },

    "uv_lookup": {
        "description": "Encode each pixel's nearest opaque pixel as a UV map",
        "edge_mode": "clamp",
        "output_as": "uv",
        "tags": ["uv", "lookup"],
    },

    "coverage_mask": {
        "description": "White where any opaque pixel was reached",
        "edge_mode": "zero",
        "output_as": "coverage",
        "tags": ["mask"],
    },

    "distance_field": {
        "description": "Grayscale distance to the nearest opaque pixel",
        "edge_mode": "clamp",
        "output_as": "distance",
        "tags": ["distance", "sdf"],
    },
}


# ============================================================================
# Preset Manager
# ============================================================================

class PresetManager:
    """
    Loads built-in and user presets.
    """

    def __init__(self, user_presets_dir: Optional[Path] = None):
        """
        Initialize preset manager.

        Args:
            user_presets_dir: Directory for user presets (default: ~/.pixel-bleed/presets)
        """
        self.user_presets_dir = Path(user_presets_dir or Path.home() / '.pixel-bleed' / 'presets')

        self._builtin: Dict[str, BleedConfig] = {}
        self._user: Dict[str, BleedConfig] = {}

        self._load_builtin_presets()
        self._load_user_presets()

    def _load_builtin_presets(self) -> None:
        for name, data in BUILTIN_PRESETS.items():
            self._builtin[name] = BleedConfig.from_dict({**data, 'name': name})

    def _load_user_presets(self) -> None:
        """Load user-defined presets from YAML files"""
        if not self.user_presets_dir.is_dir():
            return

        for yaml_file in sorted(self.user_presets_dir.glob('*.yaml')):
            try:
                with open(yaml_file, 'r') as f:
                    data = yaml.safe_load(f)

                if isinstance(data, dict):
                    if 'presets' in data:
                        # Multiple presets in one file
                        for name, preset_data in data['presets'].items():
                            self._user[name] = BleedConfig.from_dict({**preset_data, 'name': name})
                    else:
                        name = yaml_file.stem
                        self._user[name] = BleedConfig.from_dict({**data, 'name': name})
            except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
                print(f"Warning: Could not load preset file {yaml_file}: {e}")

    def get(self, name: str) -> Optional[BleedConfig]:
        """
        Get a preset by name.
        User presets override built-in presets with same name.
        """
        return self._user.get(name) or self._builtin.get(name)

    def exists(self, name: str) -> bool:
        return name in self._user or name in self._builtin

    def list_all(self) -> List[str]:
        """List all preset names"""
        return sorted(set(self._builtin) | set(self._user))

    def list_by_tag(self, tag: str) -> List[str]:
        """List presets with a specific tag"""
        matches = []
        for name, preset in {**self._builtin, **self._user}.items():
            if tag.lower() in [t.lower() for t in preset.tags]:
                matches.append(name)
        return sorted(matches)

    def save_preset(self, preset: BleedConfig, filename: Optional[str] = None) -> Path:
        """
        Save a user preset to YAML file.

        Returns:
            Path to saved file
        """
        filename = filename or f"{preset.name}.yaml"
        if not filename.endswith('.yaml'):
            filename += '.yaml'

        self.user_presets_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.user_presets_dir / filename

        with open(filepath, 'w') as f:
            yaml.dump(preset.to_dict(), f, default_flow_style=False, sort_keys=False)

        self._user[preset.name] = preset
        return filepath


_manager: Optional[PresetManager] = None


def get_preset_manager() -> PresetManager:
    """Shared PresetManager using the default user directory"""
    global _manager
    if _manager is None:
        _manager = PresetManager()
    return _manager


def get_preset(name: str) -> Optional[BleedConfig]:
    return get_preset_manager().get(name)


def list_presets() -> List[str]:
    return get_preset_manager().list_all()
