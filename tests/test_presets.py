"""Tests for run configuration and presets."""

import pytest
import yaml

from pixel_bleed.core.edges import EdgeMode
from pixel_bleed.core.presets import (
    BUILTIN_PRESETS,
    BleedConfig,
    PresetManager,
    load_config,
)
from pixel_bleed.core.readout import OutputMode


def test_defaults_match_cli_defaults():
    config = BleedConfig()
    assert config.edge_mode is EdgeMode.ZERO
    assert config.output_as is OutputMode.BLEED
    assert config.preserve_above == 0


def test_from_dict_parses_names_and_ignores_unknown_keys():
    config = BleedConfig.from_dict({
        "edge-mode": "Repeat",
        "output_as": "uv",
        "preserve_above": 10,
        "colour": "red",
    })
    assert config.edge_mode is EdgeMode.REPEAT
    assert config.output_as is OutputMode.UV
    assert config.preserve_above == 10


@pytest.mark.parametrize("data", [
    {"preserve_above": 300},
    {"preserve_above": "high"},
    {"edge_mode": "mirror"},
    {"output_as": "normals"},
])
def test_invalid_values_are_rejected(data):
    with pytest.raises(ValueError):
        BleedConfig.from_dict(data)


def test_merged_applies_only_given_overrides():
    base = BleedConfig(edge_mode=EdgeMode.CLAMP, preserve_above=50)
    merged = base.merged(output_as="distance", edge_mode=None, preserve_above=None)

    assert merged.edge_mode is EdgeMode.CLAMP
    assert merged.output_as is OutputMode.DISTANCE
    assert merged.preserve_above == 50


def test_builtin_presets_load(tmp_path):
    manager = PresetManager(tmp_path)

    assert set(BUILTIN_PRESETS) <= set(manager.list_all())
    assert manager.get("tiling_padding").edge_mode is EdgeMode.REPEAT
    assert manager.get("distance_field").output_as is OutputMode.DISTANCE
    assert manager.list_by_tag("BLEED") == ["soft_edge_padding", "texture_padding", "tiling_padding"]
    assert manager.get("missing") is None


def test_user_presets_override_builtins(tmp_path):
    (tmp_path / "texture_padding.yaml").write_text(yaml.dump({"edge_mode": "clamp"}))
    (tmp_path / "pack.yaml").write_text(yaml.dump({
        "presets": {
            "atlas": {"output_as": "coverage", "preserve_above": 5},
        }
    }))

    manager = PresetManager(tmp_path)

    assert manager.get("texture_padding").edge_mode is EdgeMode.CLAMP
    assert manager.get("atlas").output_as is OutputMode.COVERAGE
    assert manager.get("atlas").preserve_above == 5


def test_broken_preset_file_is_skipped_with_warning(tmp_path, capsys):
    (tmp_path / "broken.yaml").write_text("edge_mode: [unclosed")
    (tmp_path / "bad_value.yaml").write_text(yaml.dump({"edge_mode": "mirror"}))

    manager = PresetManager(tmp_path)

    assert not manager.exists("broken")
    assert not manager.exists("bad_value")
    assert capsys.readouterr().out.count("Warning: Could not load preset file") == 2


def test_save_preset_round_trips(tmp_path):
    manager = PresetManager(tmp_path / "presets")
    preset = BleedConfig(name="mine", edge_mode="repeat", output_as="uv", preserve_above=3)

    path = manager.save_preset(preset)

    assert path.exists()
    assert PresetManager(tmp_path / "presets").get("mine") == preset


def test_load_config_file(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("edge_mode: clamp\noutput_as: distance\npreserve_above: 127\n")

    config = load_config(path)

    assert config.name == "run"
    assert config.edge_mode is EdgeMode.CLAMP
    assert config.output_as is OutputMode.DISTANCE
    assert config.preserve_above == 127


def test_load_config_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")

    path = tmp_path / "list.yaml"
    path.write_text("- clamp\n- zero\n")
    with pytest.raises(ValueError, match="mapping"):
        load_config(path)
