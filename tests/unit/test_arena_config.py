"""Unit tests for configuration loading, validation and adaptation."""

import json
from pathlib import Path

import pytest

from arena.application.config import (
    ArenaConfiguration,
    ConfigError,
    config_to_court_input,
    config_to_edits,
    load_config,
    load_config_from_dict,
    validate_config,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


def _config(**court: object) -> dict:
    return {"schema_version": "1.0", "court": court}


class TestSchema:
    """Tests for the pydantic configuration schema."""

    def test_defaults(self) -> None:
        config = load_config_from_dict({"schema_version": "1.0"})
        assert config.court.mode == "full"
        assert (config.court.width, config.court.length) == (10, 15)
        assert config.edits == []
        assert config.output.format == "text"

    def test_newer_minor_version_accepted(self) -> None:
        assert load_config_from_dict({"schema_version": "1.4"}).schema_version == "1.4"

    def test_unsupported_major_version(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "2.0"})
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "schema_version"

    def test_unknown_field_reports_path(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_config(width=10, colour="green"))
        assert exc_info.value.details[0]["path"] == "court.colour"

    def test_height_out_of_range(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_config(end_wall_height=5))
        assert exc_info.value.details[0]["path"] == "court.end_wall_height"

    def test_edits_discriminated_by_op(self) -> None:
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "edits": [
                    {"op": "toggle_gate", "wall": "side1", "index": 2},
                    {"op": "set_wall_height", "wall": "end1", "height": 2},
                    {"op": "append_curved_corner", "side": "left"},
                ],
            }
        )
        assert [edit.op for edit in config.edits] == [
            "toggle_gate",
            "set_wall_height",
            "append_curved_corner",
        ]

    def test_unknown_edit_op(self) -> None:
        with pytest.raises(ConfigError):
            load_config_from_dict(
                {"schema_version": "1.0", "edits": [{"op": "paint", "wall": "end1"}]}
            )

    def test_edit_on_unknown_wall(self) -> None:
        with pytest.raises(ConfigError):
            load_config_from_dict(
                {"schema_version": "1.0", "edits": [{"op": "toggle_gate", "wall": "roof", "index": 0}]}
            )


class TestLoadConfig:
    """Tests for loading configuration files."""

    def test_fixture_loads(self) -> None:
        config = load_config(FIXTURES_PATH / "valid_with_edits.json")
        assert isinstance(config, ArenaConfiguration)
        assert len(config.edits) == 3
        assert config.output.include_layout

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 3

    def test_validation_error_keeps_path(self, tmp_path: Path) -> None:
        path = tmp_path / "court.json"
        path.write_text(json.dumps(_config(width="wide")))
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.path == path
        assert "court.width" in str(exc_info.value)


class TestValidateConfig:
    """Tests for semantic validation."""

    def test_valid_config(self) -> None:
        result = validate_config(load_config_from_dict(_config(width=10, length=15)))
        assert result.is_valid
        assert result.exit_code == 0

    @pytest.mark.parametrize(
        ("width", "message"),
        [(4, "at least 6m"), (3, "at least 5m"), (52, "maximum")],
    )
    def test_width_limits(self, width: int, message: str) -> None:
        result = validate_config(load_config_from_dict(_config(width=width)))
        assert result.exit_code == 1
        assert result.errors[0].path == "court.width"
        assert message in result.errors[0].message

    def test_length_limits(self) -> None:
        result = validate_config(load_config_from_dict(_config(length=81)))
        assert result.errors[0].path == "court.length"

    def test_large_court_warning(self) -> None:
        result = validate_config(load_config_from_dict(_config(width=31)))
        assert result.is_valid
        assert result.exit_code == 2
        assert "Very large court" in result.warnings[0].message

    def test_append_in_full_mode_warns(self) -> None:
        config = load_config(FIXTURES_PATH / "valid_with_warnings.json")
        result = validate_config(config)
        assert result.is_valid
        assert {w.path for w in result.warnings} == {"court", "edits[0]"}

    def test_end_wall_mode_skips_dimension_checks(self) -> None:
        config = load_config_from_dict(_config(mode="end_wall", width=1, length=0))
        assert validate_config(config).exit_code == 0

    def test_end_wall_mode_rejects_other_walls(self) -> None:
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "court": {"mode": "end_wall"},
                "edits": [{"op": "toggle_gate", "wall": "side1", "index": 0}],
            }
        )
        result = validate_config(config)
        assert result.errors[0].path == "edits[0].wall"


class TestAdapter:
    """Tests for configuration to DTO conversion."""

    def test_court_input(self) -> None:
        config = load_config_from_dict(_config(width=12, length=20, end_wall_height=4))
        court_input = config_to_court_input(config)
        assert (court_input.width, court_input.length) == (12, 20)
        assert court_input.end_wall_height == 4
        assert court_input.validate() == []

    def test_edit_requests_use_plain_strings(self) -> None:
        config = load_config(FIXTURES_PATH / "end_wall.json")
        edits = config_to_edits(config)
        assert edits[0].op == "append_section"
        assert edits[0].side == "left"
        assert edits[0].width == 2
        assert edits[2].op == "append_curved_corner"
        assert edits[2].wall is None
