"""Tests for configuration management."""

import pytest

from wireframe_layout.schema import Direction, Viewport

from .lib import (
    EnvConfig,
    EnvVar,
    get_default_direction,
    get_default_viewport,
    get_environment,
    get_environment_info,
    get_float_tolerance,
    get_json_indent,
    get_log_level,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("WIREFRAME_JSON_INDENT", raising=False)
        assert get_environment(EnvVar.WIREFRAME_JSON_INDENT) == 2

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("WIREFRAME_JSON_INDENT", "8")
        assert get_environment(EnvVar.WIREFRAME_JSON_INDENT, override=4) == 4

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("WIREFRAME_JSON_INDENT", "8")
        result = get_environment(EnvVar.WIREFRAME_JSON_INDENT)
        assert result == 8
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_float_type_conversion(self, monkeypatch):
        """Float type conversion from string."""
        monkeypatch.setenv("WIREFRAME_FLOAT_TOLERANCE", "0.5")
        assert get_environment(EnvVar.WIREFRAME_FLOAT_TOLERANCE) == 0.5

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("WIREFRAME_JSON_INDENT", "not-a-number")
        assert get_environment(EnvVar.WIREFRAME_JSON_INDENT) == 2

    @pytest.mark.unit
    def test_invalid_float_returns_default(self, monkeypatch):
        """Invalid float value returns default."""
        monkeypatch.setenv("WIREFRAME_FLOAT_TOLERANCE", "tiny")
        assert get_environment(EnvVar.WIREFRAME_FLOAT_TOLERANCE) == 1e-6

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("WIREFRAME_VIEWPORT", "desktop")
        assert get_environment(EnvVar.WIREFRAME_VIEWPORT) == "desktop"


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.WIREFRAME_VIEWPORT)
        assert isinstance(info, EnvConfig)
        assert info.name == "WIREFRAME_VIEWPORT"
        assert info.default == "mobile"
        assert info.var_type is str
        assert info.category == "layout"

    @pytest.mark.unit
    @pytest.mark.parametrize("env_var", list(EnvVar))
    def test_declared_types_are_convertible(self, env_var, monkeypatch):
        """Every variable uses a type the converter handles."""
        config = env_var.value
        assert config.var_type in (str, int, float)
        assert isinstance(config.default, config.var_type)
        monkeypatch.setenv(config.name, str(config.default))
        assert get_environment(env_var) == config.default

    @pytest.mark.unit
    def test_description_present(self):
        """Every variable carries a description."""
        for var in EnvVar:
            assert get_environment_info(var).description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_list_all(self):
        """Without a category every variable is returned."""
        assert list_environment_variables() == list(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Category filter only returns matching variables."""
        layout_vars = list_environment_variables("layout")
        assert EnvVar.WIREFRAME_VIEWPORT in layout_vars
        assert EnvVar.WIREFRAME_LOG_LEVEL not in layout_vars
        assert all(v.value.category == "layout" for v in layout_vars)

    @pytest.mark.unit
    def test_unknown_category(self):
        assert list_environment_variables("nope") == []


# =============================================================================
# Convenience functions
# =============================================================================


class TestDefaults:
    """Tests for document default helpers."""

    @pytest.mark.unit
    def test_viewport_default(self, monkeypatch):
        monkeypatch.delenv("WIREFRAME_VIEWPORT", raising=False)
        assert get_default_viewport() is Viewport.MOBILE

    @pytest.mark.unit
    def test_viewport_from_env(self, monkeypatch):
        monkeypatch.setenv("WIREFRAME_VIEWPORT", "tablet")
        assert get_default_viewport() is Viewport.TABLET

    @pytest.mark.unit
    def test_viewport_invalid_env_falls_back(self, monkeypatch):
        monkeypatch.setenv("WIREFRAME_VIEWPORT", "watch")
        assert get_default_viewport() is Viewport.MOBILE

    @pytest.mark.unit
    def test_viewport_override(self, monkeypatch):
        monkeypatch.setenv("WIREFRAME_VIEWPORT", "tablet")
        assert get_default_viewport("desktop") is Viewport.DESKTOP

    @pytest.mark.unit
    def test_direction_default(self, monkeypatch):
        monkeypatch.delenv("WIREFRAME_DIRECTION", raising=False)
        assert get_default_direction() is Direction.LR

    @pytest.mark.unit
    def test_direction_from_env(self, monkeypatch):
        monkeypatch.setenv("WIREFRAME_DIRECTION", "TD")
        assert get_default_direction() is Direction.TD

    @pytest.mark.unit
    def test_direction_invalid_env_falls_back(self, monkeypatch):
        monkeypatch.setenv("WIREFRAME_DIRECTION", "diagonal")
        assert get_default_direction() is Direction.LR

    @pytest.mark.unit
    def test_log_level_uppercased(self, monkeypatch):
        monkeypatch.setenv("WIREFRAME_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    @pytest.mark.unit
    def test_json_indent_zero_is_compact(self, monkeypatch):
        monkeypatch.setenv("WIREFRAME_JSON_INDENT", "0")
        assert get_json_indent() is None

    @pytest.mark.unit
    def test_json_indent_default(self, monkeypatch):
        monkeypatch.delenv("WIREFRAME_JSON_INDENT", raising=False)
        assert get_json_indent() == 2

    @pytest.mark.unit
    def test_float_tolerance_is_positive(self):
        assert get_float_tolerance(-0.25) == 0.25
