"""
Tests for configuration parsing.
"""

from utils.config import (
    DEFAULT_CSM_NAMES,
    DEFAULT_EXCLUDED_VA_NAMES,
    config,
    parse_name_list,
)


class TestParseNameList:

    def test_comma_separated(self):
        assert parse_name_list(" Ana , Luis,,Marco ", []) == ["Ana", "Luis", "Marco"]

    def test_list_value(self):
        assert parse_name_list(["Ana ", ""], []) == ["Ana"]

    def test_missing_uses_default_copy(self):
        names = parse_name_list(None, DEFAULT_CSM_NAMES)
        names.append("Someone")
        assert "Someone" not in DEFAULT_CSM_NAMES


class TestConfig:

    def test_db_config_from_environment(self):
        db_config = config.get_db_config()
        assert db_config["host"]
        assert isinstance(db_config["port"], int)

    def test_roster_is_a_copy(self):
        roster = config.get_roster("excluded_va_names")
        roster.append("Extra")
        assert "Extra" not in config.get_roster("excluded_va_names")

    def test_app_settings_defaults(self):
        assert config.get_app_setting("FETCH_PAGE_SIZE") > 0
        assert config.get_app_setting("MISSING_KEY", "fallback") == "fallback"

    def test_default_va_exclusions(self):
        assert "Yennifer" in DEFAULT_EXCLUDED_VA_NAMES
