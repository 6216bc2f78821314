"""Tests for the tilemath.checks module."""

from unittest.mock import patch

import pytest
from dynaconf import Dynaconf

from tilemath import checks, config


class TestRequire:
    """Tests for the require function."""

    def test_passes_when_condition_holds(self):
        """require should do nothing for a true condition."""
        checks.require(True, "never shown")

    def test_raises_when_condition_fails(self):
        """require should raise AssertionError with the message."""
        with pytest.raises(AssertionError, match="broken"):
            checks.require(False, "broken")

    def test_silent_when_disabled(self, monkeypatch):
        """require should skip the check when ENABLED is False."""
        monkeypatch.setattr(checks, "ENABLED", False)
        checks.require(False, "broken")


class TestUnchecked:
    """Tests for the unchecked context manager."""

    def test_disables_inside_block(self):
        """unchecked should turn checks off inside the block."""
        with checks.unchecked():
            assert checks.ENABLED is False
            checks.require(False, "broken")

    def test_restores_previous_state(self):
        """unchecked should restore ENABLED after the block."""
        with checks.unchecked():
            pass
        assert checks.ENABLED is True

    def test_restores_after_exception(self):
        """unchecked should restore ENABLED even if the block raises."""
        with pytest.raises(RuntimeError):
            with checks.unchecked():
                raise RuntimeError("boom")
        assert checks.ENABLED is True


class TestEnabled:
    """Tests for the enabled function."""

    @patch.object(config, 'check_preconditions', return_value=False)
    def test_defers_to_setting(self, mock_check, monkeypatch):
        """With no override, enabled should follow the setting."""
        monkeypatch.setattr(checks, "ENABLED", None)
        assert checks.enabled() is False
        checks.require(False, "broken")

    @patch.object(config, 'check_preconditions', return_value=False)
    def test_override_wins(self, mock_check):
        """An explicit ENABLED value should take precedence over the setting."""
        assert checks.enabled() is True
        mock_check.assert_not_called()

    def test_follows_environment_switch(self, monkeypatch, tmp_path):
        """Switching environments should update the checks without re-import."""
        settings_file = tmp_path / "settings.toml"
        settings_file.write_text(
            "[default]\ncheck_preconditions = true\n"
            "[production]\ncheck_preconditions = false\n"
        )
        monkeypatch.setattr(config, "settings", Dynaconf(
            settings_files=[str(settings_file)], environments=True))
        monkeypatch.setattr(checks, "ENABLED", None)

        assert checks.enabled() is True
        config.change_env("production")
        assert checks.enabled() is False
        with checks.unchecked():
            pass
        assert checks.ENABLED is None
