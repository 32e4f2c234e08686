"""Tests for authpanel.config — PanelConfig frozen dataclass."""

import pytest

from authpanel.config import PanelConfig
from authpanel.errors import ConfigurationError


class TestPanelConfig:
    def test_defaults(self) -> None:
        cfg = PanelConfig()

        assert cfg.submit_delay == 1.0
        assert cfg.reset_register_on_success is True
        assert cfg.initial_tab == "login"

    def test_override(self) -> None:
        cfg = PanelConfig(submit_delay=0, reset_register_on_success=False, initial_tab="register")

        assert cfg.submit_delay == 0
        assert cfg.reset_register_on_success is False
        assert cfg.initial_tab == "register"

    def test_frozen(self) -> None:
        cfg = PanelConfig()

        with pytest.raises(AttributeError):
            cfg.submit_delay = 5.0  # type: ignore[misc]

    @pytest.mark.parametrize("delay", [-1.0, float("nan"), float("inf")])
    def test_bad_delay(self, delay: float) -> None:
        with pytest.raises(ConfigurationError, match="submit_delay"):
            PanelConfig(submit_delay=delay)

    def test_bad_tab(self) -> None:
        with pytest.raises(ConfigurationError, match="initial_tab must be one of: login, register"):
            PanelConfig(initial_tab="signup")
