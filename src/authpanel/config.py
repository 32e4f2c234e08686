"""Panel configuration.

PanelConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

import math
from dataclasses import dataclass

from authpanel.errors import ConfigurationError

_TABS = ("login", "register")


@dataclass(frozen=True, slots=True)
class PanelConfig:
    """Panel configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = PanelConfig(submit_delay=0.0, initial_tab="register")
    """

    # Submission
    submit_delay: float = 1.0  # Simulated latency before the handler runs (seconds)
    reset_register_on_success: bool = True

    # Panel
    initial_tab: str = "login"

    def __post_init__(self) -> None:
        if not math.isfinite(self.submit_delay) or self.submit_delay < 0:
            msg = f"submit_delay must be a non-negative number, got {self.submit_delay!r}"
            raise ConfigurationError(msg)
        if self.initial_tab not in _TABS:
            allowed = ", ".join(_TABS)
            msg = f"initial_tab must be one of: {allowed} (got {self.initial_tab!r})"
            raise ConfigurationError(msg)
