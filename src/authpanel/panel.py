"""The auth panel — login and register forms behind a tab switcher.

Both forms stay mounted while the panel is open, so switching tabs never
discards what the user typed. Closing the panel tears both forms down.
"""

import logging
from enum import StrEnum
from types import TracebackType
from typing import Self

from authpanel.config import PanelConfig
from authpanel.forms.session import FormSession, SubmissionHandler
from authpanel.forms.state import FormKind

logger = logging.getLogger("authpanel.panel")


class Tab(StrEnum):
    LOGIN = "login"
    REGISTER = "register"


class AuthPanel:
    """Parent container for the login and register forms.

    Each form gets the callback that switches to the other one, so
    ``form.switch()`` on the login form shows the register form.

    Usage::

        async with AuthPanel(on_login=login, on_register=register) as panel:
            panel.switch_to_register()
            panel.active.change("name", "Ada")
    """

    __slots__ = ("_active", "_config", "login", "register")

    def __init__(
        self,
        on_login: SubmissionHandler,
        on_register: SubmissionHandler,
        config: PanelConfig | None = None,
    ) -> None:
        self._config = config or PanelConfig()
        self.login = FormSession(
            FormKind.LOGIN, on_login, self._config, on_switch=self.switch_to_register,
        )
        self.register = FormSession(
            FormKind.REGISTER, on_register, self._config, on_switch=self.switch_to_login,
        )
        self._active = Tab(self._config.initial_tab)

    @property
    def active_tab(self) -> Tab:
        return self._active

    @property
    def active(self) -> FormSession:
        """The form currently shown."""
        if self._active is Tab.LOGIN:
            return self.login
        return self.register

    def switch_to_login(self) -> None:
        self._switch(Tab.LOGIN)

    def switch_to_register(self) -> None:
        self._switch(Tab.REGISTER)

    def _switch(self, tab: Tab) -> None:
        if tab is not self._active:
            logger.debug("Switching auth panel tab: %s -> %s", self._active, tab)
        self._active = tab

    def close(self) -> None:
        self.login.close()
        self.register.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
