"""Form sessions — a live form bound to a submission handler.

``FormSession`` owns one ``FormState`` for as long as the form is shown.
Input events apply synchronously through ``transition()``. Submission is
the only asynchronous step: it waits out the configured delay, then calls
the handler, all inside a cancel scope owned by the session. Closing the
session cancels an in-flight submission, so nothing a submission does can
outlive the form::

    async with FormSession(FormKind.LOGIN, handler=on_login) as form:
        form.change("email", "ada@example.com")
        form.change("password", "Abcdef1!")
        outcome = await form.submit()
"""

import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import TracebackType
from typing import Self

import anyio

from authpanel.config import PanelConfig
from authpanel.errors import SubmissionError
from authpanel.forms.state import Blur, Change, FormKind, FormState, Submit, transition
from authpanel.validation.fields import Field

logger = logging.getLogger("authpanel.forms")

_SECRET_FIELDS = frozenset({Field.PASSWORD, Field.CONFIRM_PASSWORD})
_GENERIC_FAILURE = "Something went wrong. Please try again."


@dataclass(frozen=True, slots=True)
class Submission:
    """What a submission handler receives: the form and its values."""

    form: FormKind
    values: Mapping[str, str]

    def redacted(self) -> dict[str, str]:
        """Values safe to log — password fields dropped."""
        return {
            str(name): value
            for name, value in self.values.items()
            if name not in _SECRET_FIELDS
        }


type SubmissionHandler = Callable[[Submission], Awaitable[None] | None]


class SubmitOutcome(StrEnum):
    SUBMITTED = "submitted"
    INVALID = "invalid"
    BUSY = "busy"
    FAILED = "failed"
    CANCELLED = "cancelled"


class FormSession:
    """One mounted form: its state, its handler, and its lifetime."""

    __slots__ = ("_closed", "_config", "_handler", "_on_switch", "_scope", "_state")

    def __init__(
        self,
        kind: FormKind,
        handler: SubmissionHandler,
        config: PanelConfig | None = None,
        on_switch: Callable[[], None] | None = None,
    ) -> None:
        self._config = config or PanelConfig()
        self._handler = handler
        self._on_switch = on_switch
        self._state = FormState.empty(kind)
        self._scope: anyio.CancelScope | None = None
        self._closed = False

    @property
    def kind(self) -> FormKind:
        return self._state.kind

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    # -- Input events --

    def change(self, field: Field | str, value: str) -> FormState:
        self._state = transition(self._state, Change(field, value))
        return self._state

    def blur(self, field: Field | str) -> FormState:
        self._state = transition(self._state, Blur(field))
        return self._state

    def switch(self) -> bool:
        """Ask the parent to show the other form.

        Returns False when no parent registered a switch callback.
        """
        if self._on_switch is None:
            return False
        self._on_switch()
        return True

    # -- Submission --

    async def submit(self) -> SubmitOutcome:
        """Validate every field and, if all pass, call the handler once.

        Returns how the attempt ended. A submit while another is in flight
        is ignored (``BUSY``). Handler failures become ``form_error``
        (``FAILED``); field errors are left as validation set them.
        """
        if self._closed:
            logger.debug("Ignoring submit on closed %s form", self.kind)
            return SubmitOutcome.CANCELLED
        if self._state.is_submitting:
            logger.debug("Ignoring submit: %s form is already submitting", self.kind)
            return SubmitOutcome.BUSY

        self._state = transition(self._state, Submit())
        if not self._state.is_valid:
            logger.debug(
                "%s form rejected: invalid fields %s",
                self.kind, sorted(str(f) for f in self._state.errors),
            )
            return SubmitOutcome.INVALID

        submission = Submission(form=self.kind, values=dict(self._state.data))
        self._state = self._state.evolve(is_submitting=True)
        logger.info("%s form submitted: %s", self.kind, submission.redacted())
        try:
            return await self._deliver(submission)
        finally:
            # Also reached when the caller's own scope is cancelled
            if self._state.is_submitting:
                self._state = self._state.evolve(is_submitting=False)

    async def _deliver(self, submission: Submission) -> SubmitOutcome:
        form_error: str | None = None
        with anyio.CancelScope() as scope:
            self._scope = scope
            try:
                if self._config.submit_delay:
                    await anyio.sleep(self._config.submit_delay)
                result = self._handler(submission)
                if inspect.isawaitable(result):
                    await result
            except SubmissionError as exc:
                logger.warning("%s submission failed: %s", self.kind, exc.detail)
                form_error = exc.detail
            except Exception:
                logger.exception("%s submission handler raised", self.kind)
                form_error = _GENERIC_FAILURE
            finally:
                self._scope = None

        if scope.cancelled_caught or self._closed:
            logger.debug("%s submission cancelled", self.kind)
            return SubmitOutcome.CANCELLED

        if form_error is not None:
            self._state = self._state.evolve(form_error=form_error)
            return SubmitOutcome.FAILED

        if self.kind is FormKind.REGISTER and self._config.reset_register_on_success:
            self._state = FormState.empty(self.kind)
        return SubmitOutcome.SUBMITTED

    # -- Lifetime --

    def close(self) -> None:
        """Tear the form down, cancelling any in-flight submission."""
        if self._closed:
            return
        self._closed = True
        if self._scope is not None:
            self._scope.cancel()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
