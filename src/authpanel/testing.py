"""Test utilities for authpanel forms.

A recording submission handler and error-map assertions::

    from authpanel.testing import RecordingHandler, assert_field_error

    handler = RecordingHandler()
    async with FormSession(FormKind.LOGIN, handler, PanelConfig(submit_delay=0)) as form:
        await form.submit()
    assert_field_error(form.state, "email", "Email is required")
    assert handler.calls == []
"""

from authpanel.errors import SubmissionError
from authpanel.forms.session import Submission
from authpanel.forms.state import FormState
from authpanel.validation.fields import Field


class RecordingHandler:
    """Submission handler that records every submission it receives.

    Pass ``fail_with`` to make every call raise that ``SubmissionError``
    after recording the submission.
    """

    __slots__ = ("calls", "fail_with")

    def __init__(self, fail_with: SubmissionError | None = None) -> None:
        self.calls: list[Submission] = []
        self.fail_with = fail_with

    async def __call__(self, submission: Submission) -> None:
        self.calls.append(submission)
        if self.fail_with is not None:
            raise self.fail_with

    @property
    def call_count(self) -> int:
        return len(self.calls)


def assert_no_errors(state: FormState) -> None:
    """Assert no field of the form currently shows an error."""
    assert not state.errors, f"Expected no field errors, got {dict(state.errors)!r}"


def assert_field_error(state: FormState, field: Field | str, message: str | None = None) -> None:
    """Assert *field* shows an error, optionally with exactly *message*."""
    error = state.error(field)
    assert error is not None, (
        f"Expected an error on {str(field)!r}, got none.\n"
        f"Errors: {dict(state.errors)!r}"
    )
    if message is not None:
        assert error == message, (
            f"Expected error {message!r} on {str(field)!r}, got {error!r}"
        )


def assert_field_clean(state: FormState, field: Field | str) -> None:
    """Assert *field* shows no error."""
    error = state.error(field)
    assert error is None, f"Expected no error on {str(field)!r}, got {error!r}"
