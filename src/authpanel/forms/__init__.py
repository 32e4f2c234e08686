"""Login and register forms.

``transition()`` is the pure core: ``(FormState, Event) -> FormState``.
``FormSession`` wraps it with a submission handler and a lifetime.
"""

from authpanel.forms.session import FormSession, Submission, SubmissionHandler, SubmitOutcome
from authpanel.forms.state import (
    Blur,
    Change,
    Event,
    FormKind,
    FormState,
    Submit,
    check_field,
    transition,
    validate_all,
)

__all__ = [
    "Blur",
    "Change",
    "Event",
    "FormKind",
    "FormSession",
    "FormState",
    "Submission",
    "SubmissionHandler",
    "Submit",
    "SubmitOutcome",
    "check_field",
    "transition",
    "validate_all",
]
