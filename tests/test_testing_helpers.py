"""Tests for authpanel.testing — recording handler and error assertions."""

import pytest

from authpanel.errors import SubmissionError
from authpanel.forms import Blur, FormKind, FormState, Submission, transition
from authpanel.testing import (
    RecordingHandler,
    assert_field_clean,
    assert_field_error,
    assert_no_errors,
)


class TestRecordingHandler:
    @pytest.mark.anyio
    async def test_records_calls(self) -> None:
        handler = RecordingHandler()
        submission = Submission(form=FormKind.LOGIN, values={"email": "a@b.co"})
        await handler(submission)
        assert handler.calls == [submission]
        assert handler.call_count == 1

    @pytest.mark.anyio
    async def test_records_then_raises(self) -> None:
        handler = RecordingHandler(fail_with=SubmissionError("nope"))
        with pytest.raises(SubmissionError, match="nope"):
            await handler(Submission(form=FormKind.LOGIN, values={}))
        assert handler.call_count == 1


class TestAssertions:
    def test_no_errors_passes(self) -> None:
        assert_no_errors(FormState.empty(FormKind.LOGIN))

    def test_no_errors_fails(self) -> None:
        state = transition(FormState.empty(FormKind.LOGIN), Blur("email"))
        with pytest.raises(AssertionError, match="Expected no field errors"):
            assert_no_errors(state)

    def test_field_error_message_mismatch(self) -> None:
        state = transition(FormState.empty(FormKind.LOGIN), Blur("email"))
        with pytest.raises(AssertionError, match="Expected error"):
            assert_field_error(state, "email", "Something else")

    def test_field_error_missing(self) -> None:
        with pytest.raises(AssertionError, match="got none"):
            assert_field_error(FormState.empty(FormKind.LOGIN), "email")

    def test_field_clean_fails(self) -> None:
        state = transition(FormState.empty(FormKind.LOGIN), Blur("email"))
        with pytest.raises(AssertionError, match="Expected no error on 'email'"):
            assert_field_clean(state, "email")
