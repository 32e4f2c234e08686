"""Tests for authpanel.errors — exception hierarchy and error messages."""

from authpanel.errors import (
    AuthPanelError,
    ConfigurationError,
    SubmissionError,
    UnknownFieldError,
)


class TestHierarchy:
    def test_configuration_error_is_authpanel_error(self) -> None:
        assert issubclass(ConfigurationError, AuthPanelError)

    def test_submission_error_is_authpanel_error(self) -> None:
        assert issubclass(SubmissionError, AuthPanelError)

    def test_unknown_field_is_authpanel_and_key_error(self) -> None:
        assert issubclass(UnknownFieldError, AuthPanelError)
        assert issubclass(UnknownFieldError, KeyError)


class TestMessages:
    def test_unknown_field(self) -> None:
        assert str(UnknownFieldError("phone")) == "Unknown field 'phone'"

    def test_unknown_field_with_form(self) -> None:
        err = UnknownFieldError("name", form="login")
        assert str(err) == "Unknown field 'name' for login form"
        assert err.field_name == "name"

    def test_submission_default_detail(self) -> None:
        assert SubmissionError().detail == "Submission failed. Please try again."

    def test_submission_custom_detail(self) -> None:
        err = SubmissionError("Email already registered")
        assert str(err) == "Email already registered"
