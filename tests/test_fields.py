"""Tests for the Field enum and validate_field dispatch."""

import pytest

from authpanel.errors import UnknownFieldError
from authpanel.validation import ErrorKind, Field, validate_field


class TestFieldParse:
    def test_by_name(self) -> None:
        assert Field.parse("confirmPassword") is Field.CONFIRM_PASSWORD

    def test_member_passes_through(self) -> None:
        assert Field.parse(Field.EMAIL) is Field.EMAIL

    def test_unknown(self) -> None:
        with pytest.raises(UnknownFieldError, match="Unknown field 'phone'"):
            Field.parse("phone")

    def test_unknown_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            Field.parse("phone")

    def test_members_compare_equal_to_names(self) -> None:
        assert Field.EMAIL == "email"
        assert {Field.NAME: "x"}["name"] == "x"

    def test_only_confirm_depends_on_password(self) -> None:
        assert [f for f in Field if f.depends_on_password] == [Field.CONFIRM_PASSWORD]


class TestValidateField:
    def test_routes_email(self) -> None:
        assert validate_field("email", "nope").kind is ErrorKind.INVALID_FORMAT

    def test_routes_name(self) -> None:
        assert validate_field(Field.NAME, "A").kind is ErrorKind.TOO_SHORT

    def test_routes_password(self) -> None:
        assert validate_field("password", "short").kind is ErrorKind.TOO_SHORT

    def test_password_argument_ignored_for_other_fields(self) -> None:
        assert validate_field("email", "a@b.co", password="whatever")

    def test_confirm_matches(self) -> None:
        assert validate_field("confirmPassword", "Abcdef1!", password="Abcdef1!")

    def test_confirm_mismatch(self) -> None:
        result = validate_field("confirmPassword", "other", password="Abcdef1!")
        assert result.kind is ErrorKind.MISMATCH
        assert result.error == "Passwords do not match"

    def test_confirm_empty(self) -> None:
        result = validate_field("confirmPassword", "", password="Abcdef1!")
        assert result.kind is ErrorKind.REQUIRED

    @pytest.mark.parametrize("password", [None, ""])
    def test_confirm_before_password(self, password: str | None) -> None:
        result = validate_field("confirmPassword", "Abcdef1!", password=password)
        assert result.kind is ErrorKind.PASSWORD_NOT_YET_ENTERED
        assert result.error == "Please enter password first"

    def test_unknown_field(self) -> None:
        with pytest.raises(UnknownFieldError):
            validate_field("username", "ada")

    def test_method_and_function_agree(self) -> None:
        assert Field.PASSWORD.validate("abcdefgh") == validate_field("password", "abcdefgh")
