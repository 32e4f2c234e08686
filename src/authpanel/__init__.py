"""authpanel — login and registration forms with live validation.

Pure field validators, a password strength scorer, and an explicit
state-transition model for the login and register forms.

Basic usage::

    from authpanel import check_password_strength, validate_email

    validate_email("ada@example.com").is_valid   # True
    check_password_strength("Abcdef1!").strength  # "strong"

Driving a form::

    from authpanel import AuthPanel

    async with AuthPanel(on_login=login, on_register=register) as panel:
        panel.switch_to_register()
        panel.active.change("name", "Ada")
        outcome = await panel.active.submit()
"""

from importlib import import_module

__version__ = "0.1.0"

# Public name -> module that defines it. Imported on first access so
# ``import authpanel`` stays free of anyio until a form is needed.
_LAZY_IMPORTS: dict[str, str] = {
    # Validation
    "ErrorKind": "authpanel.validation",
    "Field": "authpanel.validation",
    "PasswordStrength": "authpanel.validation",
    "Strength": "authpanel.validation",
    "ValidationResult": "authpanel.validation",
    "check_password_strength": "authpanel.validation",
    "strength_meter": "authpanel.validation",
    "validate_confirm_password": "authpanel.validation",
    "validate_email": "authpanel.validation",
    "validate_field": "authpanel.validation",
    "validate_name": "authpanel.validation",
    "validate_password": "authpanel.validation",
    # Forms
    "FormKind": "authpanel.forms",
    "FormSession": "authpanel.forms",
    "FormState": "authpanel.forms",
    "SubmitOutcome": "authpanel.forms",
    "transition": "authpanel.forms",
    # Panel
    "AuthPanel": "authpanel.panel",
    "Tab": "authpanel.panel",
    # Config & errors
    "PanelConfig": "authpanel.config",
    "AuthPanelError": "authpanel.errors",
    "ConfigurationError": "authpanel.errors",
    "SubmissionError": "authpanel.errors",
    "UnknownFieldError": "authpanel.errors",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for public API."""
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
