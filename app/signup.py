import logging
from typing import Any, Callable, Dict

from .validation import (
    ALERT_MESSAGE,
    ALERT_TITLE,
    can_submit,
    email_error,
    password_error,
    validate_email,
    validate_password,
)

logger = logging.getLogger(__name__)

SignUpHook = Callable[[str, str, str], None]


def log_signup(name: str, email: str, password: str) -> None:
    """Default account-creation hook: nothing is stored, the attempt is only logged."""
    logger.info("sign up accepted: name=%r email=%r", name, email)


def check_fields(email: str, password: str) -> Dict[str, Any]:
    email_result = validate_email(email)
    password_result = validate_password(password)
    return {
        "email": {"result": email_result.value, "error": email_error(email_result)},
        "password": {"result": password_result.value, "error": password_error(password_result)},
        "canSubmit": can_submit(email_result, password_result),
    }


def submit_signup(name: str, email: str, password: str, hook: SignUpHook = log_signup) -> Dict[str, Any]:
    """
    Gate a sign-up on both fields being valid.
    A rejection carries one generic alert, not the failing fields.
    """
    if not can_submit(validate_email(email), validate_password(password)):
        logger.info("sign up rejected")
        return {
            "success": False,
            "message": ALERT_MESSAGE,
            "alert": {"title": ALERT_TITLE, "message": ALERT_MESSAGE},
        }

    hook(name, email, password)
    return {
        "success": True,
        "message": f"Welcome, {name}!" if name else "Signed up",
    }
