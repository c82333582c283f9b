"""
Screen state for the catalog and sign-up views.

Every input event is folded into a new immutable state by a pure reducer;
the view re-renders from whatever the reducer returns.
"""

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Union

from .catalog import CatalogItem, filter_items
from .validation import (
    ValidationResult,
    can_submit,
    email_error,
    password_error,
    validate_email,
    validate_password,
)


# ---------------------------------------------------
# Catalog screen
# ---------------------------------------------------

@dataclass(frozen=True)
class CatalogState:
    items: Sequence[CatalogItem]
    search_text: str = ""

    @property
    def visible(self) -> Sequence[CatalogItem]:
        return filter_items(self.items, self.search_text)


@dataclass(frozen=True)
class SearchChanged:
    text: str


def reduce_catalog(state: CatalogState, event: SearchChanged) -> CatalogState:
    if isinstance(event, SearchChanged):
        return replace(state, search_text=event.text)
    return state


# ---------------------------------------------------
# Sign-up form
# ---------------------------------------------------

@dataclass(frozen=True)
class SignUpState:
    name: str = ""
    email: str = ""
    password: str = ""
    # None while the field is untouched
    email_result: Optional[ValidationResult] = None
    password_result: Optional[ValidationResult] = None
    show_alert: bool = False
    submitted: bool = False

    @property
    def email_error(self) -> Optional[str]:
        return email_error(self.email_result)

    @property
    def password_error(self) -> Optional[str]:
        return password_error(self.password_result)


@dataclass(frozen=True)
class FieldChanged:
    field: str
    value: str


@dataclass(frozen=True)
class SubmitPressed:
    pass


@dataclass(frozen=True)
class AlertDismissed:
    pass


SignUpEvent = Union[FieldChanged, SubmitPressed, AlertDismissed]


def reduce_signup(state: SignUpState, event: SignUpEvent) -> SignUpState:
    if isinstance(event, FieldChanged):
        if event.field == "name":
            return replace(state, name=event.value)
        if event.field == "email":
            return replace(state, email=event.value, email_result=validate_email(event.value))
        if event.field == "password":
            return replace(state, password=event.value, password_result=validate_password(event.value))
        raise ValueError(f"unknown sign-up field: {event.field}")

    if isinstance(event, SubmitPressed):
        email_result = validate_email(state.email)
        password_result = validate_password(state.password)
        ok = can_submit(email_result, password_result)
        return replace(
            state,
            email_result=email_result,
            password_result=password_result,
            show_alert=not ok,
            submitted=ok,
        )

    if isinstance(event, AlertDismissed):
        return replace(state, show_alert=False)

    return state
