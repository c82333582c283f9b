"""
Tests for the screen reducers.
"""

from __future__ import annotations

import pytest

from app.catalog import make_catalog
from app.state import (
    AlertDismissed,
    CatalogState,
    FieldChanged,
    SearchChanged,
    SignUpState,
    SubmitPressed,
    reduce_catalog,
    reduce_signup,
)
from app.validation import ValidationResult


def test_search_changed_updates_visible_items() -> None:
    state = CatalogState(items=make_catalog(["Apple", "Kiwi", "Pineapple"]))
    assert len(state.visible) == 3
    state = reduce_catalog(state, SearchChanged("APP"))
    assert [i.title for i in state.visible] == ["Apple", "Pineapple"]
    state = reduce_catalog(state, SearchChanged(""))
    assert len(state.visible) == 3


def test_fields_start_untouched() -> None:
    state = SignUpState()
    assert state.email_result is None
    assert state.email_error is None
    assert state.password_error is None


def test_field_edits_revalidate() -> None:
    state = reduce_signup(SignUpState(), FieldChanged("email", "bob"))
    assert state.email_result is ValidationResult.INVALID
    assert state.email_error == "Invalid email"
    state = reduce_signup(state, FieldChanged("email", ""))
    assert state.email_error == "Email is required"
    state = reduce_signup(state, FieldChanged("email", "bob@example.com"))
    assert state.email_error is None

    state = reduce_signup(state, FieldChanged("password", "abc"))
    assert state.password_result is ValidationResult.TOO_SHORT
    state = reduce_signup(state, FieldChanged("name", "Bob"))
    assert state.name == "Bob"


def test_unknown_field_rejected() -> None:
    with pytest.raises(ValueError):
        reduce_signup(SignUpState(), FieldChanged("phone", "1"))


def test_submit_untouched_form_shows_alert() -> None:
    state = reduce_signup(SignUpState(), SubmitPressed())
    assert state.show_alert is True
    assert state.submitted is False
    assert state.email_result is ValidationResult.MISSING

    state = reduce_signup(state, AlertDismissed())
    assert state.show_alert is False


def test_submit_valid_form() -> None:
    state = SignUpState()
    for event in (
        FieldChanged("name", "Ann"),
        FieldChanged("email", "ann@example.com"),
        FieldChanged("password", "secret1"),
        SubmitPressed(),
    ):
        state = reduce_signup(state, event)
    assert state.submitted is True
    assert state.show_alert is False


def test_reducer_returns_new_state() -> None:
    state = SignUpState()
    new = reduce_signup(state, FieldChanged("email", "x"))
    assert state.email == ""
    assert new is not state
