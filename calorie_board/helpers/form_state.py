"""State transitions for the interactive form.

Each transition takes the current :class:`FormState` and returns a new one
with exactly one cell replaced. :class:`FormController` binds those
transitions to a mutable store (normally ``st.session_state``) so that a
form instance owns a single slot, addressed by its key prefix.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, List, MutableMapping

from calorie_board.models import FormState

logger = logging.getLogger(__name__)

FIXED_NAME = "Entue"
AGE_STEP = 2


# ---------------------------------------------------------------------------
# Pure transitions
# ---------------------------------------------------------------------------

def set_name(state: FormState) -> FormState:
    return replace(state, name=FIXED_NAME)


def increment_age(state: FormState) -> FormState:
    return replace(state, age=state.age + AGE_STEP)


def toggle_employed(state: FormState) -> FormState:
    return replace(state, is_employed=not state.is_employed)


def on_typing_change(state: FormState, new_text: str) -> FormState:
    """Store the input's value verbatim (last write wins)."""
    return replace(state, typed_text=new_text)


def describe_form(state: FormState) -> List[str]:
    """Label lines in display order: name, typing, age, employment."""
    return [
        f"Name: {state.name}",
        f"Typing: {state.typed_text}",
        f"Age: {state.age}",
        f"Is employed: {'Yes' if state.is_employed else 'No'}",
    ]


# ---------------------------------------------------------------------------
# Stateful controller
# ---------------------------------------------------------------------------

class FormController:
    """Applies transitions to the FormState stored under ``{prefix}_state``."""

    def __init__(self, store: MutableMapping[str, Any], prefix: str = "form") -> None:
        self.store = store
        self.prefix = prefix
        if self.state_key not in self.store:
            self.store[self.state_key] = FormState()

    @property
    def state_key(self) -> str:
        return f"{self.prefix}_state"

    def widget_key(self, name: str) -> str:
        """Namespace a widget key so two forms never collide."""
        return f"{self.prefix}_{name}"

    @property
    def state(self) -> FormState:
        return self.store[self.state_key]

    def _apply(self, transition: Callable[..., FormState], *args: Any) -> FormState:
        new_state = transition(self.state, *args)
        self.store[self.state_key] = new_state
        logger.debug("%s: %s -> %s", self.prefix, transition.__name__, new_state)
        return new_state

    def set_name_action(self) -> FormState:
        return self._apply(set_name)

    def increment_age(self) -> FormState:
        return self._apply(increment_age)

    def toggle_employed(self) -> FormState:
        return self._apply(toggle_employed)

    def on_typing_change(self, new_text: str) -> FormState:
        return self._apply(on_typing_change, new_text)
