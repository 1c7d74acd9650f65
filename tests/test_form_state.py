"""Tests for calorie_board.helpers.form_state: form transitions and controller."""

from __future__ import annotations

import pytest

from calorie_board.helpers.form_state import (
    AGE_STEP,
    FIXED_NAME,
    FormController,
    describe_form,
    increment_age,
    on_typing_change,
    set_name,
    toggle_employed,
)
from calorie_board.models import FormState


# ---------------------------------------------------------------------------
# Pure transitions
# ---------------------------------------------------------------------------


class TestTransitions:
    def test_initial_state(self) -> None:
        state = FormState()
        assert (state.name, state.age, state.is_employed, state.typed_text) == (
            "Guest",
            0,
            False,
            "",
        )

    def test_set_name_uses_fixed_constant(self) -> None:
        assert set_name(FormState()).name == FIXED_NAME == "Entue"

    def test_set_name_is_idempotent(self) -> None:
        state = FormState()
        for _ in range(5):
            state = set_name(state)
        assert state.name == "Entue"

    @pytest.mark.parametrize("k", [0, 1, 2, 10])
    def test_increment_age_k_times(self, k: int) -> None:
        state = FormState()
        for _ in range(k):
            state = increment_age(state)
        assert state.age == AGE_STEP * k == 2 * k

    @pytest.mark.parametrize("k", [0, 1, 2, 3, 8])
    def test_toggle_employed_parity(self, k: int) -> None:
        state = FormState()
        for _ in range(k):
            state = toggle_employed(state)
        assert state.is_employed == (k % 2 == 1)

    def test_typing_last_write_wins(self) -> None:
        state = on_typing_change(FormState(), "abc")
        state = on_typing_change(state, "")
        assert state.typed_text == ""

    def test_typing_keeps_text_verbatim(self) -> None:
        text = "  *not markdown*  \t"
        assert on_typing_change(FormState(), text).typed_text == text

    def test_transitions_touch_one_cell(self) -> None:
        start = FormState(name="Ann", age=4, is_employed=True, typed_text="hi")
        assert increment_age(start) == FormState(name="Ann", age=6, is_employed=True, typed_text="hi")
        assert toggle_employed(start) == FormState(name="Ann", age=4, is_employed=False, typed_text="hi")

    def test_transitions_do_not_mutate_input(self) -> None:
        start = FormState()
        increment_age(start)
        assert start.age == 0


class TestDescribeForm:
    def test_default_lines(self) -> None:
        assert describe_form(FormState()) == [
            "Name: Guest",
            "Typing: ",
            "Age: 0",
            "Is employed: No",
        ]

    def test_employed_yes(self) -> None:
        assert describe_form(FormState(is_employed=True))[3] == "Is employed: Yes"


# ---------------------------------------------------------------------------
# FormController
# ---------------------------------------------------------------------------


class TestFormController:
    def test_seeds_default_state(self) -> None:
        store: dict = {}
        ctrl = FormController(store, "form")
        assert store["form_state"] == FormState()
        assert ctrl.state is store["form_state"]

    def test_keeps_existing_state(self) -> None:
        store = {"form_state": FormState(age=8)}
        assert FormController(store, "form").state.age == 8

    def test_actions_write_back(self) -> None:
        store: dict = {}
        ctrl = FormController(store, "form")
        ctrl.set_name_action()
        ctrl.increment_age()
        ctrl.increment_age()
        ctrl.toggle_employed()
        ctrl.on_typing_change("hello")
        assert store["form_state"] == FormState(
            name="Entue", age=4, is_employed=True, typed_text="hello"
        )

    def test_instances_are_independent(self) -> None:
        store: dict = {}
        left = FormController(store, "left")
        right = FormController(store, "right")
        left.increment_age()
        right.toggle_employed()
        assert left.state == FormState(age=2)
        assert right.state == FormState(is_employed=True)

    def test_widget_key_is_prefixed(self) -> None:
        assert FormController({}, "profile").widget_key("typing") == "profile_typing"
