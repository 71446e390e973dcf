from types import SimpleNamespace

import pytest

from skillpath.flow import View, can_transition, resolve_view


def test_resolve_view():
    done = SimpleNamespace(onboarding_completed=True)
    assert resolve_view(None, None) is View.ONBOARDING
    assert resolve_view(SimpleNamespace(onboarding_completed=False), object()) is View.ONBOARDING
    assert resolve_view(done, None) is View.DASHBOARD
    assert resolve_view(done, object()) is View.ROADMAPS


@pytest.mark.parametrize("current", list(View))
def test_sign_out_always_allowed(current):
    assert can_transition(current, View.LANDING)


def test_learning_can_move_between_subtopics():
    assert can_transition(View.LEARNING, View.LEARNING)


def test_cannot_skip_onboarding():
    assert not can_transition(View.LANDING, View.DASHBOARD)
