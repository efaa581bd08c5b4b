"""Tests for shortcut_recorder/recorder.py – recording attempts end to end."""

import pytest

from conftest import BUTTON_LEFT
from conftest import BUTTON_MIDDLE
from conftest import BUTTON_RIGHT
from conftest import KEY_A
from conftest import KEY_ALT
from conftest import KEY_CTRL
from conftest import KEY_F
from conftest import KEY_G
from conftest import KEY_S
from conftest import key_down
from conftest import key_up
from conftest import mouse_down
from conftest import mouse_up
from shortcut_recorder import DescriptorStatus
from shortcut_recorder import EventKind
from shortcut_recorder import KeyElement
from shortcut_recorder import MouseElement
from shortcut_recorder import RawInputEvent
from shortcut_recorder import RecorderConfig
from shortcut_recorder import RecorderState
from shortcut_recorder import ShortcutKind
from shortcut_recorder import ShortcutRecorder
from shortcut_recorder import replay_events


# =============================================================================
# Tests: preview notifications
# =============================================================================


class TestUpdatedNotifications:
    """Every event produces exactly one UPDATED descriptor."""

    def test_preview_after_every_event(self, harness):
        """Four events, four previews."""
        h = harness()
        h.feed(key_down(KEY_A, 0), key_down(KEY_S, 50), key_up(KEY_S, 100), key_up(KEY_A, 120))
        updated = [d for d in h.descriptors if d.status is DescriptorStatus.UPDATED]
        assert len(updated) == 4

    def test_preview_shows_sequence_in_progress(self, harness):
        """The preview label grows as keys are pressed."""
        h = harness()
        h.feed(key_down(KEY_CTRL, 0, ctrl=True), key_down(KEY_A, 40, ctrl=True))
        assert [d.label for d in h.descriptors] == ['Ctrl', 'Ctrl → A']
        assert all(d.kind is None for d in h.descriptors)

    def test_finished_precedes_final_preview(self, harness):
        """The release that completes an attempt emits FINISHED, then an empty preview."""
        h = harness()
        h.feed(key_down(KEY_A, 0), key_down(KEY_S, 50), key_up(KEY_S, 100), key_up(KEY_A, 120))
        last_two = h.descriptors[-2:]
        assert last_two[0].status is DescriptorStatus.FINISHED
        assert last_two[1].status is DescriptorStatus.UPDATED
        assert last_two[1].label == ''
        assert last_two[1].sequence == ()

    def test_unknown_kind_ignored_but_previewed(self, harness):
        """Unknown event kinds change nothing and still produce a preview."""
        h = harness()
        h.feed(key_down(KEY_A, 0))
        h.feed(RawInputEvent(kind=6, code=1, timestamp=10))
        assert len(h.descriptors) == 2
        assert h.descriptors[-1].label == 'A'
        assert h.recorder.state.active_keys == {KEY_A}

    def test_descriptor_sequence_is_a_snapshot(self, harness):
        """Later state changes do not alter an emitted descriptor."""
        h = harness()
        h.feed(mouse_down(BUTTON_MIDDLE, 0))
        preview = h.descriptors[-1]
        h.feed(mouse_up(BUTTON_MIDDLE, 900))
        assert preview.sequence[0].is_long_press is False
        assert h.finished[0].sequence[0].is_long_press is True


# =============================================================================
# Tests: key handling
# =============================================================================


class TestKeyHandling:
    """Key down/up tracking."""

    def test_key_repeat_suppressed(self, harness):
        """A second key-down for a held key does not add an element."""
        h = harness()
        h.feed(key_down(KEY_A, 0), key_down(KEY_A, 30), key_down(KEY_A, 60))
        assert len(h.recorder.state.sequence) == 1
        assert len(h.descriptors) == 3

    def test_key_repeat_is_not_a_double_press(self, harness):
        """Auto-repeat does not feed the double-press detector."""
        h = harness()
        h.feed(key_down(KEY_A, 0), key_down(KEY_A, 30), key_up(KEY_A, 100))
        assert h.finished == []

    def test_single_key_rejected(self, harness):
        """A single unmodified key is never a shortcut on its own."""
        h = harness()
        h.feed(key_down(KEY_A, 0), key_up(KEY_A, 80))
        assert h.finished == []
        assert h.recorder.state.sequence == []

    def test_attempt_stays_open_while_key_held(self, harness):
        """Nothing is finalized while any key is still down."""
        h = harness()
        h.feed(key_down(KEY_A, 0), key_down(KEY_S, 50), key_up(KEY_S, 100))
        assert h.finished == []
        assert h.recorder.state.active_keys == {KEY_A}
        assert len(h.recorder.state.sequence) == 2

    def test_spurious_key_up(self, harness):
        """A release without a press does not raise."""
        h = harness()
        h.feed(key_up(KEY_A, 0))
        assert h.finished == []
        assert len(h.descriptors) == 1


# =============================================================================
# Tests: double press
# =============================================================================


class TestDoublePress:
    """Double-press detection across attempts."""

    def test_double_press_within_window(self, harness):
        """Two presses 300 ms apart are recorded as a double-press."""
        h = harness()
        h.feed(key_down(KEY_F, 0), key_up(KEY_F, 80), key_down(KEY_F, 300), key_up(KEY_F, 380))
        assert h.finished_labels == ['Double-F']
        assert h.finished[0].kind is ShortcutKind.DOUBLE_PRESS

    def test_double_press_exactly_at_threshold(self, harness):
        """A gap equal to the threshold still counts."""
        h = harness()
        h.feed(key_down(KEY_F, 0), key_up(KEY_F, 80), key_down(KEY_F, 500), key_up(KEY_F, 580))
        assert h.finished_labels == ['Double-F']

    def test_presses_too_far_apart(self, harness):
        """Two presses 600 ms apart are not a double-press."""
        h = harness()
        h.feed(key_down(KEY_F, 0), key_up(KEY_F, 80), key_down(KEY_F, 600), key_up(KEY_F, 680))
        assert h.finished == []

    def test_third_press_starts_over(self, harness):
        """A third quick press is not another double-press."""
        h = harness()
        h.feed(
            key_down(KEY_F, 0), key_up(KEY_F, 50),
            key_down(KEY_F, 100), key_up(KEY_F, 150),
            key_down(KEY_F, 200), key_up(KEY_F, 250),
        )
        assert h.finished_labels == ['Double-F']

    def test_fourth_press_is_a_new_double_press(self, harness):
        """After a reset of the history, the next pair counts again."""
        h = harness()
        h.feed(
            key_down(KEY_F, 0), key_up(KEY_F, 50),
            key_down(KEY_F, 100), key_up(KEY_F, 150),
            key_down(KEY_F, 200), key_up(KEY_F, 250),
            key_down(KEY_F, 300), key_up(KEY_F, 350),
        )
        assert h.finished_labels == ['Double-F', 'Double-F']

    def test_history_survives_reset(self, harness):
        """reset() keeps the double-press history."""
        h = harness()
        h.feed(key_down(KEY_F, 0))
        h.recorder.reset()
        assert h.recorder.state.sequence == []
        assert h.recorder.state.active_keys == set()
        assert h.recorder.state.press_history[KEY_F] == [0]

        h.feed(key_down(KEY_F, 400), key_up(KEY_F, 450))
        assert h.finished_labels == ['Double-F']

    def test_custom_threshold(self, harness):
        """The double-press window comes from the config."""
        h = harness(config=RecorderConfig(double_press_threshold_ms=200))
        h.feed(key_down(KEY_F, 0), key_up(KEY_F, 50), key_down(KEY_F, 300), key_up(KEY_F, 350))
        assert h.finished == []


# =============================================================================
# Tests: modifier + key and two-key sequences
# =============================================================================


class TestKeyCombinations:
    """Modifier+key and two-key shortcuts."""

    def test_ctrl_plus_key(self, harness):
        """Ctrl held, then A: label in press order."""
        h = harness()
        h.feed(
            key_down(KEY_CTRL, 0, ctrl=True),
            key_down(KEY_A, 100, ctrl=True),
            key_up(KEY_A, 200, ctrl=True),
            key_up(KEY_CTRL, 250),
        )
        assert h.finished_labels == ['Ctrl → A']
        assert h.finished[0].kind is ShortcutKind.MODIFIER_KEY

    def test_alt_plus_two_keys(self, harness):
        """Modifier combinations may have more than two elements."""
        h = harness()
        h.feed(
            key_down(KEY_ALT, 0, alt=True),
            key_down(KEY_A, 50, alt=True),
            key_down(KEY_S, 90, alt=True),
            key_up(KEY_S, 150, alt=True),
            key_up(KEY_A, 160, alt=True),
            key_up(KEY_ALT, 170),
        )
        assert h.finished_labels == ['Alt → A → S']

    def test_modifier_rule_wins_over_two_key_rule(self, harness):
        """Two keys with a modifier on the first are accepted as modifier+key."""
        h = harness()
        h.feed(
            key_down(KEY_A, 0, ctrl=True),
            key_down(KEY_S, 50, ctrl=True),
            key_up(KEY_S, 100, ctrl=True),
            key_up(KEY_A, 120, ctrl=True),
        )
        assert h.finished[0].kind is ShortcutKind.MODIFIER_KEY

    def test_two_different_keys(self, harness):
        """Two plain keys held together form a two-key shortcut."""
        h = harness()
        h.feed(key_down(KEY_G, 0), key_down(KEY_S, 60), key_up(KEY_G, 120), key_up(KEY_S, 140))
        assert h.finished_labels == ['G → S']
        assert h.finished[0].kind is ShortcutKind.TWO_KEY

    def test_three_plain_keys_rejected(self, harness):
        """Three unmodified keys match no rule."""
        h = harness()
        h.feed(
            key_down(KEY_A, 0), key_down(KEY_S, 10), key_down(KEY_G, 20),
            key_up(KEY_A, 100), key_up(KEY_S, 100), key_up(KEY_G, 100),
        )
        assert h.finished == []

    def test_modifier_on_second_key_is_two_key(self, harness):
        """A, then Ctrl: the first key has no modifier, so the two-key rule applies."""
        h = harness()
        h.feed(
            key_down(KEY_A, 0),
            key_down(KEY_CTRL, 50, ctrl=True),
            key_up(KEY_CTRL, 80),
            key_up(KEY_A, 100),
        )
        assert h.finished[0].kind is ShortcutKind.TWO_KEY


# =============================================================================
# Tests: mouse handling
# =============================================================================


class TestMouseButtons:
    """Mouse long/short presses."""

    def test_short_left_click_rejected(self, harness):
        """A plain left click is not a shortcut."""
        h = harness()
        h.feed(mouse_down(BUTTON_LEFT, 0), mouse_up(BUTTON_LEFT, 120))
        assert h.finished == []

    def test_short_right_click_rejected(self, harness):
        """A plain right click is not a shortcut."""
        h = harness()
        h.feed(mouse_down(BUTTON_RIGHT, 0), mouse_up(BUTTON_RIGHT, 499))
        assert h.finished == []

    def test_long_left_press(self, harness):
        """Left button held for 500 ms or more is accepted."""
        h = harness()
        h.feed(mouse_down(BUTTON_LEFT, 0), mouse_up(BUTTON_LEFT, 500))
        assert h.finished_labels == ['Left (long)']
        assert h.finished[0].kind is ShortcutKind.MOUSE_BUTTON

    def test_short_middle_click(self, harness):
        """Other buttons are accepted even when short."""
        h = harness()
        h.feed(mouse_down(BUTTON_MIDDLE, 0), mouse_up(BUTTON_MIDDLE, 100))
        assert h.finished_labels == ['Middle (short)']

    def test_side_button(self, harness):
        """Buttons without a name use the generic fallback."""
        h = harness()
        h.feed(mouse_down(4, 0), mouse_up(4, 100))
        assert h.finished_labels == ['Button4 (short)']

    def test_ctrl_plus_click(self, harness):
        """Ctrl held, then a short left click."""
        h = harness()
        h.feed(
            key_down(KEY_CTRL, 0, ctrl=True),
            mouse_down(BUTTON_LEFT, 100, ctrl=True),
            mouse_up(BUTTON_LEFT, 150, ctrl=True),
            key_up(KEY_CTRL, 200),
        )
        # Starts with a modified key, so the modifier+key rule matches first
        assert h.finished_labels == ['Ctrl → Left (short)']
        assert h.finished[0].kind is ShortcutKind.MODIFIER_KEY

    def test_modified_mouse_then_mouse(self, harness):
        """A mouse press held with Alt followed by another mouse press."""
        h = harness()
        h.feed(
            mouse_down(BUTTON_MIDDLE, 0, alt=True),
            mouse_down(BUTTON_LEFT, 50, alt=True),
            mouse_up(BUTTON_LEFT, 100, alt=True),
            mouse_up(BUTTON_MIDDLE, 120, alt=True),
        )
        assert h.finished[0].kind is ShortcutKind.MODIFIER_MOUSE
        assert h.finished_labels == ['Middle (short) → Left (short)']

    def test_spurious_mouse_up(self, harness):
        """A release without a press does not raise."""
        h = harness()
        h.feed(mouse_up(BUTTON_MIDDLE, 100))
        assert h.finished == []
        assert h.recorder.state.mouse_down_at == {}

    def test_release_marks_most_recent_unreleased_press(self, harness):
        """Each release decides the press type of its own press only."""
        h = harness()
        h.feed(
            key_down(KEY_A, 0),
            mouse_down(BUTTON_MIDDLE, 0),
            mouse_up(BUTTON_MIDDLE, 700),
            mouse_down(BUTTON_MIDDLE, 800),
            mouse_up(BUTTON_MIDDLE, 850),
        )
        first, second = h.recorder.state.sequence[1:]
        assert isinstance(first, MouseElement) and first.is_long_press
        assert isinstance(second, MouseElement) and not second.is_long_press

    def test_custom_long_press_threshold(self, harness):
        """The long-press threshold comes from the config."""
        h = harness(config=RecorderConfig(long_press_threshold_ms=200))
        h.feed(mouse_down(BUTTON_LEFT, 0), mouse_up(BUTTON_LEFT, 250))
        assert h.finished_labels == ['Left (long)']


# =============================================================================
# Tests: reset and callbacks
# =============================================================================


class TestResetAndCallbacks:
    """Attempt lifecycle."""

    def test_state_cleared_after_finish(self, harness):
        """A finished attempt leaves no held input or sequence behind."""
        h = harness()
        h.feed(mouse_down(BUTTON_MIDDLE, 0), mouse_up(BUTTON_MIDDLE, 100))
        state = h.recorder.state
        assert state.active_keys == set()
        assert state.mouse_down_at == {}
        assert state.sequence == []

    def test_reset_cancels_stuck_attempt(self, harness):
        """reset() lets a new attempt start while a release never arrived."""
        h = harness()
        h.feed(key_down(KEY_A, 0))
        h.recorder.reset()
        h.feed(key_down(KEY_CTRL, 1000, ctrl=True), key_down(KEY_S, 1050, ctrl=True))
        h.feed(key_up(KEY_S, 1100, ctrl=True), key_up(KEY_CTRL, 1150))
        assert h.finished_labels == ['Ctrl → S']

    def test_failing_callback_does_not_break_recorder(self):
        """Errors raised by on_update are logged, the attempt still resets."""
        calls = []

        def on_update(descriptor):
            calls.append(descriptor)
            raise RuntimeError('boom')

        recorder = ShortcutRecorder(on_update)
        for event in (key_down(KEY_A, 0), key_down(KEY_S, 50), key_up(KEY_S, 90), key_up(KEY_A, 100)):
            recorder.handle_event(event)

        assert any(d.is_finished for d in calls)
        assert recorder.state.sequence == []

    def test_state_is_read_only(self, harness):
        """The attempt state can be inspected but not replaced."""
        h = harness()
        with pytest.raises(AttributeError):
            h.recorder.state = RecorderState()

    def test_verbose_mode(self, harness):
        """Verbose tracing does not change results."""
        h = harness(verbose=True)
        h.feed(
            key_down(KEY_A, 0), key_down(KEY_A, 10),
            RawInputEvent(kind=99, code=0, timestamp=20),
            key_up(KEY_A, 30),
            mouse_down(BUTTON_LEFT, 40), mouse_up(BUTTON_LEFT, 60),
        )
        assert h.finished == []


class TestReplayEvents:
    """replay_events() helper."""

    def test_collects_all_descriptors(self):
        """Previews and finished descriptors are returned in order."""
        events = [
            RawInputEvent(EventKind.KEY_DOWN, KEY_CTRL, ctrl_held=True, timestamp=0),
            RawInputEvent(EventKind.KEY_DOWN, KEY_A, ctrl_held=True, timestamp=50),
            RawInputEvent(EventKind.KEY_UP, KEY_A, ctrl_held=True, timestamp=90),
            RawInputEvent(EventKind.KEY_UP, KEY_CTRL, timestamp=120),
        ]
        descriptors = replay_events(events)
        assert len(descriptors) == 5
        finished = [d for d in descriptors if d.is_finished]
        assert len(finished) == 1
        assert finished[0].sequence == (
            KeyElement(code=KEY_CTRL, ctrl_held=True, timestamp=0),
            KeyElement(code=KEY_A, ctrl_held=True, timestamp=50),
        )
