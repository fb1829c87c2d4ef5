import random

import pytest

from cubscene.events import (
    BUTTON_PRESS_MASK,
    EXPOSURE_MASK,
    KEY_RELEASE_MASK,
    POINTER_MOTION_MASK,
    Display,
    Event,
    EventType,
    Window,
)


def test_key_hook_receives_key_and_param():
    window = Window(10, 10)
    window.key_hook(lambda key, param: (key, param), "p")
    assert window.hooks[EventType.KEY_RELEASE].mask == KEY_RELEASE_MASK
    assert window.dispatch(Event(EventType.KEY_RELEASE, key=0xFF1B)) == (0xFF1B, "p")


def test_key_press_without_hook_does_nothing():
    window = Window(10, 10)
    window.key_hook(lambda key, param: key)
    assert window.dispatch(Event(EventType.KEY_PRESS, key=65)) is None


def test_mouse_hook_receives_button_and_position():
    window = Window(10, 10)
    window.mouse_hook(lambda b, x, y, p: (b, x, y, p), 7)
    result = window.dispatch(Event(EventType.BUTTON_PRESS, button=1, x=3, y=4))
    assert result == (1, 3, 4, 7)


def test_motion_hook_receives_position():
    window = Window(10, 10)
    window.hook(EventType.MOTION_NOTIFY, POINTER_MOTION_MASK, lambda x, y, p: (x, y, p), 0)
    assert window.dispatch(Event(EventType.MOTION_NOTIFY, x=5, y=6)) == (5, 6, 0)


def test_expose_only_on_last_of_series():
    window = Window(10, 10)
    calls = []
    window.expose_hook(calls.append, "redraw")
    window.dispatch(Event(EventType.EXPOSE, count=2))
    window.dispatch(Event(EventType.EXPOSE, count=0))
    assert calls == ["redraw"]


def test_generic_hook_receives_param_only():
    window = Window(10, 10)
    window.hook(EventType.DESTROY_NOTIFY, 1, lambda p: p * 2, 21)
    assert window.dispatch(Event(EventType.DESTROY_NOTIFY)) == 42


def test_event_mask_is_union_of_hooks():
    window = Window(10, 10)
    window.key_hook(lambda k, p: None)
    window.mouse_hook(lambda b, x, y, p: None)
    window.expose_hook(lambda p: None)
    assert window.event_mask() == KEY_RELEASE_MASK | BUTTON_PRESS_MASK | EXPOSURE_MASK


def test_hook_rejects_out_of_range_type():
    window = Window(10, 10)
    with pytest.raises(ValueError):
        window.hook(36, 0, lambda p: None, None)


def test_new_window_rejects_bad_size():
    with pytest.raises(ValueError):
        Display().new_window(0, 10, "bad")


def test_new_windows_are_listed_newest_first():
    display = Display()
    first = display.new_window(300, 300, "win1")
    second = display.new_window(600, 600, "win2")
    assert display.windows == (second, first)
    assert (second.width, second.title) == (600, "win2")


def test_destroy_window_removes_it_and_rejects_unknown():
    display = Display()
    window = display.new_window(10, 10, "w")
    display.destroy_window(window)
    assert display.windows == ()
    with pytest.raises(ValueError):
        display.destroy_window(window)


def test_first_expose_is_delivered():
    display = Display()
    window = display.new_window(10, 10, "w")
    calls = []
    window.expose_hook(calls.append, "shown")
    display.loop()
    assert calls == ["shown"]
    assert display.pending == 0


def test_loop_records_selected_mask():
    display = Display()
    window = display.new_window(10, 10, "w")
    window.key_hook(lambda k, p: None)
    display.loop()
    assert window.selected_mask == KEY_RELEASE_MASK
    assert display.do_flush is False


def test_close_request_calls_destroy_hook():
    display = Display()
    window = display.new_window(10, 10, "w")
    closed = []
    window.hook(EventType.DESTROY_NOTIFY, 1, closed.append, "bye")
    display.post(window, Event(EventType.CLIENT_MESSAGE, close_request=True))
    display.loop()
    assert closed == ["bye"]


def test_loop_hook_runs_until_loop_end():
    display = Display()
    window = display.new_window(10, 10, "w")
    ticks = []

    def tick(param):
        ticks.append(param)
        if len(ticks) == 3:
            display.loop_end()

    display.loop_hook(tick, "frame")
    display.loop()
    assert ticks == ["frame"] * 3
    assert display.windows == (window,)
    assert display.pending == 0
    display.loop()
    assert len(ticks) == 3
    assert display.windows == (window,)


def test_events_for_destroyed_window_are_ignored():
    display = Display()
    gone = display.new_window(10, 10, "gone")
    kept = display.new_window(10, 10, "kept")
    keys = []
    gone.key_hook(lambda k, p: keys.append(("gone", k)))
    kept.key_hook(lambda k, p: keys.append(("kept", k)))
    display.post(gone, Event(EventType.KEY_RELEASE, key=1))
    display.post(kept, Event(EventType.KEY_RELEASE, key=2))
    display.destroy_window(gone)
    display.loop()
    assert keys == [("kept", 2)]


def test_mouse_hook_replaces_window():
    display = Display()
    rng = random.Random(0)
    state = {}

    def gere_mouse(x, y, button, param):
        display.destroy_window(state["win1"])
        state["win1"] = display.new_window(rng.randrange(1, 500), rng.randrange(1, 500), "new win")
        state["win1"].mouse_hook(gere_mouse, None)

    state["win1"] = display.new_window(300, 300, "win1")
    win2 = display.new_window(600, 600, "win2")
    state["win1"].mouse_hook(gere_mouse, None)
    win2.mouse_hook(gere_mouse, None)
    original = state["win1"]
    display.post(original, Event(EventType.BUTTON_PRESS, button=1, x=2, y=3))
    display.loop()
    assert original not in display.windows
    assert state["win1"].title == "new win"
    assert display.windows == (state["win1"], win2)
    assert state["win1"].hooks[EventType.BUTTON_PRESS].mask == BUTTON_PRESS_MASK