"""Windows, event hooks and the event loop of a display connection."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

KEY_PRESS_MASK = 1 << 0
KEY_RELEASE_MASK = 1 << 1
BUTTON_PRESS_MASK = 1 << 2
BUTTON_RELEASE_MASK = 1 << 3
POINTER_MOTION_MASK = 1 << 6
EXPOSURE_MASK = 1 << 15
STRUCTURE_NOTIFY_MASK = 1 << 17

MAX_EVENT = 36


class EventType(enum.IntEnum):
    """Window system event codes."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


_KEY_EVENTS = (EventType.KEY_PRESS, EventType.KEY_RELEASE)
_BUTTON_EVENTS = (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE)


@dataclass(frozen=True)
class Event:
    """An input or window event.

    ``key`` is the key symbol of key events, ``count`` the number of expose
    events still to follow, and ``close_request`` marks a client message in
    which the window manager asks for the window to be closed.
    """

    type: int
    key: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    close_request: bool = False


@dataclass
class _Hook:
    mask: int = 0
    func: Callable[..., Any] | None = None
    param: Any = None


def _check_event_type(event_type: int) -> int:
    code = int(event_type)
    if not 0 <= code < MAX_EVENT:
        raise ValueError(f"event type must be in 0..{MAX_EVENT - 1}, got {code}")
    return code


@dataclass(eq=False)
class Window:
    """A window with one hook slot per event type."""

    width: int
    height: int
    title: str = ""
    hooks: list[_Hook] = field(
        default_factory=lambda: [_Hook() for _ in range(MAX_EVENT)]
    )
    selected_mask: int = 0

    def hook(
        self, event_type: int, mask: int, func: Callable[..., Any], param: Any = None
    ) -> None:
        """Install ``func`` for ``event_type``, selecting events with ``mask``."""
        code = _check_event_type(event_type)
        self.hooks[code] = _Hook(mask=mask, func=func, param=param)

    def key_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func(key, param)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, KEY_RELEASE_MASK, func, param)

    def mouse_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func(button, x, y, param)`` when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, BUTTON_PRESS_MASK, func, param)

    def expose_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func(param)`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, EXPOSURE_MASK, func, param)

    def event_mask(self) -> int:
        """Return the union of the masks of all installed hooks."""
        mask = 0
        for entry in self.hooks:
            mask |= entry.mask
        return mask

    def dispatch(self, event: Event) -> Any:
        """Call the hook for ``event`` with the arguments its type carries.

        Returns what the hook returned, or None when no hook ran.
        """
        code = _check_event_type(event.type)
        entry = self.hooks[code]
        if entry.func is None or code < EventType.KEY_PRESS:
            return None
        if code in _KEY_EVENTS:
            return entry.func(event.key, entry.param)
        if code in _BUTTON_EVENTS:
            return entry.func(event.button, event.x, event.y, entry.param)
        if code == EventType.MOTION_NOTIFY:
            return entry.func(event.x, event.y, entry.param)
        if code == EventType.EXPOSE:
            if event.count:
                return None
            return entry.func(entry.param)
        return entry.func(entry.param)


class Display:
    """A display connection holding windows and a queue of pending events."""

    def __init__(self) -> None:
        self._windows: list[Window] = []
        self._pending: deque[tuple[Window, Event]] = deque()
        self._loop_func: Callable[..., Any] | None = None
        self._loop_param: Any = None
        self._end_loop = False
        self.do_flush = True

    @property
    def windows(self) -> tuple[Window, ...]:
        """Open windows, most recently created first."""
        return tuple(self._windows)

    @property
    def pending(self) -> int:
        """Number of events waiting to be handled."""
        return len(self._pending)

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window; it receives a first expose event."""
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        window = Window(width=width, height=height, title=title)
        self._windows.insert(0, window)
        self._pending.append((window, Event(EventType.EXPOSE)))
        return window

    def destroy_window(self, window: Window) -> None:
        """Close ``window``; its pending events are then ignored."""
        if window not in self._windows:
            raise ValueError("window does not belong to this display")
        self._windows.remove(window)

    def loop_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call ``func(param)`` each time the event queue has been drained."""
        self._loop_func = func
        self._loop_param = param

    def post(self, window: Window, event: Event) -> None:
        """Queue ``event`` for ``window``."""
        self._pending.append((window, event))

    def loop_end(self) -> None:
        """Make the running loop, and any later one, return."""
        self._end_loop = True

    def _handle(self, window: Window, event: Event) -> None:
        if window not in self._windows:
            return
        closing = window.hooks[EventType.DESTROY_NOTIFY]
        if (
            event.type == EventType.CLIENT_MESSAGE
            and event.close_request
            and closing.func is not None
        ):
            closing.func(closing.param)
        if 0 <= event.type < MAX_EVENT and window.hooks[event.type].func is not None:
            window.dispatch(event)

    def loop(self) -> None:
        """Handle events until no window is left or :meth:`loop_end` is called.

        Without a loop hook the loop also returns once the queue is empty,
        since nothing else can then produce an event.
        """
        for window in self._windows:
            window.selected_mask = window.event_mask()
        self.do_flush = False
        while self._windows and not self._end_loop:
            while not self._end_loop and (self._loop_func is None or self._pending):
                if not self._pending:
                    return
                window, event = self._pending.popleft()
                self._handle(window, event)
            if self._loop_func is not None:
                self._loop_func(self._loop_param)