"""Windows with per-event hooks and a simple event loop."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any, NamedTuple, Optional


class EventType(IntEnum):
    """Event codes, numbered as in the X protocol."""

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


class EventMask(IntFlag):
    """Event selection masks, with the X protocol bit values."""

    NO_EVENT = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    POINTER_MOTION_HINT = 1 << 7
    BUTTON1_MOTION = 1 << 8
    BUTTON2_MOTION = 1 << 9
    BUTTON3_MOTION = 1 << 10
    BUTTON4_MOTION = 1 << 11
    BUTTON5_MOTION = 1 << 12
    BUTTON_MOTION = 1 << 13
    KEYMAP_STATE = 1 << 14
    EXPOSURE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    STRUCTURE_NOTIFY = 1 << 17
    RESIZE_REDIRECT = 1 << 18
    SUBSTRUCTURE_NOTIFY = 1 << 19
    SUBSTRUCTURE_REDIRECT = 1 << 20
    FOCUS_CHANGE = 1 << 21
    PROPERTY_CHANGE = 1 << 22
    COLORMAP_CHANGE = 1 << 23
    OWNER_GRAB_BUTTON = 1 << 24


@dataclass(frozen=True)
class Event:
    """An input event addressed to a window.

    ``key`` is the key symbol of key events, ``button``/``x``/``y`` describe
    pointer events, ``count`` is the number of expose events still to follow,
    and ``delete_window`` marks a client message asking to close the window.
    """

    type: EventType
    window: Optional["Window"] = None
    key: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    delete_window: bool = False


class _Hook(NamedTuple):
    func: Callable[..., Any]
    param: Any
    mask: EventMask


class Window:
    """A window holding one hook per event type."""

    def __init__(self, width: int, height: int, title: str) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid window size {width}x{height}")
        self.width = width
        self.height = height
        self.title = title
        self.hooks: dict[EventType, _Hook] = {}

    def __repr__(self) -> str:
        return f"Window({self.width}, {self.height}, {self.title!r})"

    def hook(
        self,
        event: EventType,
        mask: EventMask | int,
        func: Callable[..., Any],
        param: Any = None,
    ) -> None:
        """Install ``func`` for ``event``, replacing any earlier hook."""
        self.hooks[EventType(event)] = _Hook(func, param, EventMask(mask))

    def key_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func(key, param)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, func, param)

    def mouse_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func(button, x, y, param)`` when a button is pressed."""
        self.hook(EventType.BUTTON_PRESS, EventMask.BUTTON_PRESS, func, param)

    def expose_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func(param)`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, EventMask.EXPOSURE, func, param)

    def event_mask(self) -> EventMask:
        """Return the union of the masks of all installed hooks."""
        mask = EventMask.NO_EVENT
        for hook in self.hooks.values():
            mask |= hook.mask
        return mask

    def dispatch(self, event: Event) -> None:
        """Pass ``event`` to the matching hook with its event arguments."""
        if event.type == EventType.CLIENT_MESSAGE and event.delete_window:
            closer = self.hooks.get(EventType.DESTROY_NOTIFY)
            if closer is not None:
                closer.func(closer.param)
        hook = self.hooks.get(event.type)
        if hook is None:
            return
        if event.type in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            hook.func(event.key, hook.param)
        elif event.type in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            hook.func(event.button, event.x, event.y, hook.param)
        elif event.type == EventType.MOTION_NOTIFY:
            hook.func(event.x, event.y, hook.param)
        elif event.type == EventType.EXPOSE:
            if event.count == 0:
                hook.func(hook.param)
        else:
            hook.func(hook.param)


class EventLoop:
    """Owns the windows and the queue of pending events."""

    def __init__(self) -> None:
        self.windows: list[Window] = []
        self.pending: deque[Event] = deque()
        self._loop_hook: Optional[_Hook] = None
        self._ended = False

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Create a window; the newest window comes first in ``windows``."""
        window = Window(width, height, title)
        self.windows.insert(0, window)
        return window

    def destroy_window(self, window: Window) -> None:
        """Remove ``window``; later events addressed to it are ignored."""
        try:
            self.windows.remove(window)
        except ValueError:
            raise ValueError(f"{window!r} does not belong to this loop") from None

    def loop_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func(param)`` each time the pending events are drained."""
        self._loop_hook = _Hook(func, param, EventMask.NO_EVENT)

    def post(self, event: Event) -> None:
        """Queue an event for the loop."""
        self.pending.append(event)

    def flush(self) -> None:
        """Discard every pending event."""
        self.pending.clear()

    def run(self) -> None:
        """Process events until every window is gone or ``end`` is called.

        Without a loop hook the loop also returns once the queue is empty,
        since nothing is left that could produce further events.
        """
        while self.windows and not self._ended:
            while not self._ended and (self._loop_hook is None or self.pending):
                if not self.pending:
                    return
                event = self.pending.popleft()
                if any(event.window is window for window in self.windows):
                    event.window.dispatch(event)
            if self._loop_hook is not None and not self._ended:
                self._loop_hook.func(self._loop_hook.param)

    def end(self) -> None:
        """Make ``run`` return at the next opportunity."""
        self._ended = True