"""Input events and the shared press/hover state machine for clickable widgets."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class ButtonStates(enum.Enum):
    NORMAL = enum.auto()
    HOVERED = enum.auto()
    CLICKED_INSIDE = enum.auto()
    CLICKED_OUTSIDE = enum.auto()


class EventPropagation(enum.Enum):
    HANDLED = enum.auto()
    PROPAGATE = enum.auto()


class KeyCodes(enum.Enum):
    UNKNOWN = enum.auto()
    TAB = enum.auto()
    RETURN = enum.auto()
    ENTER = enum.auto()
    ESCAPE = enum.auto()
    SPACE = enum.auto()
    PAGE_UP = enum.auto()
    PAGE_DOWN = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    ARROW_LEFT = enum.auto()
    ARROW_UP = enum.auto()
    ARROW_RIGHT = enum.auto()
    ARROW_DOWN = enum.auto()
    INSERT = enum.auto()
    DELETE = enum.auto()
    SHIFT_LEFT = enum.auto()
    SHIFT_RIGHT = enum.auto()
    CONTROL_LEFT = enum.auto()
    CONTROL_RIGHT = enum.auto()


class MouseEvents(enum.Enum):
    MOUSE_MOVE = enum.auto()
    PRESS = enum.auto()
    RELEASE = enum.auto()


@dataclass
class EventMouse:
    type: MouseEvents = MouseEvents.MOUSE_MOVE
    x: int = 0
    y: int = 0
    button: int = 0
    pressed: bool = False
    is_local: bool = False


@dataclass
class EventKeyboard:
    key: KeyCodes = KeyCodes.UNKNOWN
    keydown: bool = False


_ACTIVATION_KEYS = frozenset({KeyCodes.ENTER, KeyCodes.RETURN, KeyCodes.SPACE})


@dataclass
class AbstractButtonState:
    """Tracks hover and press state of a clickable widget."""

    state: ButtonStates = ButtonStates.NORMAL

    def on_mouse_enter(self) -> None:
        if self.state is ButtonStates.CLICKED_OUTSIDE:
            self.state = ButtonStates.CLICKED_INSIDE
        elif self.state is ButtonStates.NORMAL:
            self.state = ButtonStates.HOVERED

    def on_mouse_leave(self) -> None:
        if self.state is ButtonStates.CLICKED_INSIDE:
            self.state = ButtonStates.CLICKED_OUTSIDE
        elif self.state is ButtonStates.CLICKED_OUTSIDE:
            self.state = ButtonStates.CLICKED_INSIDE
        elif self.state is ButtonStates.HOVERED:
            self.state = ButtonStates.NORMAL

    def on_mouse_click(self, event: EventMouse) -> EventPropagation:
        result = EventPropagation.PROPAGATE
        state = self.state
        if state is ButtonStates.CLICKED_INSIDE:
            result = EventPropagation.HANDLED
            if not event.pressed:
                self.state = ButtonStates.HOVERED
        elif state is ButtonStates.CLICKED_OUTSIDE:
            if event.pressed:
                self.state = ButtonStates.CLICKED_INSIDE
                result = EventPropagation.HANDLED
            else:
                self.state = ButtonStates.NORMAL
                logger.debug("Button click aborted")
        elif state is ButtonStates.HOVERED:
            if event.pressed:
                result = EventPropagation.HANDLED
                self.state = ButtonStates.CLICKED_INSIDE
        elif event.pressed:
            self.state = ButtonStates.CLICKED_INSIDE
        return result

    def on_keyboard(self, event: EventKeyboard) -> EventPropagation:
        if event.keydown and event.key in _ACTIVATION_KEYS:
            return EventPropagation.HANDLED
        return EventPropagation.PROPAGATE