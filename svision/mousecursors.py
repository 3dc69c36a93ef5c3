"""Mouse cursor shapes a widget can request."""

import enum


class MouseCursor(enum.Enum):
    INHERIT = 0
    ARROW = 1
    WAIT = 2
    BUSY = 3
    BEAM = 4
    SIZE_VERTICAL = 5
    SIZE_HORIZONTAL = 6
    SIZE_DIAGONAL_RIGHT = 7
    SIZE_DIAGONAL_LEFT = 8
    SIZE_ALL = 9
    SPLIT_HORIZONTAL = 10
    SPLIT_VERTICAL = 11
    NO_CURSOR = 12
    POINTER = 13
    FORBIDDEN = 14
    WHATS_THIS = 15
    CROSS = 16

    NORMAL = 1
    BLANK = 12
    LINK = 13
    EDIT = 4
    SIZE_NS = 5
    SIZE_WE = 6
    SIZE_NWSE = 8
    SIZE_NESW = 7