"""Box layouts that place child items in a row or a column."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Callable, TypeVar

from svision.geometry import LayoutParams, Position, Size

T = TypeVar("T", bound="LayoutItem")


def _round_half_away(value: float) -> int:
    """Round to nearest, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class LayoutItem(ABC):
    """Something a layout can size and place, possibly holding sub-items."""

    def __init__(self) -> None:
        self.sub_items: list[LayoutItem] = []
        self.on_item_added: Callable[[LayoutItem, int], None] | None = None
        self.padding = LayoutParams()
        self.margin = LayoutParams()
        self.weight = 1.0

    @abstractmethod
    def relayout(self, position: Position, size: Size) -> None:
        """Place this item at ``position`` with the given ``size``."""

    @abstractmethod
    def size_hint(self) -> Size:
        """Preferred size; a zero dimension means "stretch"."""

    def ignore_layout(self) -> bool:
        """True when the parent layout should skip this item."""
        return False

    def remove_all(self) -> None:
        self.sub_items.clear()

    def add(self, item: T) -> T:
        """Append ``item`` and return it."""
        self.sub_items.append(item)
        if self.on_item_added is not None:
            self.on_item_added(self, len(self.sub_items) - 1)
        return item

    def _laid_out(self) -> list[LayoutItem]:
        return [item for item in self.sub_items if not item.ignore_layout()]


class HorizontalSpacer(LayoutItem):
    """Empty item that takes spare horizontal space."""

    def relayout(self, position: Position, size: Size) -> None:
        pass

    def size_hint(self) -> Size:
        return Size(0, 1)


class VerticalSpacer(LayoutItem):
    """Empty item that takes spare vertical space."""

    def relayout(self, position: Position, size: Size) -> None:
        pass

    def size_hint(self) -> Size:
        return Size(1, 0)


class HorizontalLayout(LayoutItem):
    """Places sub-items left to right."""

    def relayout(self, position: Position, size: Size) -> None:
        if not self.sub_items:
            return
        total_weight = 0.0
        widget_count = 0
        width = size.width - self.margin.horizontal()
        for item in self._laid_out():
            hint = item.size_hint()
            if hint.width <= 0:
                widget_count += 1
                total_weight += item.weight
            else:
                width -= hint.width
            width -= self.padding.horizontal()

        if widget_count:
            width += self.padding.horizontal()

        rec_width = max(0, width)
        rec_height = max(0, size.height - self.margin.vertical())
        width = max(0, width)
        x = position.x + self.margin.start
        y = position.y + self.margin.top

        first, last = self.sub_items[0], self.sub_items[-1]
        for item in self.sub_items:
            if item.ignore_layout():
                continue
            hint = item.size_hint()
            if hint.width <= 0:
                rec_width = _round_half_away(width * item.weight / total_weight)
            else:
                rec_width = hint.width
            if hint.height > 0:
                rec_height = hint.height
            if item is not first:
                x += self.padding.start
            item.relayout(Position(x, y), Size(rec_width, rec_height))
            x += rec_width
            if item is not last:
                x += self.padding.end

    def size_hint(self) -> Size:
        width = height = 0
        count = 0
        auto_width = auto_height = False
        for item in self._laid_out():
            count += 1
            item_hint = item.size_hint()
            if item_hint.width != 0:
                width = max(item_hint.width, width)
            else:
                auto_width = True
            if item_hint.height > 0:
                height = max(item_hint.height, height)
            else:
                auto_height = True
            width += self.padding.horizontal()

        if count:
            width += self.padding.horizontal()
            width += self.margin.horizontal()
            height += self.margin.vertical()
            if auto_width:
                width = 0
            if auto_height:
                height = 0
        return Size(width, height)


class VerticalLayout(LayoutItem):
    """Places sub-items top to bottom."""

    def relayout(self, position: Position, size: Size) -> None:
        if not self.sub_items:
            return
        total_weight = 0.0
        widget_count = 0
        height = size.height - self.margin.vertical()
        for item in self._laid_out():
            hint = item.size_hint()
            if hint.height <= 0:
                widget_count += 1
                total_weight += item.weight
            else:
                height -= hint.height
            height -= self.padding.vertical()

        if widget_count:
            height += self.padding.vertical()

        rec_height = max(0, height)
        rec_width = max(0, size.width - self.margin.horizontal())
        height = max(0, height)
        x = position.x + self.margin.start
        y = position.y + self.margin.top

        first, last = self.sub_items[0], self.sub_items[-1]
        for item in self.sub_items:
            if item.ignore_layout():
                continue
            hint = item.size_hint()
            if hint.height <= 0:
                rec_height = _round_half_away(height * item.weight / total_weight)
            else:
                rec_height = hint.height
            if hint.width > 0:
                rec_width = hint.width
            if item is not first:
                y += self.padding.top
            item.relayout(Position(x, y), Size(rec_width, rec_height))
            y += rec_height
            if item is not last:
                y += self.padding.bottom

    def size_hint(self) -> Size:
        width = height = 0
        count = 0
        auto_width = auto_height = False
        for item in self._laid_out():
            count += 1
            item_hint = item.size_hint()
            if item_hint.height != 0:
                height = max(item_hint.height, height)
            else:
                auto_height = True
            if item_hint.width != 0:
                width = max(item_hint.width, width)
            else:
                auto_width = True
            height += self.padding.vertical()

        if count:
            width += self.padding.horizontal()
            width += self.margin.horizontal()
            height += self.margin.vertical()
            if auto_width:
                width = 0
            if auto_height:
                height = 0
        return Size(width, height)