"""Layout helpers placing icons and labels along the frame strip."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Sequence

from .constants import BORDER, ICON_SIZE, LETTER_WIDTH
from .text_values import FieldKey, ResolvedFields


@dataclass(frozen=True)
class LayoutSpacing:
    letter_width: int = LETTER_WIDTH
    border: int = BORDER
    icon_size: int = ICON_SIZE


DEFAULT_SPACING = LayoutSpacing()


@dataclass(frozen=True)
class PositionedItem:
    icon_position: int
    text_position: int
    text: str
    field_key: FieldKey


def text_width(text: str, letter_width: int) -> int:
    """Estimated width of a label, every character is ``letter_width`` wide."""
    return len(text) * letter_width


def compute_layout(
    resolved: ResolvedFields,
    strip_width: int,
    left_order: Sequence[FieldKey],
    right_order: Sequence[FieldKey],
    spacing: LayoutSpacing = DEFAULT_SPACING,
) -> List[PositionedItem]:
    """Place the left group from the left edge and the right group from the right edge.

    Args:
        resolved: Display strings for every field
        strip_width: Width of the strip in pixels
        left_order: Keys shown left-aligned, in visual order
        right_order: Keys shown right-aligned, in visual order
        spacing: Letter width, border and icon size in pixels
    Returns:
        Left items in input order followed by right items in visual order.
        The groups are not checked against each other, so on a narrow strip
        they may overlap or fall outside ``[0, strip_width]``.
    """
    left_items = get_left_aligned_positions(spacing, resolved, left_order)
    right_items = get_right_aligned_positions(spacing, resolved, right_order, strip_width)
    return left_items + right_items


def get_left_aligned_positions(
    spacing: LayoutSpacing,
    resolved: ResolvedFields,
    display_order: Sequence[FieldKey],
) -> List[PositionedItem]:
    items: List[PositionedItem] = []

    for key in display_order:
        if items:
            last = items[-1]
            icon_position = (
                last.text_position + text_width(last.text, spacing.letter_width) + spacing.border
            )
        else:
            icon_position = spacing.border
        text_position = icon_position + spacing.icon_size + spacing.border

        items.append(PositionedItem(icon_position, text_position, resolved.get(key), key))

    return items


def get_right_aligned_positions(
    spacing: LayoutSpacing,
    resolved: ResolvedFields,
    display_order: Sequence[FieldKey],
    strip_width: int,
) -> List[PositionedItem]:
    """Lay out the group as offsets growing inward from the right edge, then flip them."""
    offsets: List[PositionedItem] = []

    for key in reversed(display_order):
        last_icon_offset = offsets[-1].icon_position if offsets else 0
        text = resolved.get(key)
        text_offset = last_icon_offset + spacing.border + text_width(text, spacing.letter_width)
        icon_offset = text_offset + spacing.border + spacing.icon_size

        offsets.append(PositionedItem(icon_offset, text_offset, text, key))

    return [
        replace(
            item,
            icon_position=strip_width - item.icon_position,
            text_position=strip_width - item.text_position,
        )
        for item in reversed(offsets)
    ]
