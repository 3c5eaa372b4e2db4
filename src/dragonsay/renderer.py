"""Frame renderer: cut a side dish into two slots and draw the dragon."""

from __future__ import annotations

import logging
import re
from enum import StrEnum
from typing import NamedTuple

from dragonsay.constants import (
    DRAGON_TEMPLATE,
    SLOT_CAPACITY,
    SLOT_MARKERS,
    SLOT_WIDTH,
)
from dragonsay.layout import pad_center, pad_left

log = logging.getLogger(__name__)

_MARKER_PATTERN = re.compile("|".join(re.escape(marker) for marker in SLOT_MARKERS))
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class SlotPolicy(StrEnum):
    """How a side dish is segmented into the two slots."""

    CHARACTERS = "chars"
    LINES = "lines"


class SlotPair(NamedTuple):
    first: str
    second: str


def split_characters(side_dish: str, capacity: int = SLOT_CAPACITY) -> SlotPair:
    """Split a side dish into two windows of at most capacity characters.

    Anything past ``2 * capacity`` characters is dropped.
    """
    if len(side_dish) <= capacity:
        return SlotPair(side_dish, "")
    if len(side_dish) > 2 * capacity:
        log.debug("side dish truncated from %d to %d characters", len(side_dish), 2 * capacity)
    return SlotPair(side_dish[:capacity], side_dish[capacity : 2 * capacity])


def split_lines(side_dish: str, width: int = SLOT_WIDTH) -> SlotPair:
    """Use the first two lines of a multi-line side dish as the slots.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` count as line breaks, and trailing
    breaks are ignored. A side dish that is still a single line falls back to
    :func:`split_characters`. Missing lines leave a slot empty; each line is
    clipped to the slot width so it never outgrows the art.
    """
    stripped = side_dish.rstrip("\r\n")
    lines = _LINE_BREAK.split(stripped)
    if len(lines) < 2:
        return split_characters(stripped)
    if len(lines) > 2:
        log.debug("side dish has %d lines, keeping the first two", len(lines))
    return SlotPair(lines[0][:width], lines[1][:width])


def derive_slots(side_dish: str, policy: SlotPolicy = SlotPolicy.CHARACTERS) -> SlotPair:
    if policy is SlotPolicy.LINES:
        return split_lines(side_dish)
    return split_characters(side_dish)


def fill_template(slots: SlotPair) -> list[str]:
    """Substitute centered slots into the art, returning its raw lines.

    Markers are replaced line by line in a single pass, so slot text never
    adds lines to the art or gets substituted twice.
    """
    padded = dict(zip(SLOT_MARKERS, (pad_center(slot, SLOT_WIDTH) for slot in slots), strict=True))
    return [
        _MARKER_PATTERN.sub(lambda match: padded[match.group(0)], line)
        for line in DRAGON_TEMPLATE.splitlines()
    ]


def render_frame(
    side_dish: str,
    terminal_width: int,
    policy: SlotPolicy = SlotPolicy.CHARACTERS,
) -> list[str]:
    """Render the dragon holding side_dish, each line padded to terminal_width.

    Lines wider than the terminal are left as they are.
    """
    slots = derive_slots(side_dish, policy)
    return [pad_left(line, terminal_width) for line in fill_template(slots)]


def render_blank_frame(terminal_width: int) -> list[str]:
    """Render the dragon with both slots empty."""
    return render_frame("", terminal_width)


__all__ = [
    "SlotPair",
    "SlotPolicy",
    "derive_slots",
    "fill_template",
    "render_blank_frame",
    "render_frame",
    "split_characters",
    "split_lines",
]
