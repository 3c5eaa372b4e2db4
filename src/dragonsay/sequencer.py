"""Sequencer: emit captions and side dishes as frames, optionally animated."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from dragonsay.constants import CAPTION_WIDTH, MIN_INTERVAL_MS
from dragonsay.layout import pad_center
from dragonsay.renderer import SlotPolicy, render_blank_frame, render_frame

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from dragonsay.terminal import RenderTarget

log = logging.getLogger(__name__)


class Phase(StrEnum):
    PRE_CAPTIONS = "pre_captions"
    SIDE_DISHES = "side_dishes"
    AFTER_CAPTIONS = "after_captions"


PHASE_ORDER = (Phase.PRE_CAPTIONS, Phase.SIDE_DISHES, Phase.AFTER_CAPTIONS)


@dataclass(frozen=True)
class AnimationPlan:
    """Everything one run prints, in order.

    ``interval_ms`` of None means static mode: no pauses and no clears.
    """

    pre_captions: tuple[str, ...] = ()
    side_dishes: tuple[str, ...] = ()
    after_captions: tuple[str, ...] = ()
    interval_ms: int | None = None

    def __post_init__(self) -> None:
        if self.interval_ms is not None and self.interval_ms < MIN_INTERVAL_MS:
            msg = f"interval must be at least {MIN_INTERVAL_MS} ms, got {self.interval_ms}"
            raise ValueError(msg)
        # Accept any sequence from callers but keep the plan immutable.
        for phase in PHASE_ORDER:
            object.__setattr__(self, phase.value, tuple(getattr(self, phase.value)))

    @property
    def animated(self) -> bool:
        return self.interval_ms is not None

    def items(self, phase: Phase) -> tuple[str, ...]:
        return getattr(self, phase.value)


@dataclass
class RunStats:
    frames: int = 0
    clears: int = 0
    pauses: int = 0
    frames_by_phase: dict[Phase, int] = field(default_factory=dict)


class Sequencer:
    """Drive a RenderTarget through the three phases of an AnimationPlan."""

    def __init__(
        self,
        target: RenderTarget,
        *,
        policy: SlotPolicy = SlotPolicy.CHARACTERS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.target = target
        self.policy = policy
        self._sleep = sleep

    def run(self, plan: AnimationPlan) -> RunStats:
        """Print the whole plan. Any terminal error aborts the run.

        In animation mode the screen is cleared once up front and between
        consecutive frames, including across phase boundaries, but never
        after the final frame.
        """
        stats = RunStats()
        width = self.target.current_width()
        blank_frame = render_blank_frame(width)
        log.debug(
            "run start: %d pre, %d side dishes, %d after, interval=%s, width=%d",
            len(plan.pre_captions),
            len(plan.side_dishes),
            len(plan.after_captions),
            plan.interval_ms,
            width,
        )

        interval = plan.interval_ms
        if interval is not None:
            self.target.clear_screen()
            stats.clears += 1

        # Set once something is on screen, reset by every clear.
        printed = False
        for phase in PHASE_ORDER:
            items = plan.items(phase)
            if interval is not None and printed and items:
                self._pause_and_clear(interval, stats)
                printed = False

            for index, item in enumerate(items):
                if phase is Phase.SIDE_DISHES:
                    self._write_block(render_frame(item, width, self.policy), "")
                else:
                    self._write_block(blank_frame, item)
                stats.frames += 1
                stats.frames_by_phase[phase] = stats.frames_by_phase.get(phase, 0) + 1
                printed = True

                if interval is not None and index < len(items) - 1:
                    self._pause_and_clear(interval, stats)
                    printed = False

        log.debug("run done: %d frames, %d clears", stats.frames, stats.clears)
        return stats

    def _write_block(self, frame: Sequence[str], caption: str) -> None:
        for line in frame:
            self.target.write_line(line)
        self.target.write_line(pad_center(caption, CAPTION_WIDTH))

    def _pause_and_clear(self, interval_ms: int, stats: RunStats) -> None:
        self._sleep(interval_ms / 1000)
        stats.pauses += 1
        self.target.clear_screen()
        stats.clears += 1


def say(
    side_dish: str,
    target: RenderTarget,
    caption: str = "",
    policy: SlotPolicy = SlotPolicy.CHARACTERS,
) -> None:
    """Print a single dragon and caption without any phase or clear logic."""
    width = target.current_width()
    for line in render_frame(side_dish, width, policy):
        target.write_line(line)
    target.write_line(pad_center(caption, CAPTION_WIDTH))


__all__ = ["PHASE_ORDER", "AnimationPlan", "Phase", "RunStats", "Sequencer", "say"]
