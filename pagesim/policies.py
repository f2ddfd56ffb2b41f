"""Page replacement policies: FIFO and least-frequently-used."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass
class Frame:
    """A page frame with the bookkeeping the LFU policy needs."""

    page: Optional[int] = None
    frequency: int = 0
    last_used: int = 0

    @property
    def occupied(self) -> bool:
        return self.page is not None

    def load(self, page: int, time: int) -> None:
        """Place ``page`` in this frame, resetting its use count."""
        self.page = page
        self.frequency = 1
        self.last_used = time

    def touch(self, time: int) -> None:
        """Record another reference to the page held here."""
        self.frequency += 1
        self.last_used = time


@dataclass(frozen=True)
class Step:
    """The outcome of one page reference."""

    page: int
    hit: bool
    frame_index: int
    evicted: Optional[int]
    frames: tuple[Optional[int], ...]

    @property
    def fault(self) -> bool:
        return not self.hit


@dataclass(frozen=True)
class Simulation:
    """The full trace of a page replacement run."""

    policy: str
    frame_count: int
    steps: tuple[Step, ...]

    @property
    def page_faults(self) -> int:
        return sum(1 for step in self.steps if step.fault)

    @property
    def page_hits(self) -> int:
        return len(self.steps) - self.page_faults

    @property
    def hit_ratio(self) -> float:
        """Fraction of references that hit; NaN when there were none."""
        if not self.steps:
            return math.nan
        return self.page_hits / len(self.steps)

    @property
    def miss_ratio(self) -> float:
        """Fraction of references that faulted; NaN when there were none."""
        if not self.steps:
            return math.nan
        return self.page_faults / len(self.steps)

    @property
    def final_frames(self) -> tuple[Optional[int], ...]:
        if not self.steps:
            return (None,) * self.frame_count
        return self.steps[-1].frames


def _check_frame_count(frame_count: int) -> None:
    if isinstance(frame_count, bool) or not isinstance(frame_count, int):
        raise TypeError("frame count must be an integer")
    if frame_count < 1:
        raise ValueError("frame count must be at least 1")


def simulate_fifo(pages: Iterable[int], frame_count: int) -> Simulation:
    """Run the reference string through FIFO replacement."""
    _check_frame_count(frame_count)
    frames: list[Optional[int]] = [None] * frame_count
    cursor = 0
    steps = []
    for page in pages:
        if page in frames:
            steps.append(Step(page, True, frames.index(page), None, tuple(frames)))
            continue
        evicted = frames[cursor]
        frames[cursor] = page
        steps.append(Step(page, False, cursor, evicted, tuple(frames)))
        cursor = (cursor + 1) % frame_count
    return Simulation("FIFO", frame_count, tuple(steps))


def simulate_lfu(pages: Iterable[int], frame_count: int) -> Simulation:
    """Run the reference string through LFU replacement.

    Empty frames are filled first. Otherwise the frame with the lowest
    reference count is replaced, the least recently used one on a tie,
    and the lowest-numbered one if still tied.
    """
    _check_frame_count(frame_count)
    frames = [Frame() for _ in range(frame_count)]
    steps = []
    for time, page in enumerate(pages, start=1):
        index = next((i for i, f in enumerate(frames) if f.page == page), None)
        if index is not None:
            frames[index].touch(time)
            snapshot = tuple(f.page for f in frames)
            steps.append(Step(page, True, index, None, snapshot))
            continue
        index = next((i for i, f in enumerate(frames) if not f.occupied), None)
        if index is None:
            index = min(
                range(frame_count),
                key=lambda i: (frames[i].frequency, frames[i].last_used),
            )
        evicted = frames[index].page
        frames[index].load(page, time)
        snapshot = tuple(f.page for f in frames)
        steps.append(Step(page, False, index, evicted, snapshot))
    return Simulation("LFU", frame_count, tuple(steps))