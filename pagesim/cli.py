"""Interactive front end for the page replacement simulators."""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Iterator
from typing import Optional, TextIO

from pagesim.policies import Simulation, simulate_fifo, simulate_lfu


class _InputError(Exception):
    pass


def _single(value: float) -> float:
    """Round to single precision, matching how the ratios are reported."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _frames_line(frames, empty: str) -> str:
    cells = "".join(empty if page is None else f"{page} " for page in frames)
    return f"Frames: {cells}\n"


def render_fifo(simulation: Simulation) -> str:
    """Format a FIFO run as the step-by-step report."""
    lines = ["Page Allocation: FIFO\n"]
    for step in simulation.steps:
        lines.append(f"Referencing page {step.page}: ")
        if step.hit:
            lines.append("Page Hit\n")
        else:
            evicted = -1 if step.evicted is None else step.evicted
            lines.append(f"Page Fault - Replacing page {evicted}\n")
        lines.append(_frames_line(step.frames, " - "))
    lines.append(f"\nTotal Page Faults: {simulation.page_faults}\n")
    return "".join(lines)


def render_lfu(simulation: Simulation) -> str:
    """Format an LFU run as the step-by-step report with ratios."""
    lines = ["\nPage Replacement (LFU):\n"]
    for step in simulation.steps:
        lines.append(f"Referencing page {step.page}: ")
        if step.hit:
            lines.append("Page Hit\n")
        elif step.evicted is None:
            lines.append("Page Fault - Allocated to empty frame\n")
        else:
            lines.append(f"Page Fault - Replacing page {step.evicted}\n")
        lines.append(_frames_line(step.frames, "- "))
    lines.append(f"\nTotal Page Faults: {simulation.page_faults}\n")
    lines.append(f"Total Page Hits: {simulation.page_hits}\n")
    lines.append(f"\nHit Ratio: {_single(simulation.hit_ratio):.2f}\n")
    lines.append(f"Miss Ratio: {_single(simulation.miss_ratio):.2f}\n")
    return "".join(lines)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str, what: str) -> int:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise _InputError(f"unexpected end of input while reading {what}")
    try:
        return int(token)
    except ValueError:
        raise _InputError(f"invalid {what}: {token!r}") from None


def _read_pages(tokens: Iterator[str], count: int) -> list[int]:
    if count < 0:
        raise _InputError("number of pages must not be negative")
    return [_read_int(tokens, "", "page number") for _ in range(count)]


def _check_frames(count: int) -> None:
    if count < 1:
        raise _InputError("number of page frames must be at least 1")


def _run_fifo(tokens: Iterator[str]) -> str:
    page_count = _read_int(tokens, "Enter number of pages:", "number of pages")
    frame_count = _read_int(tokens, "Enter number of page frames:", "number of page frames")
    _check_frames(frame_count)
    print("Enter the page reference string:")
    pages = _read_pages(tokens, page_count)
    return render_fifo(simulate_fifo(pages, frame_count))


def _run_lfu(tokens: Iterator[str]) -> str:
    frame_count = _read_int(
        tokens, "Enter the number of page frames: ", "number of page frames"
    )
    page_count = _read_int(tokens, "Enter the number of pages: ", "number of pages")
    _check_frames(frame_count)
    print("Enter the page reference string (separated by spaces):")
    pages = _read_pages(tokens, page_count)
    return render_lfu(simulate_lfu(pages, frame_count))


def main(argv: Optional[list[str]] = None) -> int:
    """Prompt for frames and a reference string, then print the trace."""
    parser = argparse.ArgumentParser(
        prog="pagesim", description="Simulate page replacement."
    )
    parser.add_argument(
        "policy",
        nargs="?",
        default="lfu",
        choices=["fifo", "lfu", "lru"],
        help="replacement policy (lru runs the same LFU simulation)",
    )
    args = parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        report = _run_fifo(tokens) if args.policy == "fifo" else _run_lfu(tokens)
    except _InputError as exc:
        print(f"\npagesim: {exc}", file=sys.stderr)
        return 1
    print(report, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())