# pagesim

`pagesim` simulates page replacement for a page reference string and a fixed
number of page frames. For every reference it records whether the page was a
hit or a fault, which page (if any) was evicted, and what the frames hold
afterwards. The summary gives the total faults and hits and the hit and miss
ratios.

Two policies are available:

- **FIFO**: on a fault, the frames are refilled in round-robin order, so the
  page that has been resident longest is replaced.
- **LFU**: on a fault, the first empty frame is used if there is one.
  Otherwise the page with the lowest reference count is replaced; on a tie,
  the one used least recently; if still tied, the one in the lowest-numbered
  frame. A page loaded into a frame starts with a count of 1.

## Installation

```
pip install .
```

## Command line

```
pagesim [fifo|lfu|lru]
```

The policy defaults to `lfu`. The command reads whitespace-separated integers
from standard input, prompting as it goes:

- `lfu`: the number of page frames, the number of pages, then the page
  reference string.
- `fifo`: the number of pages, the number of page frames, then the page
  reference string.

It then prints one line per reference (`Page Hit` or `Page Fault - ...`)
followed by the frame contents, and the summary. The LFU report includes total
hits and the hit and miss ratios to two decimal places; the FIFO report gives
the total page faults.

If input ends early, a value is not an integer, the number of frames is below
1, or the number of pages is negative, an error is written to standard error
and the command exits with status 1.

## Library use

```python
from pagesim.policies import simulate_fifo, simulate_lfu
from pagesim.cli import render_lfu

pages = [7, 0, 1, 2, 0, 3, 0, 4]

fifo = simulate_fifo(pages, 3)
print(fifo.page_faults, fifo.page_hits)

lfu = simulate_lfu(pages, 3)
print(lfu.hit_ratio, lfu.miss_ratio)
print(lfu.final_frames)
print(render_lfu(lfu))
```

`simulate_fifo(pages, frame_count)` and `simulate_lfu(pages, frame_count)`
return a `Simulation` with:

- `policy` (`"FIFO"` or `"LFU"`), `frame_count`, and `steps`;
- the properties `page_faults`, `page_hits`, `hit_ratio`, `miss_ratio`
  (the ratios are NaN when there were no references) and `final_frames`.

Each `Step` holds `page`, `hit`, `frame_index`, `evicted` (`None` when an
empty frame was used or on a hit), and `frames`, a tuple of the pages held
after the reference with `None` for an empty frame. `step.fault` is the
opposite of `step.hit`.

`Frame` is the per-frame record the LFU policy keeps: `page`, `frequency`,
`last_used`, the `occupied` property, and the `load` and `touch` methods.

A `frame_count` that is not an integer raises `TypeError`; one below 1 raises
`ValueError`.

`render_fifo(simulation)` and `render_lfu(simulation)` turn a simulation into
the same text report that the command prints.

## What it does not do

There is no least-recently-used policy. The command accepts `lru` as a policy
name, but it runs the LFU simulation.

## Running the tests

```
pip install .[test]
pytest
```