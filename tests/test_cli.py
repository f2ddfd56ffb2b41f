import io

import pytest

from pagesim.cli import main, render_fifo, render_lfu
from pagesim.policies import simulate_fifo, simulate_lfu

REFERENCE = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_render_fifo_line_per_reference():
    sim = simulate_fifo(REFERENCE, 3)
    out = render_fifo(sim)
    assert out.startswith("Page Allocation: FIFO\n")
    assert out.count("Frames: ") == len(REFERENCE)
    assert out.count("Page Hit") == sim.page_hits
    assert out.endswith(f"\nTotal Page Faults: {sim.page_faults}\n")


def test_render_fifo_empty_frame_format():
    out = render_fifo(simulate_fifo([1], 3))
    assert "Page Fault - Replacing page -1\n" in out
    assert "Frames: 1  -  - \n" in out


def test_render_lfu_summary():
    sim = simulate_lfu(REFERENCE, 3)
    out = render_lfu(sim)
    assert out.startswith("\nPage Replacement (LFU):\n")
    assert f"Total Page Faults: {sim.page_faults}\n" in out
    assert f"Total Page Hits: {sim.page_hits}\n" in out
    assert out.count("Referencing page") == len(REFERENCE)


def test_render_lfu_empty_and_replacement_lines():
    out = render_lfu(simulate_lfu([1, 1, 2, 3], 2))
    assert out.count("Page Fault - Allocated to empty frame\n") == 2
    assert "Referencing page 3: Page Fault - Replacing page 2\n" in out
    assert "Frames: 1 - \n" in out


def test_render_lfu_ratio_format():
    out = render_lfu(simulate_lfu([9, 9, 9, 9], 1))
    assert "Hit Ratio: 0.75\n" in out
    assert "Miss Ratio: 0.25\n" in out


def test_main_lfu(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["lfu"], "2\n4\n1 1 2 3\n")
    assert code == 0
    assert "Enter the number of page frames: " in out
    assert out.endswith(render_lfu(simulate_lfu([1, 1, 2, 3], 2)))


def test_main_lru_alias_runs_lfu(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["lru"], "3 5 1 2 3 1 4")
    assert code == 0
    assert out.endswith(render_lfu(simulate_lfu([1, 2, 3, 1, 4], 3)))


def test_main_fifo_reads_pages_first(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["fifo"], "5\n3\n1 2 3 1 4\n")
    assert code == 0
    assert "Enter number of pages:" in out
    assert out.endswith(render_fifo(simulate_fifo([1, 2, 3, 1, 4], 3)))


@pytest.mark.parametrize(
    "argv, text",
    [
        (["lfu"], ""),
        (["lfu"], "0 3 1 2 3"),
        (["lfu"], "2 x"),
        (["lfu"], "2 3 1 2"),
        (["fifo"], "-1 2"),
    ],
)
def test_main_rejects_bad_input(monkeypatch, capsys, argv, text):
    code, _, err = _run(monkeypatch, capsys, argv, text)
    assert code == 1
    assert "pagesim:" in err


def test_main_unknown_policy(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as info:
        main(["optimal"])
    assert info.value.code == 2