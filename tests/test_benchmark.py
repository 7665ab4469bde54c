import math

import pytest

from duplicate_count_exercise.benchmark import (
    TouchCounters, TrialResult, estimate_growth, format_results, format_sweep,
    run_benchmarks, run_suite, run_sweep, run_trial, summarize,
)
from duplicate_count_exercise.config import BenchmarkConfig
from duplicate_count_exercise.counters import count_linear
from duplicate_count_exercise.errors import InvalidInputError

FIXTURE = ['a', 'b', 'b', 'b', 'b', 'b', 'd', 'h', 'h', 'h', 'p']


def test_touch_counters_reset():
    counters = TouchCounters(linear=3, binary=4, merge=5)
    counters.reset()
    assert (counters.linear, counters.binary, counters.merge) == (0, 0, 0)


def test_touch_counters_record():
    counters = TouchCounters()
    counters.record(TrialResult(name="Binary Search", touches=7))
    counters.record(TrialResult(name="Binary Search", touches=2))
    assert counters.binary == 9
    assert counters.linear == 0


def test_run_trial_reports_time_and_counts(capsys):
    result = run_trial("Linear", count_linear, [1, 1, 2], log_counts=True)
    assert result.counts == {1: 2, 2: 1}
    assert result.touches == 3
    assert result.elapsed >= 0
    out = capsys.readouterr().out
    assert "counts: {1: 2, 2: 1}" in out
    assert "runtime:" in out


def test_run_trial_hides_counts_without_logging(capsys):
    run_trial("Linear", count_linear, [1, 1, 2])
    out = capsys.readouterr().out
    assert "counts:" not in out
    assert "runtime:" in out


def test_run_suite_fixture(capsys):
    results, counters = run_suite(FIXTURE, log_counts=True)
    assert [r.name for r in results] == ["Linear", "Binary Search", "Merge"]
    for result in results:
        assert result.counts == {'a': 1, 'b': 5, 'd': 1, 'h': 3, 'p': 1}
    assert counters.linear == len(FIXTURE)
    assert counters.binary == results[1].touches
    assert counters.merge == results[2].touches

    out = capsys.readouterr().out
    assert "linear" in out
    assert "binary search" in out
    assert "merge" in out
    assert out.count("touches:") == 3


def test_run_suite_counters_are_isolated():
    _, first = run_suite([5, 5, 5, 5, 5], quiet=True)
    _, second = run_suite([5, 5, 5, 5, 5], quiet=True)
    assert first == second
    assert first.linear == 5
    assert first.merge == 1


def test_run_suite_skips_merge_on_empty_input(capsys):
    results, counters = run_suite([])
    linear, binary, merge = results
    assert linear.counts == {}
    assert binary.counts == {}
    assert merge.skipped
    assert merge.reason == "empty input"
    assert counters == TouchCounters()
    assert "skipped: empty input" in capsys.readouterr().out


def test_run_suite_strict_raises_on_unsorted():
    with pytest.raises(InvalidInputError):
        run_suite([2, 1, 3], strict=True, quiet=True)


def test_run_suite_quiet(capsys):
    run_suite(FIXTURE, quiet=True)
    assert capsys.readouterr().out == ""


def test_run_benchmarks_collects_every_run(capsys):
    config = BenchmarkConfig(size=200, pool=10, runs=3, seed=7)
    all_results = run_benchmarks(config)
    assert set(all_results) == {"Linear", "Binary Search", "Merge"}
    for data in all_results.values():
        assert len(data['times']) == 3
        assert len(data['touches']) == 3
    assert all_results["Linear"]['touches'] == [200, 200, 200]


def test_summarize_and_format(capsys):
    rows = summarize(run_benchmarks(BenchmarkConfig(size=100, pool=5, runs=2, seed=1)))
    by_method = {row['Method']: row for row in rows}
    assert by_method["Linear"]['Avg Touches'] == 100.0
    assert by_method["Merge"]['Runs'] == 2

    table = format_results(rows)
    assert "Counting Method" in table
    assert "Binary Search" in table
    assert "100.00" in table


def test_summarize_handles_empty_series():
    rows = summarize({"Merge": {'times': [], 'touches': []}})
    assert rows == [{'Method': "Merge", 'Avg Time (µs)': 0.0, 'Avg Touches': 0.0, 'Runs': 0}]


def test_run_sweep_measures_each_pool():
    sweep = run_sweep(300, [1, 10, 300], runs=2, seed=3, show_progress=False)
    assert list(sweep) == [1, 10, 300]
    # a single distinct value collapses merge counting to one touch
    assert sweep[1]["Merge"] == 1.0
    for pool in sweep:
        assert sweep[pool]["Linear"] == 300.0

    table = format_sweep(sweep)
    assert "Pool" in table
    assert "300.0" in table
    assert "Merge" in table


def test_estimate_growth():
    assert estimate_growth([1, 10, 100], [5.0, 50.0, 500.0]) == pytest.approx(1.0)
    assert estimate_growth([1, 10, 100], [7.0, 7.0, 7.0]) == pytest.approx(0.0, abs=1e-9)
    assert math.isnan(estimate_growth([10], [3.0]))
    assert math.isnan(estimate_growth([10, 10], [3.0, 4.0]))


def test_format_results_keeps_two_decimals():
    rows = [{'Method': "Linear", 'Avg Time (µs)': 12.5, 'Avg Touches': 100.0, 'Runs': 4}]
    table = format_results(rows)
    assert "12.50" in table
    assert "100.00" in table
    assert " 4 |" in table
