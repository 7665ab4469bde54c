import time
from dataclasses import dataclass, field

import numpy as np
from tabulate import tabulate
from tqdm import tqdm

from .config import BenchmarkConfig
from .counters import COUNTERS, SORTED_ONLY, count_merge
from .data_loader import generate_sorted_array

# Attribute of TouchCounters that each counter's touches are recorded under.
TOUCH_FIELDS = {
    "Linear": "linear",
    "Binary Search": "binary",
    "Merge": "merge",
}


@dataclass
class TrialResult:
    name: str
    counts: dict = field(default_factory=dict)
    touches: int = 0
    elapsed: float = 0.0  # seconds
    skipped: bool = False
    reason: str = ""


@dataclass
class TouchCounters:
    """Touch totals for one suite run, one field per algorithm."""
    linear: int = 0
    binary: int = 0
    merge: int = 0

    def reset(self):
        self.linear = 0
        self.binary = 0
        self.merge = 0

    def record(self, result: TrialResult):
        attr = TOUCH_FIELDS[result.name]
        setattr(self, attr, getattr(self, attr) + result.touches)


def run_trial(name: str, counter_fn, data: list, log_counts: bool = False,
              quiet: bool = False, **kwargs) -> TrialResult:
    """
    Times a single counter call with perf_counter and reports the elapsed
    time (and the counts when log_counts is set).
    """
    start_time = time.perf_counter()
    counts, touches = counter_fn(data, **kwargs)
    end_time = time.perf_counter()

    result = TrialResult(name=name, counts=counts, touches=touches, elapsed=end_time - start_time)
    if not quiet:
        if log_counts:
            print(f"counts: {counts}")
        print(f"runtime: {result.elapsed * 1e6:.2f} µs")
    return result


def run_suite(data: list, log_counts: bool = False, strict: bool = False,
              quiet: bool = False) -> tuple[list[TrialResult], TouchCounters]:
    """
    Runs Linear, Binary Search and Merge counting, in that order, on the same data.
    Returns the per-algorithm results and the touch totals of this run.

    Merge counting is undefined on an empty array, so it is reported as
    skipped instead of being called.
    """
    touch_counters = TouchCounters()
    touch_counters.reset()
    results = []

    for name, counter_fn in COUNTERS.items():
        if not quiet:
            print(name.lower())

        if counter_fn is count_merge and len(data) == 0:
            result = TrialResult(name=name, skipped=True, reason="empty input")
            if not quiet:
                print("skipped: empty input")
            results.append(result)
            continue

        kwargs = {"strict": strict} if name in SORTED_ONLY else {}
        result = run_trial(name, counter_fn, data, log_counts=log_counts, quiet=quiet, **kwargs)
        touch_counters.record(result)
        if not quiet:
            print(f"touches: {getattr(touch_counters, TOUCH_FIELDS[name])}")
        results.append(result)

    return results, touch_counters


def run_benchmarks(config: BenchmarkConfig) -> dict[str, dict[str, list]]:
    """
    Repeats the suite over `config.runs` freshly generated arrays and
    collects times (µs) and touches per algorithm for averaging.
    """
    all_results = {name: {'times': [], 'touches': []} for name in COUNTERS}

    for run in range(config.runs):
        print(f"Run {run + 1}/{config.runs}...")
        seed = None if config.seed is None else config.seed + run
        data = generate_sorted_array(config.size, config.pool, seed=seed, descending=config.descending)
        results, _ = run_suite(data, strict=config.strict, quiet=True)
        for result in results:
            if result.skipped:
                continue
            all_results[result.name]['times'].append(result.elapsed * 1e6)
            all_results[result.name]['touches'].append(result.touches)

    return all_results


def summarize(all_results: dict[str, dict[str, list]]) -> list[dict]:
    rows = []
    for name, data in all_results.items():
        rows.append({
            'Method': name,
            'Avg Time (µs)': float(np.mean(data['times'])) if data['times'] else 0.0,
            'Avg Touches': float(np.mean(data['touches'])) if data['touches'] else 0.0,
            'Runs': len(data['times']),
        })
    return rows


def format_results(rows: list[dict]) -> str:
    headers = ["Counting Method", "Avg Time (µs)", "Avg Touches", "Runs"]
    table_data = [
        [row['Method'], row['Avg Time (µs)'], row['Avg Touches'], row['Runs']]
        for row in rows
    ]
    return tabulate(table_data, headers=headers, tablefmt="grid", floatfmt=".2f")


def run_sweep(size: int, pools: list[int], runs: int = 3, seed=None,
              descending: bool = False, show_progress: bool = True) -> dict[int, dict[str, float]]:
    """
    Measures average touches per algorithm for a fixed array length and a
    range of value pools, i.e. how each method scales as M approaches N.
    """
    sweep = {}
    iterator = tqdm(pools, desc="Sweeping pool sizes", unit="pool") if show_progress else pools
    for pool in iterator:
        touches = {name: [] for name in COUNTERS}
        for run in range(runs):
            run_seed = None if seed is None else seed + run
            data = generate_sorted_array(size, pool, seed=run_seed, descending=descending)
            results, _ = run_suite(data, quiet=True)
            for result in results:
                if not result.skipped:
                    touches[result.name].append(result.touches)
        sweep[pool] = {name: float(np.mean(values)) for name, values in touches.items() if values}
    return sweep


def estimate_growth(pools: list[int], touches: list[float]) -> float:
    """
    Fits log(touches) = k * log(pool) + c and returns k, an empirical growth
    exponent of touches in M. This is a measurement, not a bound.
    """
    if len(set(pools)) < 2:
        return float('nan')
    slope, _ = np.polyfit(np.log(pools), np.log(touches), 1)
    return float(slope)


def format_sweep(sweep: dict[int, dict[str, float]]) -> str:
    pools = list(sweep)
    names = list(COUNTERS)
    table_data = [[pool] + [sweep[pool].get(name, 0.0) for name in names] for pool in pools]
    return tabulate(table_data, headers=["Pool"] + names, tablefmt="grid", floatfmt=".1f")
