import argparse

from duplicate_count_exercise.config import BenchmarkConfig
from duplicate_count_exercise.data_loader import load_test_arrays
from duplicate_count_exercise.benchmark import (
    run_suite, run_benchmarks, summarize, format_results, run_sweep, estimate_growth, format_sweep,
)
from duplicate_count_exercise.counters import COUNTERS


def run_exercise(config: BenchmarkConfig, sweep_pools: list[int] | None = None):
    """
    Runs every counter on the fixture and on a random sorted array, then prints
    averaged benchmark results (and optionally a sweep over pool sizes).
    """
    print("--- Duplicate Counting Exercise ---")

    # 1. Build the test arrays
    print("\n1. Preparing test arrays...")
    arrays = load_test_arrays(config)

    # 2. Single runs with per-algorithm output
    print("\n2. Running each counter once per array...")
    for label, data in arrays.items():
        print(f"\n--- {label} ---")
        run_suite(data, log_counts=config.log_counts, strict=config.strict)

    # 3. Averaged benchmarks
    print(f"\n--- Running Benchmarks over {config.runs} random arrays ---")
    rows = summarize(run_benchmarks(config))

    print("\n\n--- Final Averaged Benchmark Results ---")
    print(format_results(rows))

    print("\nAnalysis:")
    print(f"Averaged over {config.runs} random arrays of {config.size} values drawn from a pool of {config.pool}.")
    print(f"Linear counting always takes exactly N = {config.size} touches.")
    print("-" * 80)

    if sweep_pools:
        print(f"\n--- Touches vs pool size (N={config.size}) ---")
        sweep = run_sweep(config.size, sweep_pools, runs=config.runs, seed=config.seed,
                          descending=config.descending)
        print(format_sweep(sweep))

        if len(sweep_pools) > 1:
            for name in COUNTERS:
                slope = estimate_growth(sweep_pools, [sweep[pool][name] for pool in sweep_pools])
                print(f"{name}: touches grow roughly as M^{slope:.2f} over this sweep")

    return rows


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark linear, binary search and merge duplicate counting.")
    parser.add_argument("--size", type=int, default=1000,
                        help="Length N of the random test array.")
    parser.add_argument("--pool", type=int, default=26,
                        help="Values are drawn from [0, pool); controls the number of distinct values M.")
    parser.add_argument("--no-log-counts", action="store_true",
                        help="Do not print the resulting counts (useful with a large pool).")
    parser.add_argument("--runs", type=int, default=1,
                        help="Number of random arrays to average the benchmark over.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random arrays.")
    parser.add_argument("--descending", action="store_true",
                        help="Sort test arrays in descending order.")
    parser.add_argument("--strict", action="store_true",
                        help="Verify sortedness before the sorted-only counters run.")
    parser.add_argument("--sweep", type=int, nargs="+", default=None, metavar="POOL",
                        help="Also measure touches for each of these pool sizes.")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.size <= 0:
        parser.error("--size must be positive")
    if args.pool <= 0:
        parser.error("--pool must be positive")
    if args.runs <= 0:
        parser.error("--runs must be positive")
    if args.sweep and any(pool <= 0 for pool in args.sweep):
        parser.error("--sweep pool sizes must be positive")

    config = BenchmarkConfig(
        size=args.size,
        pool=args.pool,
        log_counts=not args.no_log_counts,
        runs=args.runs,
        seed=args.seed,
        descending=args.descending,
        strict=args.strict,
    )
    sweep_pools = sorted(set(args.sweep)) if args.sweep else None
    return run_exercise(config, sweep_pools=sweep_pools)


if __name__ == "__main__":
    main()
