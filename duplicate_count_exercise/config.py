from dataclasses import dataclass


@dataclass
class BenchmarkConfig:
    """
    Settings for one benchmark session.

    size: number of elements in the random array (N).
    pool: values are drawn from range(pool), which bounds the number of
        distinct values (M) and so the duplicate density.
    log_counts: print the resulting counts (turn off for a large pool).
    runs: number of freshly generated arrays to average over.
    """
    size: int = 1000
    pool: int = 26
    log_counts: bool = True
    runs: int = 1
    seed: int | None = None
    descending: bool = False
    strict: bool = False
