import numpy as np

from .config import BenchmarkConfig

# Small hand-written array, already sorted ascending.
FIXTURE_VALUES = ['a', 'b', 'b', 'b', 'b', 'b', 'd', 'h', 'h', 'h', 'p']


def generate_sorted_array(size: int, pool: int, seed=None, descending: bool = False) -> list[int]:
    """
    Generates `size` random integers drawn from [0, pool) and sorts them.
    Returns a plain Python list so counters see ints rather than numpy scalars.
    """
    rng = np.random.default_rng(seed)
    values = np.sort(rng.integers(0, pool, size=size))
    if descending:
        values = values[::-1]
    return values.tolist()


def load_test_arrays(config: BenchmarkConfig) -> dict[str, list]:
    """
    Returns the arrays a benchmark session runs on: the fixed fixture and
    a random sorted array built from the configuration.
    """
    fixture = sorted(FIXTURE_VALUES, reverse=config.descending)
    print(f"Generating {config.size} random values from a pool of {config.pool}...")
    random_values = generate_sorted_array(config.size, config.pool, seed=config.seed,
                                          descending=config.descending)
    return {
        "Fixture": fixture,
        f"Random (N={config.size}, M<={config.pool})": random_values,
    }
