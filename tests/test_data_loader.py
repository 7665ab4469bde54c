from duplicate_count_exercise.config import BenchmarkConfig
from duplicate_count_exercise.data_loader import FIXTURE_VALUES, generate_sorted_array, load_test_arrays


def test_generate_sorted_array_shape_and_range():
    values = generate_sorted_array(500, 10, seed=1)
    assert len(values) == 500
    assert values == sorted(values)
    assert all(0 <= v < 10 for v in values)
    assert all(type(v) is int for v in values)


def test_generate_sorted_array_descending():
    values = generate_sorted_array(200, 7, seed=3, descending=True)
    assert values == sorted(values, reverse=True)


def test_generate_sorted_array_is_reproducible():
    assert generate_sorted_array(100, 5, seed=42) == generate_sorted_array(100, 5, seed=42)


def test_load_test_arrays(capsys):
    arrays = load_test_arrays(BenchmarkConfig(size=50, pool=4, seed=0))
    fixture, random_values = arrays.values()
    assert fixture == FIXTURE_VALUES
    assert len(random_values) == 50
    assert "Generating 50 random values" in capsys.readouterr().out


def test_load_test_arrays_descending(capsys):
    arrays = load_test_arrays(BenchmarkConfig(size=20, pool=3, seed=0, descending=True))
    for values in arrays.values():
        assert values == sorted(values, reverse=True)
