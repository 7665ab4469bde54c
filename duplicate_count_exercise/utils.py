from .errors import InvalidInputError

# --- Sort Order Helpers ---


def is_ascending(data: list) -> bool:
    """
    Infers the sort direction from the first and last elements.
    Arrays whose ends are equal (or shorter than two) count as descending,
    which is harmless since such arrays hold a single value.
    """
    return len(data) >= 2 and data[0] < data[-1]


def first_order_violation(data: list) -> int | None:
    """
    Returns the first index i where data[i], data[i + 1] break the
    direction inferred from the array's ends, or None if the array is sorted.
    """
    ascending = is_ascending(data)
    for i in range(len(data) - 1):
        if ascending and data[i] > data[i + 1]:
            return i
        if not ascending and data[i] < data[i + 1]:
            return i
    return None


def ensure_sorted(data: list) -> None:
    i = first_order_violation(data)
    if i is not None:
        direction = "ascending" if is_ascending(data) else "descending"
        raise InvalidInputError(
            f"Input is not sorted {direction}: {data[i]!r} at index {i} "
            f"is followed by {data[i + 1]!r}."
        )


def ensure_non_empty(data: list, what: str = "Counting") -> None:
    if len(data) == 0:
        raise InvalidInputError(f"{what} needs at least one element.")
