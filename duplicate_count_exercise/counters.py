from .utils import ensure_non_empty, ensure_sorted, is_ascending

# --- Duplicate Counting Algorithms ---
# Every counter returns (counts, touches). A touch is one unit of work,
# used as an operation count that does not depend on wall-clock noise.


def count_linear(data: list) -> tuple[dict, int]:
    """
    Counts duplicates by touching every element exactly once.
    Works on any input order.
    Returns the counts mapping and the number of touches (always len(data)).
    """
    counts = {}
    touches = 0
    for value in data:
        touches += 1
        counts[value] = counts.get(value, 0) + 1
    return counts, touches


def find_last_index(data: list, target, low: int, high: int, ascending: bool) -> tuple[int, int]:
    """
    Recursive binary search for the last index of target within data[low..high].
    Assumes target is present in the range; otherwise the result is meaningless.
    Returns the index and the number of calls made (one touch per call).
    """
    mid = (low + high) // 2
    if data[mid] == target and (mid == len(data) - 1 or data[mid + 1] != target):
        return mid, 1
    if (ascending and target < data[mid]) or (not ascending and target > data[mid]):
        index, touches = find_last_index(data, target, low, mid - 1, ascending)
    else:
        index, touches = find_last_index(data, target, mid + 1, high, ascending)
    return index, touches + 1


def count_binary(data: list, strict: bool = False) -> tuple[dict, int]:
    """
    Counts duplicates in a sorted array by jumping from run to run.

    For each unique value, a binary search finds the last index of its run,
    so the cost grows with the number of distinct values (M) rather than
    the array length (N): roughly M + M*log(N) touches.

    The array must be sorted ascending or descending. With strict=True the
    order is verified first and InvalidInputError is raised on violation.
    """
    if strict:
        ensure_sorted(data)

    counts = {}
    touches = 0
    n = len(data)
    if n == 0:
        return counts, touches

    ascending = is_ascending(data)
    index = 0
    while index < n:
        touches += 1
        value = data[index]
        last, search_touches = find_last_index(data, value, index, n - 1, ascending)
        touches += search_touches
        counts[value] = last - index + 1
        index = last + 1
    return counts, touches


def _count_merge_range(data: list, low: int, high: int, counts: dict) -> int:
    if data[low] == data[high]:
        # sorted + equal endpoints means the whole range holds one value
        value = data[low]
        counts[value] = counts.get(value, 0) + high - low + 1
        return 1

    mid = (low + high) // 2
    touches = _count_merge_range(data, low, mid, counts)
    touches += _count_merge_range(data, mid + 1, high, counts)
    return touches + 1


def count_merge(data: list, strict: bool = False) -> tuple[dict, int]:
    """
    Counts duplicates in a sorted array by bisecting it until each piece
    starts and ends with the same value.

    Best case (one distinct value) is a single touch, while all-distinct
    input bisects down to single elements (2N - 1 touches). In between the
    cost depends on where runs fall relative to the split points.

    Only equality between range endpoints is used, so either sort direction
    works. Empty input is always rejected.
    """
    if strict:
        ensure_sorted(data)
    ensure_non_empty(data, "Merge counting")

    counts = {}
    touches = _count_merge_range(data, 0, len(data) - 1, counts)
    return counts, touches


# Order matters: the harness runs and reports them in this sequence.
COUNTERS = {
    "Linear": count_linear,
    "Binary Search": count_binary,
    "Merge": count_merge,
}

SORTED_ONLY = {"Binary Search", "Merge"}
