from collections.abc import Callable, Iterable, Sequence
from itertools import filterfalse
from typing import Any, TypeVar

import numpy as np

T = TypeVar("T")


def is_non_negative_int(value: Any) -> bool:
    """True for Python or NumPy integers >= 0. Booleans and floats are rejected."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer)) and value >= 0


def is_index(value: Any, n: int) -> bool:
    return is_non_negative_int(value) and value < n


def is_sequence(value: Any) -> bool:
    """Array-like container: list, tuple or 1-D numpy array (strings excluded)."""
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def is_array_of_arrays(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim == 2 or (value.ndim == 1 and value.size == 0)
    return is_sequence(value) and all(is_sequence(row) for row in value)


def unique_iter(iterable: Iterable[T], key: Callable[[T], Any] | None = None) -> Iterable[T]:
    # Based on https://iteration-utilities.readthedocs.io/en/latest/generated/unique_everseen.html
    seen: set[Any] = set()
    seen_add = seen.add
    if key is None:
        for element in filterfalse(seen.__contains__, iterable):
            seen_add(element)
            yield element
    else:
        for element in iterable:
            k = key(element)
            if k not in seen:
                seen_add(k)
                yield element
