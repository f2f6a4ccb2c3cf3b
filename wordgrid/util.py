from typing import Callable, Iterable, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def group_by(seq: Iterable[T], fn: Callable[[T], R]) -> dict[R, list[T]]:
    out = dict[R, list[T]]()
    for v in seq:
        k = fn(v)
        out.setdefault(k, [])
        out[k].append(v)
    return out
