"""Path and collection helpers shared by the route compiler."""

from collections.abc import Hashable, Iterable
from typing import TypeVar

DEFAULT_SEPARATOR = "/"

T = TypeVar("T", bound=Hashable)


def join_paths(*paths: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """Join path segments with exactly one separator at each join point.

    Empty segments are dropped. Doubled separators inside a single segment
    are left untouched.

    Args:
        *paths: Path segments to join
        separator: Separator placed between segments

    Returns:
        Joined path

    Examples::

        join_paths("/home/", "/index")  -> "/home/index"
        join_paths("", "/index")        -> "/index"
        join_paths("a//b", "c")         -> "a//b/c"
    """
    segments = [path for path in paths if path]

    for i in range(1, len(segments)):
        predecessor = segments[i - 1]
        while predecessor.endswith(separator):
            predecessor = predecessor[: -len(separator)]
        segments[i - 1] = predecessor

        current = segments[i]
        while current.startswith(separator):
            current = current[len(separator):]
        segments[i] = separator + current

    return "".join(segments)


def unique_in_order(values: Iterable[T]) -> list[T]:
    """Drop repeated values, keeping the first occurrence of each."""
    return list(dict.fromkeys(values))
