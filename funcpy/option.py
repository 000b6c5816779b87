from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from . import std
from .errors import no_such_element

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")

_EMPTY_HASH = 2433880
_SOME_NONE_HASH = 2433881 << 2


class Option(Generic[T]):
    def is_empty(self) -> bool: raise NotImplementedError
    def non_empty(self) -> bool: return not self.is_empty()

    def is_some(self) -> bool: return self.non_empty()
    def is_none(self) -> bool: return self.is_empty()

    def get(self) -> T:
        if self.non_empty():
            return self.value  # type: ignore[attr-defined]
        raise no_such_element("Option.get")

    def get_or_else(self, fallback: U) -> T | U:
        return self.value if self.non_empty() else fallback  # type: ignore[attr-defined]

    def get_or_else_l(self, thunk: Callable[[], U]) -> T | U:
        return self.value if self.non_empty() else thunk()  # type: ignore[attr-defined]

    def or_null(self) -> Optional[T]:
        return self.value if self.non_empty() else None  # type: ignore[attr-defined]

    def or_else(self, alternative: "Option[T]") -> "Option[T]":
        return self if self.non_empty() else alternative

    def or_else_l(self, thunk: Callable[[], "Option[T]"]) -> "Option[T]":
        return self if self.non_empty() else thunk()

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.non_empty():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.non_empty():
            return f(self.value)  # type: ignore[attr-defined]
        return NONE

    def filter(self, p: Callable[[T], bool]) -> "Option[T]":
        if self.is_empty() or not p(self.value):  # type: ignore[attr-defined]
            return NONE
        return self

    def fold(self, on_empty: Callable[[], U], on_value: Callable[[T], U]) -> U:
        if self.is_empty():
            return on_empty()
        return on_value(self.value)  # type: ignore[attr-defined]

    def contains(self, elem: Any) -> bool:
        return self.non_empty() and std.equals(self.value, elem)  # type: ignore[attr-defined]

    def exists(self, p: Callable[[T], bool]) -> bool:
        return self.non_empty() and bool(p(self.value))  # type: ignore[attr-defined]

    def for_all(self, p: Callable[[T], bool]) -> bool:
        return self.is_empty() or bool(p(self.value))  # type: ignore[attr-defined]

    def for_each(self, cb: Callable[[T], Any]) -> None:
        if self.non_empty():
            cb(self.value)  # type: ignore[attr-defined]

    def equals(self, other: Any) -> bool:
        if not isinstance(other, Option):
            return False
        if self.non_empty() and other.non_empty():
            return std.equals(self.value, other.value)  # type: ignore[attr-defined]
        return self.is_empty() and other.is_empty()

    def hash_code(self) -> int:
        if self.is_empty():
            return _EMPTY_HASH
        if self.value is None:  # type: ignore[attr-defined]
            return _SOME_NONE_HASH
        return std.hash_code(self.value)  # type: ignore[attr-defined]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return self.hash_code()

    def __iter__(self) -> Iterator[T]:
        if self.non_empty():
            yield self.value  # type: ignore[attr-defined]

    @staticmethod
    def of(value: Optional[A]) -> "Option[A]":
        return NONE if value is None else Some(value)  # type: ignore[return-value]

    @staticmethod
    def some(value: A) -> "Option[A]":
        return Some(value)

    @staticmethod
    def none() -> "Option[Any]":
        return NONE

    @staticmethod
    def empty() -> "Option[Any]":
        return NONE

    @staticmethod
    def pure(value: A) -> "Option[A]":
        return Some(value)

    @staticmethod
    def map_n(options: Iterable["Option[Any]"], f: Callable[..., B]) -> "Option[B]":
        """``Some(f(*values))`` if every option is nonempty, else ``NONE``."""
        values = []
        for o in options:
            if o.is_empty():
                return NONE
            values.append(o.value)  # type: ignore[attr-defined]
        return Some(f(*values))

    @staticmethod
    def map2(fa1: "Option[Any]", fa2: "Option[Any]", f: Callable[..., B]) -> "Option[B]":
        return Option.map_n((fa1, fa2), f)

    @staticmethod
    def map3(fa1: "Option[Any]", fa2: "Option[Any]", fa3: "Option[Any]", f: Callable[..., B]) -> "Option[B]":
        return Option.map_n((fa1, fa2, fa3), f)

    @staticmethod
    def map4(fa1: "Option[Any]", fa2: "Option[Any]", fa3: "Option[Any]", fa4: "Option[Any]",
             f: Callable[..., B]) -> "Option[B]":
        return Option.map_n((fa1, fa2, fa3, fa4), f)

    @staticmethod
    def map5(fa1: "Option[Any]", fa2: "Option[Any]", fa3: "Option[Any]", fa4: "Option[Any]",
             fa5: "Option[Any]", f: Callable[..., B]) -> "Option[B]":
        return Option.map_n((fa1, fa2, fa3, fa4, fa5), f)

    @staticmethod
    def map6(fa1: "Option[Any]", fa2: "Option[Any]", fa3: "Option[Any]", fa4: "Option[Any]",
             fa5: "Option[Any]", fa6: "Option[Any]", f: Callable[..., B]) -> "Option[B]":
        return Option.map_n((fa1, fa2, fa3, fa4, fa5, fa6), f)

    @staticmethod
    def tail_rec_m(a: A, f: Callable[[A], "Option[Any]"]) -> "Option[B]":
        # f returns Option[Either[A, B]]; Left continues the loop, Right ends it
        cursor = a
        while True:
            step = f(cursor)
            if step.is_empty():
                return NONE
            e = step.value  # type: ignore[attr-defined]
            if e.is_left():
                cursor = e.value
            else:
                return Some(e.value)


@dataclass(frozen=True, eq=False)
class Some(Option[T]):
    value: T
    def is_empty(self) -> bool: return False
    def __repr__(self) -> str: return f"Some({self.value!r})"


class _Empty(Option[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "None"
    def is_empty(self) -> bool: return True


NONE: Option[Any] = _Empty()


def from_nullable(v: Optional[T]) -> Option[T]:
    return Option.of(v)
