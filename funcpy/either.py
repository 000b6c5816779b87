from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, TypeVar

from . import std
from .errors import no_such_element
from .option import NONE, Option, Some

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


class Either(Generic[E, A]):
    def is_left(self) -> bool: raise NotImplementedError
    def is_right(self) -> bool: return not self.is_left()

    def left(self) -> "Either[E, Any]":
        if self.is_left():
            return self
        raise no_such_element("Either.left")

    def right(self) -> "Either[Any, A]":
        if self.is_right():
            return self
        raise no_such_element("Either.right")

    def get(self) -> A:
        if self.is_right():
            return self.value  # type: ignore[attr-defined]
        raise no_such_element("Either.get")

    def get_or_else(self, fallback: B) -> A | B:
        return self.value if self.is_right() else fallback  # type: ignore[attr-defined]

    def get_or_else_l(self, thunk: Callable[[], B]) -> A | B:
        return self.value if self.is_right() else thunk()  # type: ignore[attr-defined]

    def map(self, f: Callable[[A], B]) -> "Either[E, B]":
        if self.is_right():
            return Right(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[A], "Either[E, B]"]) -> "Either[E, B]":
        if self.is_right():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def map_left(self, f: Callable[[E], B]) -> "Either[B, A]":
        if self.is_left():
            return Left(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def filter_or_else(self, p: Callable[[A], bool], zero: Callable[[], E]) -> "Either[E, A]":
        if self.is_left() or p(self.value):  # type: ignore[attr-defined]
            return self
        return Left(zero())

    def fold(self, on_left: Callable[[E], C], on_right: Callable[[A], C]) -> C:
        if self.is_right():
            return on_right(self.value)  # type: ignore[attr-defined]
        return on_left(self.value)  # type: ignore[attr-defined]

    def for_all(self, p: Callable[[A], bool]) -> bool:
        return self.is_left() or bool(p(self.value))  # type: ignore[attr-defined]

    def exists(self, p: Callable[[A], bool]) -> bool:
        return self.is_right() and bool(p(self.value))  # type: ignore[attr-defined]

    def contains(self, elem: Any) -> bool:
        return self.is_right() and std.equals(self.value, elem)  # type: ignore[attr-defined]

    def for_each(self, cb: Callable[[A], Any]) -> None:
        if self.is_right():
            cb(self.value)  # type: ignore[attr-defined]

    def swap(self) -> "Either[A, E]":
        if self.is_right():
            return Left(self.value)  # type: ignore[attr-defined]
        return Right(self.value)  # type: ignore[attr-defined]

    def to_option(self) -> Option[A]:
        if self.is_right():
            return Some(self.value)  # type: ignore[attr-defined]
        return NONE

    def equals(self, other: Any) -> bool:
        if other is None or not isinstance(other, Either):
            return False
        if self.is_left() != other.is_left():
            return False
        return std.equals(self.value, other.value)  # type: ignore[attr-defined]

    def hash_code(self) -> int:
        # sides use different shifts so Left(x) and Right(x) rarely collide
        if self.is_right():
            return std.hash_code(self.value) << 2  # type: ignore[attr-defined]
        return std.hash_code(self.value) << 3  # type: ignore[attr-defined]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return self.hash_code()

    @staticmethod
    def left_of(value: E) -> "Either[E, Any]":
        return Left(value)

    @staticmethod
    def right_of(value: A) -> "Either[Any, A]":
        return Right(value)

    @staticmethod
    def map_n(eithers: Iterable["Either[E, Any]"], f: Callable[..., B]) -> "Either[E, B]":
        """``Right(f(*values))`` if all are ``Right``, else the first ``Left``."""
        values = []
        for e in eithers:
            if e.is_left():
                return e  # type: ignore[return-value]
            values.append(e.value)  # type: ignore[attr-defined]
        return Right(f(*values))

    @staticmethod
    def map2(fa1: "Either[E, Any]", fa2: "Either[E, Any]", f: Callable[..., B]) -> "Either[E, B]":
        return Either.map_n((fa1, fa2), f)

    @staticmethod
    def map3(fa1: "Either[E, Any]", fa2: "Either[E, Any]", fa3: "Either[E, Any]",
             f: Callable[..., B]) -> "Either[E, B]":
        return Either.map_n((fa1, fa2, fa3), f)

    @staticmethod
    def map4(fa1: "Either[E, Any]", fa2: "Either[E, Any]", fa3: "Either[E, Any]", fa4: "Either[E, Any]",
             f: Callable[..., B]) -> "Either[E, B]":
        return Either.map_n((fa1, fa2, fa3, fa4), f)

    @staticmethod
    def map5(fa1: "Either[E, Any]", fa2: "Either[E, Any]", fa3: "Either[E, Any]", fa4: "Either[E, Any]",
             fa5: "Either[E, Any]", f: Callable[..., B]) -> "Either[E, B]":
        return Either.map_n((fa1, fa2, fa3, fa4, fa5), f)

    @staticmethod
    def map6(fa1: "Either[E, Any]", fa2: "Either[E, Any]", fa3: "Either[E, Any]", fa4: "Either[E, Any]",
             fa5: "Either[E, Any]", fa6: "Either[E, Any]", f: Callable[..., B]) -> "Either[E, B]":
        return Either.map_n((fa1, fa2, fa3, fa4, fa5, fa6), f)

    @staticmethod
    def tail_rec_m(a: Any, f: Callable[[Any], "Either[E, Either[Any, B]]"]) -> "Either[E, B]":
        cursor = a
        while True:
            step = f(cursor)
            if step.is_left():
                return step  # type: ignore[return-value]
            inner = step.value  # type: ignore[attr-defined]
            if inner.is_left():
                cursor = inner.value
            else:
                return Right(inner.value)


@dataclass(frozen=True, eq=False)
class Left(Either[E, A]):
    value: E
    def is_left(self) -> bool: return True
    def __repr__(self) -> str: return f"Left({self.value!r})"


@dataclass(frozen=True, eq=False)
class Right(Either[E, A]):
    value: A
    def is_left(self) -> bool: return False
    def __repr__(self) -> str: return f"Right({self.value!r})"
