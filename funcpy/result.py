from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from . import std
from .either import Either, Left, Right
from .errors import NoSuchElementError
from .logger import logger
from .option import NONE, Option, Some

A = TypeVar("A")
B = TypeVar("B")


def _captured(ex: Exception) -> "Try[Any]":
    logger.debug("captured failure", error=repr(ex))
    return Failure(ex)


class Try(Generic[A]):
    def is_success(self) -> bool: raise NotImplementedError
    def is_failure(self) -> bool: return not self.is_success()

    def get(self) -> A:
        if self.is_success():
            return self.value  # type: ignore[attr-defined]
        raise self.error  # type: ignore[attr-defined]

    def get_or_else(self, fallback: B) -> A | B:
        return self.value if self.is_success() else fallback  # type: ignore[attr-defined]

    def get_or_else_l(self, thunk: Callable[[], B]) -> A | B:
        return self.value if self.is_success() else thunk()  # type: ignore[attr-defined]

    def or_null(self) -> Optional[A]:
        return self.value if self.is_success() else None  # type: ignore[attr-defined]

    def or_else(self, alternative: "Try[A]") -> "Try[A]":
        return self if self.is_success() else alternative

    def or_else_l(self, thunk: Callable[[], "Try[A]"]) -> "Try[A]":
        return self if self.is_success() else thunk()

    def failed(self) -> "Try[Exception]":
        if self.is_failure():
            return Success(self.error)  # type: ignore[attr-defined]
        return Failure(NoSuchElementError("Try.failed"))

    def map(self, f: Callable[[A], B]) -> "Try[B]":
        if self.is_failure():
            return self  # type: ignore[return-value]
        try:
            return Success(f(self.value))  # type: ignore[attr-defined]
        except Exception as ex:
            return _captured(ex)

    def flat_map(self, f: Callable[[A], "Try[B]"]) -> "Try[B]":
        if self.is_failure():
            return self  # type: ignore[return-value]
        try:
            return f(self.value)  # type: ignore[attr-defined]
        except Exception as ex:
            return _captured(ex)

    def filter(self, p: Callable[[A], bool]) -> "Try[A]":
        if self.is_failure():
            return self
        try:
            if p(self.value):  # type: ignore[attr-defined]
                return self
            return Failure(NoSuchElementError("Try.filter"))
        except Exception as ex:
            return _captured(ex)

    def recover(self, f: Callable[[Exception], A]) -> "Try[A]":
        if self.is_success():
            return self
        try:
            return Success(f(self.error))  # type: ignore[attr-defined]
        except Exception as ex:
            return _captured(ex)

    def recover_with(self, f: Callable[[Exception], "Try[A]"]) -> "Try[A]":
        if self.is_success():
            return self
        try:
            return f(self.error)  # type: ignore[attr-defined]
        except Exception as ex:
            return _captured(ex)

    def transform(self, on_failure: Callable[[Exception], "Try[B]"], on_success: Callable[[A], "Try[B]"]) -> "Try[B]":
        if self.is_success():
            return self.flat_map(on_success)
        return self.recover_with(on_failure)  # type: ignore[arg-type]

    def fold(self, on_failure: Callable[[Exception], B], on_success: Callable[[A], B]) -> B:
        if self.is_success():
            return on_success(self.value)  # type: ignore[attr-defined]
        return on_failure(self.error)  # type: ignore[attr-defined]

    def for_each(self, cb: Callable[[A], Any]) -> None:
        if self.is_success():
            cb(self.value)  # type: ignore[attr-defined]

    def to_option(self) -> Option[A]:
        if self.is_success():
            return Some(self.value)  # type: ignore[attr-defined]
        return NONE

    def to_either(self) -> Either[Exception, A]:
        return to_either(self)

    def equals(self, other: Any) -> bool:
        if not isinstance(other, Try) or self.is_success() != other.is_success():
            return False
        if self.is_success():
            return std.equals(self.value, other.value)  # type: ignore[attr-defined]
        return _same_error(self.error, other.error)  # type: ignore[attr-defined]

    def hash_code(self) -> int:
        if self.is_success():
            return std.hash_code(self.value) << 2  # type: ignore[attr-defined]
        err = self.error  # type: ignore[attr-defined]
        return std.hash_code((type(err).__name__, err.args)) << 3

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Try):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return self.hash_code()

    @staticmethod
    def of(thunk: Callable[[], A]) -> "Try[A]":
        try:
            return Success(thunk())
        except Exception as ex:
            return _captured(ex)

    @staticmethod
    def success(value: A) -> "Try[A]":
        return Success(value)

    @staticmethod
    def failure(error: Exception) -> "Try[Any]":
        return Failure(error)

    @staticmethod
    def pure(value: A) -> "Try[A]":
        return Success(value)

    @staticmethod
    def unit() -> "Try[None]":
        return _UNIT

    @staticmethod
    def map_n(tries: Iterable["Try[Any]"], f: Callable[..., B]) -> "Try[B]":
        values = []
        for t in tries:
            if t.is_failure():
                return t  # type: ignore[return-value]
            values.append(t.value)  # type: ignore[attr-defined]
        try:
            return Success(f(*values))
        except Exception as ex:
            return _captured(ex)

    @staticmethod
    def map2(fa1: "Try[Any]", fa2: "Try[Any]", f: Callable[..., B]) -> "Try[B]":
        return Try.map_n((fa1, fa2), f)

    @staticmethod
    def map3(fa1: "Try[Any]", fa2: "Try[Any]", fa3: "Try[Any]", f: Callable[..., B]) -> "Try[B]":
        return Try.map_n((fa1, fa2, fa3), f)

    @staticmethod
    def map4(fa1: "Try[Any]", fa2: "Try[Any]", fa3: "Try[Any]", fa4: "Try[Any]",
             f: Callable[..., B]) -> "Try[B]":
        return Try.map_n((fa1, fa2, fa3, fa4), f)

    @staticmethod
    def map5(fa1: "Try[Any]", fa2: "Try[Any]", fa3: "Try[Any]", fa4: "Try[Any]", fa5: "Try[Any]",
             f: Callable[..., B]) -> "Try[B]":
        return Try.map_n((fa1, fa2, fa3, fa4, fa5), f)

    @staticmethod
    def map6(fa1: "Try[Any]", fa2: "Try[Any]", fa3: "Try[Any]", fa4: "Try[Any]", fa5: "Try[Any]",
             fa6: "Try[Any]", f: Callable[..., B]) -> "Try[B]":
        return Try.map_n((fa1, fa2, fa3, fa4, fa5, fa6), f)

    @staticmethod
    def tail_rec_m(a: Any, f: Callable[[Any], "Try[Either[Any, B]]"]) -> "Try[B]":
        cursor = a
        while True:
            try:
                step = f(cursor)
            except Exception as ex:
                return _captured(ex)
            if step.is_failure():
                return step  # type: ignore[return-value]
            inner = step.value  # type: ignore[attr-defined]
            if inner.is_left():
                cursor = inner.value
            else:
                return Success(inner.value)


@dataclass(frozen=True, eq=False)
class Success(Try[A]):
    value: A
    def is_success(self) -> bool: return True
    def __repr__(self) -> str: return f"Success({self.value!r})"


@dataclass(frozen=True, eq=False)
class Failure(Try[A]):
    error: Exception
    def is_success(self) -> bool: return False
    def __repr__(self) -> str: return f"Failure({self.error!r})"


_UNIT: Try[None] = Success(None)


def _same_error(a: Exception, b: Exception) -> bool:
    return a is b or (type(a) is type(b) and std.equals(a.args, b.args))


def from_either(e: Either[Exception, A]) -> Try[A]:
    if e.is_left():
        return Failure(e.value)  # type: ignore[attr-defined]
    return Success(e.value)  # type: ignore[attr-defined]


def to_either(t: Try[A]) -> Either[Exception, A]:
    if isinstance(t, Failure):
        return Left(t.error)
    return Right(t.value)  # type: ignore[attr-defined]


