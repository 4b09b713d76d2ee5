"""Either type: a value that is an error (Left) or a success (Right), never both."""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")


@dataclass(frozen=True)
class Left(Generic[L]):
    """Failure variant."""

    value: L

    @property
    def left(self) -> L:
        return self.value

    @property
    def right(self) -> None:
        return None

    @property
    def is_left(self) -> bool:
        return True

    @property
    def is_right(self) -> bool:
        return False

    def fold(self, on_left: Callable[[L], T], on_right: Callable) -> T:
        return on_left(self.value)

    def map(self, fn: Callable) -> "Left[L]":
        return self


@dataclass(frozen=True)
class Right(Generic[R]):
    """Success variant."""

    value: R

    @property
    def left(self) -> None:
        return None

    @property
    def right(self) -> R:
        return self.value

    @property
    def is_left(self) -> bool:
        return False

    @property
    def is_right(self) -> bool:
        return True

    def fold(self, on_left: Callable, on_right: Callable[[R], T]) -> T:
        return on_right(self.value)

    def map(self, fn: Callable[[R], T]) -> "Right[T]":
        return Right(fn(self.value))


Either = Left[L] | Right[R]
