"""Small language-level helpers.

Conditional application:
    Build up a value step by step, skipping steps whose condition is false
    without evaluating their right-hand side. Suppliers are zero-argument
    callables so that nothing is computed unless it is needed:

        text = "Description: ..."
        text = append_if(text, card.section, lambda: f"Section: {card.section}\\n")

        out = (OperPipeline("hello", operator.add)
               .oper_if(True, lambda: " ")
               .oper_if(False, lambda: "mars")
               .oper_if(True, lambda: "world")
               .value)

Results:
    Ok/Err model a two-state success-or-failure result; ok_or_raise turns
    the failure side into a raised exception.
"""

import operator as _operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from .errors import ResultError

T = TypeVar('T')
U = TypeVar('U')


def apply_if(
    acc: T,
    condition: Any,
    operator: Callable[[T, U], T],
    supplier: Callable[[], U],
) -> T:
    """Return operator(acc, supplier()) if condition is truthy, else acc.

    supplier is only called when condition is truthy.
    """
    if condition:
        return operator(acc, supplier())
    return acc


def append_if(acc: T, condition: Any, supplier: Callable[[], Any]) -> T:
    """apply_if with ``+``: concatenate supplier() onto acc when condition holds."""
    return apply_if(acc, condition, _operator.add, supplier)


class OperPipeline(Generic[T]):
    """Chainable accumulator that applies a fixed operator conditionally."""

    def __init__(self, value: T, operator: Callable[[T, Any], T]):
        self.value = value
        self.operator = operator

    def oper_if(self, condition: Any, supplier: Callable[[], Any]) -> "OperPipeline[T]":
        self.value = apply_if(self.value, condition, self.operator, supplier)
        return self

    def __repr__(self) -> str:
        return f"OperPipeline({self.value!r}, {self.operator!r})"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result, optionally carrying a value."""
    value: Any = None


@dataclass(frozen=True)
class Err:
    """Failed result carrying an error descriptor.

    The descriptor may be an exception instance, an exception class, or
    any other value describing the failure (e.g. an errno name).
    """
    error: Any


Result = Union[Ok, Err]


def ok_or_raise(result: Result) -> Any:
    """Return the value of an Ok, or raise for an Err.

    Raises:
        The Err's exception if it holds an exception instance or class.
        ResultError: If the Err holds any other descriptor.
        TypeError: If result is neither Ok nor Err.
    """
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        error = result.error
        if isinstance(error, BaseException):
            raise error
        if isinstance(error, type) and issubclass(error, BaseException):
            raise error()
        raise ResultError(error)
    raise TypeError(f"expected Ok or Err, got {type(result).__name__}")


__all__ = [
    'Err',
    'Ok',
    'OperPipeline',
    'Result',
    'append_if',
    'apply_if',
    'ok_or_raise',
]
