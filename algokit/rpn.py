"""Evaluation of integer expressions in reverse Polish notation."""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Iterable

_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _truncating_div(num1: int, num2: int) -> int:
    if num2 == 0:
        raise ZeroDivisionError("Division by zero")
    quotient = abs(num1) // abs(num2)
    return quotient if (num1 < 0) == (num2 < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def _parse(token: str) -> int:
    match = _INTEGER.match(token)
    if match is None:
        raise ValueError(f"Invalid token: {token}")
    return int(match.group(1))


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate an RPN expression of integers and ``+ - * /``.

    Division truncates toward zero. A token that does not start with an integer,
    a missing operand or leftover operands raise ``ValueError``; dividing by zero
    raises ``ZeroDivisionError``.
    """
    stack: list[int] = []
    for token in tokens:
        operation = _OPERATIONS.get(token)
        if operation is None:
            stack.append(_parse(token))
            continue
        if len(stack) < 2:
            raise ValueError("Invalid RPN expression")
        num2 = stack.pop()
        num1 = stack.pop()
        stack.append(operation(num1, num2))
    if len(stack) != 1:
        raise ValueError("Invalid RPN expression")
    return stack[0]