"""Convert infix integer expressions to reverse Polish notation and evaluate them."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence


class _ExpressionError(Exception):
    message = "invalid expression"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class ParenthesisMismatch(_ExpressionError):
    """Raised when parentheses do not pair up."""

    message = "Parenthesis mismatch"


class NotEnoughOperands(_ExpressionError):
    """Raised when an operator lacks operands."""

    message = "Not enough operands"


class DivideByZero(_ExpressionError):
    """Raised on division by zero."""

    message = "Divide by zero"


class TooManyOperands(_ExpressionError):
    """Raised when operands are left over after evaluation."""

    message = "Too many operands"


_OPERATORS = frozenset("+-*/")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def to_rpn(expression: str) -> list[str]:
    """Convert a whitespace-separated infix expression to RPN tokens."""
    output: list[str] = []
    stack: list[str] = []
    for token in expression.split():
        if token in _OPERATORS:
            while stack and stack[-1] != "(":
                if token in "*/" and stack[-1] in "+-":
                    break
                output.append(stack.pop())
            stack.append(token)
        elif token == "(":
            stack.append(token)
        elif token == ")":
            while True:
                if not stack:
                    raise ParenthesisMismatch()
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        else:
            output.append(token)
    while stack:
        top = stack.pop()
        if top == "(":
            raise ParenthesisMismatch()
        output.append(top)
    return output


def _to_int(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


def _divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def evaluate_rpn(tokens: Iterable[str]) -> int:
    """Evaluate RPN tokens with integer arithmetic; division truncates toward zero."""
    stack: list[int] = []
    for token in tokens:
        if token not in _OPERATORS:
            stack.append(_to_int(token))
            continue
        if len(stack) < 2:
            raise NotEnoughOperands()
        right = stack.pop()
        left = stack.pop()
        if token == "+":
            stack.append(left + right)
        elif token == "-":
            stack.append(left - right)
        elif token == "*":
            stack.append(left * right)
        else:
            if right == 0:
                raise DivideByZero()
            stack.append(_divide(left, right))
    if not stack:
        raise NotEnoughOperands()
    if len(stack) > 1:
        raise TooManyOperands()
    return stack[0]


def run(line: str) -> list[str]:
    """Return the output for one expression: its RPN form, then its value or an error."""
    try:
        tokens = to_rpn(line)
    except ParenthesisMismatch as err:
        return [f"ERROR: {err}"]
    out = ["".join(token + " " for token in tokens)]
    try:
        out.append(str(evaluate_rpn(tokens)))
    except _ExpressionError as err:
        out.append(f"ERROR: {err}")
    return out


def main(argv: Sequence[str] | None = None) -> int:
    """Read one expression from standard input and print its RPN form and value."""
    parser = argparse.ArgumentParser(
        description="Convert an infix expression on standard input to RPN and evaluate it."
    )
    parser.parse_args(argv)
    for line in run(sys.stdin.readline()):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())