"""Conversion between decimal numbers and numbers written with binary digits."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as bits; digits other than 1 count as 0."""
    if n < 0:
        raise ValueError("binary number must not be negative")
    return sum(1 << position for position, digit in enumerate(reversed(str(n))) if digit == "1")


def decimal_to_binary(n: int) -> int:
    """Return the integer whose decimal digits spell ``n`` in binary."""
    if n < 0:
        raise ValueError("number must not be negative")
    return int(format(n, "b"))


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int | None:
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive converter; ``argv`` may supply the answers up front."""
    tokens = iter(argv) if argv is not None else _tokens(sys.stdin)

    print("Welcome to binary and decimal converter Program")
    print("Please Enter Your Choice")
    print("1.Convert Binary into Decimal")
    print("2.Convert Decimal into Binary")

    choice = _read_int(tokens)
    if choice == 1:
        prompt, convert = "Enter binary to convert it into number", binary_to_decimal
    elif choice == 2:
        prompt, convert = "Enter number to convert it into binary", decimal_to_binary
    else:
        print("Enter a valid option!")
        return 0

    print(prompt)
    number = _read_int(tokens)
    if number is None:
        print("Error: expected a whole number", file=sys.stderr)
        return 1
    try:
        result = convert(number)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Answer is {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())