"""Conversion between binary digit strings written as integers and decimals."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as bits; digits other than 1 count as 0."""
    if n < 0:
        raise ValueError("binary number must be non-negative")
    return sum(
        1 << power for power, digit in enumerate(reversed(str(n))) if digit == "1"
    )


def decimal_to_binary(n: int) -> int:
    """Return an integer whose decimal digits are the binary form of ``n``."""
    if n < 0:
        raise ValueError("number must be non-negative")
    return int(format(n, "b"))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive converter; answers are taken from ``argv`` first, then stdin."""
    tokens = iter(sys.argv[1:] if argv is None else argv)

    def ask(prompt: str) -> str:
        print(prompt)
        token = next(tokens, None)
        return token if token is not None else input()

    print("Welcome to binary and decimal converter Program")
    choice = ask(
        "Please Enter Your Choice\n"
        "1.Convert Binary into Decimal\n"
        "2.Convert Decimal into Binary"
    ).strip()

    if choice == "1":
        prompt, convert = "Enter binary to convert it into number", binary_to_decimal
    elif choice == "2":
        prompt, convert = "Enter number to convert it into binary", decimal_to_binary
    else:
        print("Enter a valid option!")
        return 1

    try:
        answer = convert(int(ask(prompt).strip()))
    except ValueError as exc:
        print(f"Invalid number: {exc}")
        return 1
    print(f"Answer is {answer}")
    return 0


if __name__ == "__main__":
    sys.exit(main())