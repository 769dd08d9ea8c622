"""Finite prime fields whose elements are plain integers."""

from __future__ import annotations


class Field:
    """The prime field GF(p); elements are integers in ``range(p)``.

    The characteristic is trusted to be prime.
    """

    def __init__(self, characteristic: int) -> None:
        if characteristic < 2:
            raise ValueError(f"characteristic must be at least 2, got {characteristic}")
        self.characteristic = characteristic

    def __repr__(self) -> str:
        return f"Field({self.characteristic})"

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.characteristic

    def subtract(self, a: int, b: int) -> int:
        return (a - b) % self.characteristic

    def multiply(self, a: int, b: int) -> int:
        return (a * b) % self.characteristic

    def divide(self, a: int, b: int) -> int:
        return (a * self.invert(b)) % self.characteristic

    def invert(self, a: int) -> int:
        """Return the multiplicative inverse of ``a``."""
        if a % self.characteristic == 0:
            raise ZeroDivisionError("attempting to divide by zero")
        if self.characteristic == 2:
            return a
        return self.power(a, self.characteristic - 2)

    def negate(self, a: int) -> int:
        if a == 0:
            return a
        return self.characteristic - a

    def power(self, a: int, exponent: int) -> int:
        """Raise ``a`` to a non-negative power by repeated squaring.

        The exponent is first reduced modulo ``p - 1``.
        """
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        remaining = exponent % (self.characteristic - 1)
        result = 1
        base = a % self.characteristic
        while remaining:
            if remaining & 1:
                result = self.multiply(result, base)
            remaining >>= 1
            base = self.multiply(base, base)
        return result