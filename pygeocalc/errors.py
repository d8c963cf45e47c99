"""Exceptions raised by the formula functions.

Classes
-------
GeotechError
    Base class for every error raised by pygeocalc.
InvalidInputError
    A parameter lies outside its documented physical domain.
DomainError
    An intermediate transcendental operation left its mathematical domain.
"""

from __future__ import annotations


class GeotechError(Exception):
    """Base class for pygeocalc errors."""


class InvalidInputError(GeotechError, ValueError):
    """A parameter violates its documented domain.

    Raised at function entry, before any arithmetic is done.  Values are
    never clamped or coerced into range.

    Args:
        name: Parameter name as it appears in the function signature.
        value: The offending value.
        requirement: Human-readable statement of the valid domain,
            e.g. ``"must be > 0"``.
    """

    def __init__(self, name: str, value: object, requirement: str) -> None:
        self.name = name
        self.value = value
        self.requirement = requirement
        super().__init__(f"{name}={value!r} {requirement}")


class DomainError(GeotechError, ArithmeticError):
    """A transcendental operation was evaluated outside its domain.

    Typical causes are a tangent argument reaching ±90° after the
    45° ± φ/2 transform, a negative radicand in a Coulomb coefficient,
    or an overflowing exponential.
    """
