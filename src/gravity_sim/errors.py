# MIT License (see LICENSE)
"""
Exception types raised by the simulation.

Leaving the bounds is normal body lifecycle and is not represented here.
"""
from __future__ import annotations


class GravitySimError(Exception):
    """Base class for all simulation errors."""


class InvalidBodyError(GravitySimError, ValueError):
    """A body was created with non-positive or non-finite mass or density."""


class DegenerateVectorError(GravitySimError, ArithmeticError):
    """
    A zero-length vector was normalized.

    Collision checks run before normalization in the force pass, so this
    indicates corrupted state. It is never caught inside the package.
    """
