"""Boundary input type shared by the codec and the sanitizer.

Both ``decode`` and ``sanitize`` accept any value.  Instead of scattering
``isinstance`` checks, each classifies its argument once::

    Input = Text(value: str) | Invalid

and works only with the classified form from then on.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Text:
    """A string argument (possibly empty)."""

    value: str


@dataclass(frozen=True)
class Invalid:
    """Anything that is not a string: ``None``, numbers, containers, objects."""

    kind: str


Input = Text | Invalid


def classify_input(value: object) -> Input:
    """Classify an arbitrary value at the boundary.

    Examples:
        >>> classify_input("hi")
        Text(value='hi')
        >>> classify_input(None)
        Invalid(kind='NoneType')
    """
    if isinstance(value, str):
        return Text(value)
    return Invalid(type(value).__name__)
