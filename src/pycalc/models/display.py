"""Rendered output handed to the presentation layer."""

from __future__ import annotations

from pycalc.models._base import CalcBaseModel


class DisplayFields(CalcBaseModel):
    """The three strings a renderer draws.

    ``operator`` and ``previous`` are empty unless an operator chain is
    active; ``entry`` is always present.
    """

    operator: str = ""
    previous: str = ""
    entry: str
