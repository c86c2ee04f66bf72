"""Base model shared by every pycalc model.

All models are immutable: a transition never edits a record in place,
it validates and returns a new one.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class CalcBaseModel(BaseModel):
    """Frozen, strict-keyed pydantic base."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def replace(self, **changes: Any) -> Self:
        """Return a validated copy with *changes* applied.

        ``model_copy(update=...)`` skips validation, which would let a
        transition build a record that breaks the model invariants.
        """
        return self.__class__.model_validate({**self.model_dump(), **changes})
