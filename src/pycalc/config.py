"""Calculator configuration."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pycalc._constants import DEFAULT_DISPLAY_PRECISION, MAX_DISPLAY_PRECISION
from pycalc.exceptions import CalcConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class CalcConfig:
    """Calculator configuration.

    Parameters
    ----------
    display_precision : int
        Significant digits kept when formatting non-integral values for
        display. Must be between 1 and 17. Engine state always keeps the
        unrounded value.
    trace_enabled : bool
        Log every state transition at DEBUG level.
    """

    display_precision: int = DEFAULT_DISPLAY_PRECISION
    trace_enabled: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.display_precision, bool) or not isinstance(self.display_precision, int):
            raise CalcConfigError(f"display_precision must be an int, got {self.display_precision!r}")
        if not 1 <= self.display_precision <= MAX_DISPLAY_PRECISION:
            raise CalcConfigError(
                f"display_precision must be between 1 and {MAX_DISPLAY_PRECISION}, got {self.display_precision}"
            )

    @classmethod
    def from_env(cls, **overrides: Any) -> CalcConfig:
        """Create configuration from environment variables.

        Reads ``PYCALC_DISPLAY_PRECISION`` and ``PYCALC_TRACE_ENABLED``.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        CalcConfig
            Populated configuration.

        Raises
        ------
        CalcConfigError
            An environment value cannot be parsed or is out of range.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        precision_env = env.get("PYCALC_DISPLAY_PRECISION")
        if precision_env is not None and "display_precision" not in overrides:
            try:
                config_kwargs["display_precision"] = int(precision_env)
            except ValueError as exc:
                raise CalcConfigError(f"PYCALC_DISPLAY_PRECISION is not an integer: {precision_env!r}") from exc

        if "trace_enabled" not in overrides:
            config_kwargs["trace_enabled"] = _env_bool(env.get("PYCALC_TRACE_ENABLED"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
