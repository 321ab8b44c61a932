"""
Domain models for late-frost.

Pydantic models for configuration and report rows, plus the pre-fetched
``ClimaBundle`` that remote datasources normalize their responses to.
"""

from __future__ import annotations

from dataclasses import dataclass
import datetime as dt  # noqa: TC003
from enum import StrEnum

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator

from late_frost.config import get_settings
from late_frost.exceptions import ShapeError
from late_frost.gdd.compute import EQUATIONS

# =============================================================================
# Configuration
# =============================================================================


class FrostOptions(BaseModel):
    """Parameters threaded through every late-frost computation.

    Unset fields take their defaults from :class:`~late_frost.config.Settings`
    at construction time.
    """

    model_config = ConfigDict(frozen=True)

    base: float = Field(
        default_factory=lambda: get_settings().base,
        description="Base temperature for GDD",
    )
    tfrost: float = Field(
        default_factory=lambda: get_settings().tfrost,
        description="Freezing threshold (inclusive)",
    )
    equation: str = Field(
        default_factory=lambda: get_settings().equation,
        description="GDD equation variant",
    )

    @field_validator("equation")
    @classmethod
    def _known_equation(cls, value: str) -> str:
        if value not in EQUATIONS:
            msg = f"unknown GDD equation {value!r}; expected one of {', '.join(EQUATIONS)}"
            raise ValueError(msg)
        return value


# =============================================================================
# Events
# =============================================================================


class EventKind(StrEnum):
    """Late-frost event classes, in report order."""

    FROST = "frost"
    LATENT = "latent"
    WARMING = "warming"


class FrostEvent(BaseModel):
    """One row of the late-frost report."""

    id: int = Field(..., ge=1, description="1-based series identifier")
    date: dt.date | None = Field(default=None, description="First day of the event")
    gdd: float = Field(..., ge=0, description="GDD summed over the event")
    event: EventKind
    duration: int = Field(..., ge=1, description="Days spanned by the event")


# =============================================================================
# Pre-fetched input
# =============================================================================

BUNDLE_COLUMNS = ("id", "date", "value")


@dataclass(frozen=True)
class ClimaBundle:
    """Daily max and min temperatures already fetched for one or more series.

    Both frames are long format with columns ``id``, ``date`` and ``value``
    and must be aligned row for row.
    """

    tmax: pd.DataFrame
    tmin: pd.DataFrame

    def __post_init__(self) -> None:
        for name in ("tmax", "tmin"):
            frame = getattr(self, name)
            missing = [c for c in BUNDLE_COLUMNS if c not in frame.columns]
            if missing:
                msg = f"ClimaBundle.{name} is missing columns: {', '.join(missing)}"
                raise ShapeError(msg)
        if len(self.tmax) != len(self.tmin):
            msg = f"ClimaBundle rows differ: tmax has {len(self.tmax)}, tmin has {len(self.tmin)}"
            raise ShapeError(msg)
