"""Stableford point table, configurable at runtime and from the environment."""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Protocol

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError

load_dotenv()

logger = logging.getLogger(__name__)

ENV_PREFIX = "STABLEFORD_POINTS_"

DEFAULT_POINTS: Dict[str, int] = {
    "double_eagle": 5,
    "eagle": 4,
    "birdie": 3,
    "par": 2,
    "bogey": 1,
    "double_bogey": 0,
}


class PointsProvider(Protocol):
    """Anything that can turn a net score relative to par into points."""

    def points_for_score(self, score_relative_to_par: int) -> int:
        ...


class StablefordSettings(BaseModel):
    """Points awarded per net result. Values may be changed at any time."""
    model_config = ConfigDict(validate_assignment=True)

    double_eagle: int = DEFAULT_POINTS["double_eagle"]  # double eagle or better
    eagle: int = DEFAULT_POINTS["eagle"]
    birdie: int = DEFAULT_POINTS["birdie"]
    par: int = DEFAULT_POINTS["par"]
    bogey: int = DEFAULT_POINTS["bogey"]
    double_bogey: int = DEFAULT_POINTS["double_bogey"]  # double bogey or worse

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "StablefordSettings":
        """Build settings from STABLEFORD_POINTS_<NAME> variables, defaults elsewhere.

        Each variable is validated on its own; an invalid one keeps its default.
        """
        environ = os.environ if environ is None else environ
        settings = cls()
        for name in DEFAULT_POINTS:
            key = ENV_PREFIX + name.upper()
            raw = environ.get(key)
            if raw is None or raw == "":
                continue
            try:
                setattr(settings, name, raw)
            except ValidationError as e:
                logger.warning("Ignoring invalid %s=%r: %s", key, raw, e.errors()[0]['msg'])
        return settings

    def get_points(self, name: str) -> int:
        if name not in DEFAULT_POINTS:
            raise KeyError(f"Unknown Stableford result '{name}'")
        return getattr(self, name)

    def set_points(self, name: str, points: int) -> None:
        if name not in DEFAULT_POINTS:
            raise KeyError(f"Unknown Stableford result '{name}'")
        setattr(self, name, points)

    def reset_to_defaults(self) -> None:
        for name, points in DEFAULT_POINTS.items():
            setattr(self, name, points)

    def as_dict(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in DEFAULT_POINTS}

    def points_for_score(self, score_relative_to_par: int) -> int:
        """Points for a net score relative to par (-1 birdie, +1 bogey, ...)."""
        if score_relative_to_par <= -3:
            return self.double_eagle
        if score_relative_to_par == -2:
            return self.eagle
        if score_relative_to_par == -1:
            return self.birdie
        if score_relative_to_par == 0:
            return self.par
        if score_relative_to_par == 1:
            return self.bogey
        return self.double_bogey


# Process-wide provider; engines fall back to it when none is injected.
stableford_settings = StablefordSettings.from_env()
