"""Colony configuration — defaults, validation, and environment overrides."""

import os

from pydantic import BaseModel, Field

from colonybot.context import DEFAULT_BUILDER_CAP
from colonybot.models.catalogue import MAX_BODY_PARTS

DEFAULT_POPULATION_FLOOR = 5
DEFAULT_MIN_GENERALISTS = 2
DEFAULT_MEMORY_GC_INTERVAL = 1000

_ENV_PREFIX = "COLONY_"


class ColonyConfig(BaseModel):
    """Tunables for the colony controller."""

    # Produce new agents while the live population is below this
    population_floor: int = Field(default=DEFAULT_POPULATION_FLOOR, ge=0)
    # Agents required before specialised roles are produced
    min_generalists: int = Field(default=DEFAULT_MIN_GENERALISTS, ge=0)
    # Max agents a generalist lets build at once
    builder_cap: int = Field(default=DEFAULT_BUILDER_CAP, ge=0)
    # Ticks between sweeps of memory records of dead agents
    memory_gc_interval: int = Field(default=DEFAULT_MEMORY_GC_INTERVAL, gt=0)
    max_body_parts: int = Field(default=MAX_BODY_PARTS, gt=0, le=MAX_BODY_PARTS)

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ColonyConfig":
        """Build a config from COLONY_* variables, e.g. COLONY_POPULATION_FLOOR=8.

        Raises:
            ValidationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        overrides = {
            name: env[_ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if _ENV_PREFIX + name.upper() in env
        }
        return cls.model_validate(overrides)
