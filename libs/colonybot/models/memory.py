"""Persisted per-agent memory — role label, task label, source binding.

The host stores one record per agent name and keeps it across restarts.
Always serialize with `to_json()` / `from_json()` so the wire shape stays stable.
"""

from enum import StrEnum

from pydantic import BaseModel, Field


class Role(StrEnum):
    """Closed set of agent roles. Set once at production time."""

    GENERALIST = "generalist"
    MINER = "miner"  # producer: harvests a bound source into a container
    HAULER = "hauler"  # transporter: moves energy out of containers
    BUILDER = "builder"
    UPGRADER = "upgrader"


class StateName(StrEnum):
    """Labels for every task state, recorded in memory on entry."""

    IDLE = "idle"
    HARVEST = "harvest"
    DELIVER = "deliver"
    BUILD = "build"
    UPGRADE = "upgrade"
    WITHDRAW = "withdraw"


class AgentMemory(BaseModel):
    """Durable record attached to an agent."""

    role: Role
    current_state: StateName = StateName.IDLE
    bound_source_index: int | None = Field(default=None, ge=0)

    model_config = {"frozen": True}

    def with_state(self, state: StateName) -> "AgentMemory":
        """Return a copy recording a new current task label."""
        return self.model_copy(update={"current_state": state})

    def with_bound_source(self, index: int) -> "AgentMemory":
        """Return a copy bound to the source at `index`."""
        return self.model_copy(update={"bound_source_index": index})

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str | bytes) -> "AgentMemory":
        """Parse a stored record.

        Raises:
            ValidationError: If the record doesn't match the schema.
        """
        return cls.model_validate_json(data)
