from colonybot.host.interfaces import (
    ActionCode,
    Actions,
    MemoryStore,
    Production,
    RoomQuery,
)

__all__ = [
    "ActionCode",
    "Actions",
    "MemoryStore",
    "Production",
    "RoomQuery",
]
