"""Domain exceptions."""


class WorldStateError(Exception):
    """Base class for WorldState errors."""


class SourceUnavailable(WorldStateError):
    """An external data source could not be fetched or decoded."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason
