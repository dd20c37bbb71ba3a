"""Exception hierarchy for the voting backend.

Routes let these propagate; ``app.main`` maps them to HTTP responses.
"""


class VotingError(Exception):
    """Base exception for the voting backend."""

    pass


class InvalidVoteError(VotingError):
    """Vote payload is malformed (unknown vote type, missing field)."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []


class ZoneNotFoundError(VotingError):
    """Zone id does not exist."""

    def __init__(self, zone_id: str):
        super().__init__(f"Zone not found: {zone_id}")
        self.zone_id = zone_id
