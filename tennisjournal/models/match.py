"""TennisMatch data model."""

from pydantic import BaseModel, Field


class MatchDetails(BaseModel):
    """Who, where and when a match was played."""

    opponent: str = Field(..., min_length=1, description="Opponent name")
    is_won: bool = Field(..., description="True if the match was won")
    surface: str = Field(..., min_length=1, description="Court surface (hard, clay, grass...)")
    duration: int = Field(..., ge=0, description="Match duration in minutes")
    date: str = Field(..., min_length=1, description="Date the match was played")

    model_config = {"frozen": True}


class MatchStats(BaseModel):
    """Final score and counting stats for a match."""

    score: str = Field(..., min_length=1, description="Final score, e.g. 6-4 6-3")
    aces: int = Field(default=0, ge=0, description="Aces served")
    double_faults: int = Field(default=0, ge=0, description="Double faults")
    winners: int = Field(default=0, ge=0, description="Winners hit")
    unforced_errors: int = Field(default=0, ge=0, description="Unforced errors")

    model_config = {"frozen": True}


class TennisMatch(BaseModel):
    """Represents one played match.

    Two matches with identical details and stats compare equal, which is
    what the journal relies on for duplicate detection and deletion.
    """

    details: MatchDetails = Field(..., description="Match details")
    stats: MatchStats = Field(..., description="Match statistics")

    model_config = {"frozen": True}

    @property
    def opponent(self) -> str:
        return self.details.opponent

    @property
    def is_won(self) -> bool:
        return self.details.is_won

    @property
    def surface(self) -> str:
        return self.details.surface

    @property
    def duration(self) -> int:
        return self.details.duration

    @property
    def date(self) -> str:
        return self.details.date

    @property
    def score(self) -> str:
        return self.stats.score

    @property
    def aces(self) -> int:
        return self.stats.aces

    @property
    def double_faults(self) -> int:
        return self.stats.double_faults

    @property
    def winners(self) -> int:
        return self.stats.winners

    @property
    def unforced_errors(self) -> int:
        return self.stats.unforced_errors

    def to_json(self) -> dict:
        """Return the match as a plain dict of details and stats."""
        return self.model_dump(mode="json")

    @classmethod
    def from_json(cls, data: dict) -> "TennisMatch":
        """Build a match from the output of to_json().

        Raises:
            pydantic.ValidationError: If a field is missing or invalid.
        """
        return cls.model_validate(data)
