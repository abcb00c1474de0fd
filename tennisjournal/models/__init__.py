"""Data models for the tennis match journal."""

from tennisjournal.models.exceptions import InvalidIndexError
from tennisjournal.models.match import MatchDetails, MatchStats, TennisMatch
from tennisjournal.models.journal import TennisMatchJournal

__all__ = [
    "InvalidIndexError",
    "MatchDetails",
    "MatchStats",
    "TennisMatch",
    "TennisMatchJournal",
]
