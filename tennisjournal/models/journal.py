"""TennisMatchJournal model."""

from typing import Iterator

from tennisjournal.models.exceptions import InvalidIndexError
from tennisjournal.models.match import TennisMatch


EMPTY_JOURNAL_MESSAGE = "<YOUR JOURNAL IS EMPTY>"


class TennisMatchJournal:
    """An ordered, duplicate-free collection of tennis matches.

    Matches keep the order in which they were added. Membership is decided
    by value equality, so adding a match equal to one already in the
    journal does nothing.
    """

    def __init__(self) -> None:
        self._journal: list[TennisMatch] = []

    def __len__(self) -> int:
        return len(self._journal)

    def __iter__(self) -> Iterator[TennisMatch]:
        return iter(self._journal)

    def add_match(self, match: TennisMatch) -> None:
        """Append a match unless an equal one is already in the journal."""
        if match not in self._journal:
            self._journal.append(match)

    def contains_match(self, match: TennisMatch) -> bool:
        """Return True if an equal match is in the journal."""
        return match in self._journal

    def journal_length(self) -> int:
        """Return the number of matches in the journal."""
        return len(self._journal)

    def delete_match(self, match: TennisMatch) -> None:
        """Remove the given match; do nothing if it is not in the journal."""
        if match in self._journal:
            self._journal.remove(match)

    def get_match_at(self, index: int) -> TennisMatch:
        """Return the match at a zero-based position.

        Args:
            index: Position in insertion order.

        Returns:
            The match at that position.

        Raises:
            InvalidIndexError: If index is not in [0, journal_length() - 1].
        """
        if index < 0 or index > self.journal_length() - 1:
            raise InvalidIndexError(index, self.journal_length())
        return self._journal[index]

    def view_journal(self) -> str:
        """Render every match as a details block followed by a stats block."""
        if not self._journal:
            return EMPTY_JOURNAL_MESSAGE

        sections = []
        for match in self._journal:
            outcome = "WIN" if match.is_won else "LOSS"
            sections.append(
                "\n<DETAILS>"
                f"\n\tOpponent: {match.opponent}"
                f"\n\tOutcome: {outcome}"
                f"\n\tSurface: {match.surface.upper()}"
                f"\n\tDuration: {match.duration} minutes"
                f"\n\tDate: {match.date}"
                "\n<STATS>"
                f"\n\tScore: {match.score}"
                f"\n\tAces: {match.aces}"
                f"\n\tDouble Faults: {match.double_faults}"
                f"\n\tWinners: {match.winners}"
                f"\n\tUnforced Errors: {match.unforced_errors}"
                "\n"
            )
        return "".join(sections)

    def win_loss_counts(self) -> tuple[int, int]:
        """Return (wins, losses) over every match in the journal."""
        wins = 0
        losses = 0
        for match in self._journal:
            if match.is_won:
                wins += 1
            else:
                losses += 1
        return wins, losses

    def view_win_loss_ratio(self) -> str:
        """Return the record in the form "wins : losses"."""
        wins, losses = self.win_loss_counts()
        return f"{wins} : {losses}"

    def get_journal(self) -> list[TennisMatch]:
        """Return the live list of matches."""
        return self._journal

    def to_json(self) -> dict:
        """Return the journal as {"matches": [...]} in insertion order."""
        return {"matches": [match.to_json() for match in self._journal]}

    @classmethod
    def from_json(cls, data: dict) -> "TennisMatchJournal":
        """Rebuild a journal from the output of to_json().

        Matches are re-added in array order, so duplicates in the input
        collapse to their first occurrence.

        Raises:
            KeyError: If data has no "matches" key.
            pydantic.ValidationError: If a match is malformed.
        """
        journal = cls()
        for item in data["matches"]:
            journal.add_match(TennisMatch.from_json(item))
        return journal
