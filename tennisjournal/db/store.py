"""JSON file store for the tennis match journal."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from tennisjournal.models import TennisMatchJournal

logger = logging.getLogger(__name__)


class JournalStoreError(Exception):
    """Raised when a journal file exists but cannot be loaded."""


class JournalStore:
    """Reads and writes a TennisMatchJournal as a JSON file."""

    INDENT = 4
    ENCODING = "utf-8"

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: Path to the JSON journal file.
        """
        self.path = path
        self._ensure_dir()

    def _ensure_dir(self) -> None:
        """Ensure the journal directory exists."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def exists(self) -> bool:
        """Return True if the journal file has been written."""
        return self.path.exists()

    def write(self, journal: TennisMatchJournal) -> None:
        """Write the journal to the file, replacing its contents.

        The JSON is written to a sibling ".tmp" file and then moved over
        the journal file.
        """
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(journal.to_json(), indent=self.INDENT), encoding=self.ENCODING)
        tmp_path.replace(self.path)
        logger.debug("Wrote %d matches to %s", journal.journal_length(), self.path)

    def read(self) -> TennisMatchJournal:
        """Load the journal from the file.

        Returns:
            The stored journal, or an empty one if the file does not exist.

        Raises:
            JournalStoreError: If the file cannot be read or is not valid journal JSON.
        """
        if not self.path.exists():
            logger.debug("No journal at %s, starting empty", self.path)
            return TennisMatchJournal()

        try:
            data = json.loads(self.path.read_text(encoding=self.ENCODING))
            journal = TennisMatchJournal.from_json(data)
        except UnicodeDecodeError as e:
            raise JournalStoreError(f"{self.path} is not UTF-8 text: {e}") from e
        except OSError as e:
            raise JournalStoreError(f"Cannot read {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise JournalStoreError(f"{self.path} is not valid JSON: {e}") from e
        except (KeyError, TypeError) as e:
            raise JournalStoreError(f"{self.path} has no list of matches") from e
        except ValidationError as e:
            raise JournalStoreError(f"{self.path} contains an invalid match:\n{e}") from e

        logger.debug("Read %d matches from %s", journal.journal_length(), self.path)
        return journal
