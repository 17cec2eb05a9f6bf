"""File-backed storage for the weekly spotlight selection."""
import logging
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

from processor.errors import ReportNotFoundError, StorageError
from processor.models import ScrapedEvent, SpotlightEntry, SpotlightStatus, utc_timestamp
from storage.report_sink import PathLike, read_json, write_json_atomic

logger = logging.getLogger(__name__)


def week_start(day: date) -> date:
    """Return the Monday on or before the given date."""
    return day - timedelta(days=day.weekday())


class SpotlightStore:
    """Holds at most one spotlight entry; each selection replaces the last."""

    def __init__(self, path: PathLike):
        self.path = Path(path)

    def select(self, event: ScrapedEvent, now: Optional[datetime] = None) -> SpotlightEntry:
        """
        Save an event as the current spotlight.

        Args:
            event: The chosen event
            now: Selection time (default: current UTC time)

        Returns:
            The stored SpotlightEntry, status pending

        Raises:
            StorageError: If the entry cannot be written
        """
        now = now or datetime.now(timezone.utc)
        entry = SpotlightEntry(
            event=event,
            selected_at=utc_timestamp(now),
            week_of=week_start(now.date()).isoformat(),
            status=SpotlightStatus.PENDING
        )
        write_json_atomic(self.path, entry.to_dict())
        logger.info(f"Spotlight set to '{event.title}' for week of {entry.week_of}")
        return entry

    def load(self) -> Optional[SpotlightEntry]:
        """
        Load the current spotlight.

        Returns:
            The stored SpotlightEntry, or None if nothing is selected

        Raises:
            StorageError: If the stored entry cannot be read or parsed
        """
        try:
            document = read_json(self.path)
        except ReportNotFoundError:
            return None

        try:
            return SpotlightEntry.from_dict(document)
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Malformed spotlight in {self.path}: {e}") from e

    def mark_posted(self) -> Optional[SpotlightEntry]:
        entry = self.load()
        if entry is None:
            return None

        posted = SpotlightEntry(
            event=entry.event,
            selected_at=entry.selected_at,
            week_of=entry.week_of,
            status=SpotlightStatus.POSTED
        )
        write_json_atomic(self.path, posted.to_dict())
        logger.info(f"Spotlight '{entry.event.title}' marked as posted")
        return posted

    def clear(self) -> bool:
        """Remove the current spotlight. Returns True if one existed."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(f"Failed to remove {self.path}: {e}") from e

        logger.info("Spotlight cleared")
        return True
