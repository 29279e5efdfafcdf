"""In-memory collection of daily log entries keyed by date."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from tdeetrack.tracking.models import DailyLogEntry


class EntryLog:
    """Daily entries with at most one entry per date.

    Logging a date that already exists overwrites it. Editing an entry so
    that its date changes moves it: the old key is removed and the new one
    written.
    """

    def __init__(self, entries: Optional[Iterable[DailyLogEntry]] = None):
        self._entries: dict[str, DailyLogEntry] = {}
        for entry in entries or []:
            self.upsert(entry)

    def upsert(self, entry: DailyLogEntry) -> bool:
        """Insert or overwrite the entry for its date.

        Returns:
            True if an existing entry was replaced
        """
        replaced = entry.date in self._entries
        self._entries[entry.date] = entry
        return replaced

    def update(self, original_date: str, entry: DailyLogEntry) -> None:
        """Replace the entry at ``original_date`` with ``entry``.

        Raises:
            KeyError: If there is no entry at ``original_date``
        """
        if original_date not in self._entries:
            raise KeyError(f"No entry for {original_date}")
        if original_date != entry.date:
            del self._entries[original_date]
        self._entries[entry.date] = entry

    def delete(self, date_key: str) -> DailyLogEntry:
        """Remove and return the entry for ``date_key``.

        Raises:
            KeyError: If there is no entry for that date
        """
        if date_key not in self._entries:
            raise KeyError(f"No entry for {date_key}")
        return self._entries.pop(date_key)

    def get(self, date_key: str) -> Optional[DailyLogEntry]:
        return self._entries.get(date_key)

    def entries(self) -> list[DailyLogEntry]:
        """All entries in ascending date order."""
        return [self._entries[key] for key in sorted(self._entries)]

    def latest(self) -> Optional[DailyLogEntry]:
        if not self._entries:
            return None
        return self._entries[max(self._entries)]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, date_key: object) -> bool:
        return date_key in self._entries

    def __iter__(self) -> Iterator[DailyLogEntry]:
        return iter(self.entries())
