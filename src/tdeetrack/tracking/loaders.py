"""Load daily entries and goal settings from files.

Entries come from CSV (via pandas) or YAML; goal settings from YAML.

CSV format:
    date,weight,calories,notes
    2024-01-01,200.0,2000,
    2024-01-02,199.8,1950,travel day

YAML format (entries):
    entries:
      - {date: 2024-01-01, weight: 200.0, calories: 2000}

YAML format (goal):
    unit: pound
    start_date: 2024-01-01
    starting_weight: 200
    goal_weight: 180
    weekly_rate_goal: -1.0
    sex: male
    age: 35
    height_cm: 180
    activity_level: moderate     # or activity_multiplier: 1.55
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any, Optional

import pandas as pd
import yaml

from tdeetrack.profiles.body_calc import activity_multiplier_for
from tdeetrack.tracking.dates import DateLike, format_date_key
from tdeetrack.tracking.entry_log import EntryLog
from tdeetrack.tracking.models import GoalSettings
from tdeetrack.tracking.units import Unit
from tdeetrack.tracking.validation import parse_entry_form

logger = logging.getLogger(__name__)


class EntryLoader:
    """Builds an EntryLog from raw records, skipping invalid rows."""

    REQUIRED_COLUMNS = ["date", "weight", "calories"]
    OPTIONAL_COLUMNS = ["notes"]

    def __init__(self, unit: Unit = Unit.POUND, today: Optional[DateLike] = None):
        """Initialize the loader.

        Args:
            unit: Unit the weights are recorded in (for bounds checks)
            today: Reference date; entries after it are rejected
        """
        self.unit = unit
        self.today = today

    def load_from_csv(self, csv_path: Path) -> tuple[EntryLog, dict[str, int]]:
        """Load entries from a CSV file.

        Args:
            csv_path: Path to the CSV file

        Returns:
            (EntryLog, counts) where counts has 'loaded', 'replaced' and
            'skipped_invalid'

        Raises:
            ValueError: If required columns are missing
        """
        df = pd.read_csv(csv_path, dtype={"date": str})

        missing = set(self.REQUIRED_COLUMNS) - set(df.columns)
        if missing:
            raise ValueError(
                f"Missing required columns: {sorted(missing)}. "
                f"Required columns are: {self.REQUIRED_COLUMNS}"
            )

        records = []
        for _, row in df.iterrows():
            notes = row.get("notes")
            records.append(
                {
                    "date": row["date"],
                    "weight": row["weight"],
                    "calories": row["calories"],
                    "notes": None if pd.isna(notes) else str(notes),
                }
            )
        return self.load_records(records)

    def load_from_yaml(self, yaml_path: Path) -> tuple[EntryLog, dict[str, int]]:
        """Load entries from a YAML file (a list, or a mapping with 'entries')."""
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or []

        if isinstance(data, dict):
            data = data.get("entries") or []
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of entries in {yaml_path}")
        return self.load_records(data)

    def load_records(
        self, records: list[dict[str, Any]]
    ) -> tuple[EntryLog, dict[str, int]]:
        """Validate raw mappings and collect them into an EntryLog.

        Later rows for the same date overwrite earlier ones.
        """
        log = EntryLog()
        loaded = 0
        replaced = 0
        skipped_invalid = 0

        for record in records:
            raw_date = record.get("date")
            # YAML parses unquoted dates into date objects
            if isinstance(raw_date, date):
                raw_date = format_date_key(raw_date)

            entry, error = parse_entry_form(
                record.get("weight"),
                record.get("calories"),
                str(raw_date) if raw_date is not None else "",
                unit=self.unit,
                today=self.today,
            )
            if entry is None:
                logger.warning("Skipping entry %r: %s", raw_date, error)
                skipped_invalid += 1
                continue

            notes = record.get("notes")
            entry.notes = str(notes) if notes else None
            if log.upsert(entry):
                replaced += 1
            loaded += 1

        return log, {
            "loaded": loaded,
            "replaced": replaced,
            "skipped_invalid": skipped_invalid,
        }


def load_entries(
    path: Path,
    unit: Unit = Unit.POUND,
    today: Optional[DateLike] = None,
) -> tuple[EntryLog, dict[str, int]]:
    """Load entries from a CSV or YAML file, chosen by suffix.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: For unsupported suffixes or malformed files
    """
    if not path.exists():
        raise FileNotFoundError(f"Entries file not found: {path}")

    loader = EntryLoader(unit=unit, today=today)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return loader.load_from_csv(path)
    if suffix in (".yaml", ".yml"):
        return loader.load_from_yaml(path)
    raise ValueError(f"Unsupported entries file type: {path.suffix} (use .csv or .yaml)")


def goal_settings_from_dict(data: dict[str, Any]) -> GoalSettings:
    """Build GoalSettings from a parsed YAML mapping.

    Raises:
        ValueError: If required fields are missing or enum values are invalid
    """
    required = ("starting_weight", "goal_weight", "weekly_rate_goal")
    missing = [key for key in required if data.get(key) is None]
    if missing:
        raise ValueError(f"Goal settings missing required fields: {missing}")

    start_date = data.get("start_date")
    if isinstance(start_date, date):
        start_date = format_date_key(start_date)

    multiplier = data.get("activity_multiplier")
    if multiplier is None and data.get("activity_level"):
        multiplier = activity_multiplier_for(str(data["activity_level"]))

    return GoalSettings(
        starting_weight=float(data["starting_weight"]),
        goal_weight=float(data["goal_weight"]),
        weekly_rate_goal=float(data["weekly_rate_goal"]),
        unit=Unit.parse(str(data.get("unit", "pound"))),
        start_date=str(start_date) if start_date else None,
        strategy=data.get("strategy"),
        sex=data.get("sex"),
        age=int(data["age"]) if data.get("age") is not None else None,
        height_cm=float(data["height_cm"]) if data.get("height_cm") is not None else None,
        activity_multiplier=float(multiplier) if multiplier is not None else None,
    )


def load_goal_settings(path: Optional[Path]) -> Optional[GoalSettings]:
    """Load goal settings from YAML; None if no file is configured or present."""
    if path is None or not path.exists():
        return None

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping of goal settings in {path}")
    # Allow the settings to be nested under a 'goal' key
    if isinstance(data.get("goal"), dict):
        data = data["goal"]
    return goal_settings_from_dict(data)
