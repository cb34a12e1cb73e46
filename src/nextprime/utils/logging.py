"""Verification result logging.

Writes one JSON object per line: mismatch records while a run is in
progress, then a single summary record.
"""

import json
import time
from pathlib import Path
from typing import Any


class ResultsLogger:
    """Logger for verification results in JSONL format.

    Mismatch lines hold:
        - check: "ceil_sqrt" | "is_prime" | "next_prime" | "regression"
        - n: int
        - expected: int | bool
        - actual: int | bool

    The summary line holds check="summary" plus start, stop, checked,
    mismatches and time_sec.
    """

    def __init__(self, log_path: str | Path):
        """Initialize the results logger.

        Args:
            log_path: Path to the JSONL log file.
        """
        self.log_path = Path(log_path)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

        self._file = open(self.log_path, "a")
        self._start_time = time.time()

    def log_mismatch(self, check: str, n: int, expected: Any, actual: Any) -> None:
        """Log a single disagreement between a function and its reference.

        Args:
            check: Name of the check that failed.
            n: Input value.
            expected: Reference result.
            actual: Result under test.
        """
        self._write({"check": check, "n": n, "expected": expected, "actual": actual})

    def log_summary(self, start: int, stop: int, checked: int, mismatches: int) -> None:
        """Log the closing summary of a verification run."""
        self._write(
            {
                "check": "summary",
                "start": start,
                "stop": stop,
                "checked": checked,
                "mismatches": mismatches,
                "time_sec": time.time() - self._start_time,
            }
        )

    def _write(self, entry: dict[str, Any]) -> None:
        self._file.write(json.dumps(entry) + "\n")
        self._file.flush()

    def close(self) -> None:
        """Close the log file."""
        self._file.close()

    def __enter__(self) -> "ResultsLogger":
        return self

    def __exit__(self, *args) -> None:
        self.close()


def get_records_by_check(
    records: list[dict[str, Any]],
    check: str,
) -> list[dict[str, Any]]:
    """Filter logged records by check name.

    Args:
        records: List of record dictionaries.
        check: Check name to filter by.

    Returns:
        Filtered list of records.
    """
    return [r for r in records if r["check"] == check]
