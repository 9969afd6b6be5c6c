"""
Roster Reconciliation Pipeline

This module turns an uploaded roster into a ranked leaderboard:
parse the CSV, resolve LeetCode stats for each student, then rank.

Stats are resolved strictly one row at a time, in upload order. This keeps
load on the LeetCode API bounded; there is deliberately no concurrency.
A row whose stats cannot be resolved is kept with zero stats, so the
leaderboard always has exactly one row per uploaded student.

Usage:
    python -m leetboard.ranking.pipeline roster.csv [output.csv]
    OR
    python leetboard/ranking/pipeline.py roster.csv [output.csv]

    Programmatic usage:
        from leetboard.ranking.pipeline import ingest_roster
        result = ingest_roster(text)
"""

import sys
from pathlib import Path

# Enable both `python leetboard/ranking/pipeline.py` and `python -m leetboard.ranking.pipeline` execution.
# Required for leetboard.config/leetboard.utils imports to resolve correctly.
_project_root = str(Path(__file__).parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import threading
from typing import Callable, Optional, Sequence

import pandas as pd

from leetboard.config import STATS_COLUMNS, STUDENT_COLUMNS
from leetboard.ingestion.errors import IngestionError, UploadInProgressError
from leetboard.ingestion.roster_parser import RosterRow, parse_roster
from leetboard.ingestion.stats_resolver import ZERO_STATS, SolvedStats, resolve_stats
from leetboard.ranking.engine import rank_students
from leetboard.utils import atomic_write_csv, read_upload, setup_logging, validate_input_size

# --- Module Logger ---
logger = setup_logging(__name__)

Resolver = Callable[[str], Optional[SolvedStats]]
ProgressCallback = Callable[[int, int, RosterRow], None]

# Shared by every session so only one pass talks to LeetCode at a time
RECONCILE_LOCK = threading.Lock()


def reconcile(
    rows: Sequence[RosterRow],
    resolver: Resolver = resolve_stats,
    progress: Optional[ProgressCallback] = None,
) -> pd.DataFrame:
    """
    Attach solved stats to each roster row.

    Args:
        rows: Parsed roster rows
        resolver: Callable returning SolvedStats or None for a username
        progress: Optional callback(done, total, row) invoked after each row settles

    Returns:
        DataFrame with one row per input row, in input order, and every
        StudentRecord column except rank. Unresolved rows carry zero stats.
    """
    records = []
    failed = 0

    for done, row in enumerate(rows, start=1):
        try:
            stats = resolver(row.leetcode_username)
        except Exception:
            logger.exception(f"Failed to fetch stats for {row.leetcode_username}")
            stats = None

        if stats is None:
            failed += 1
            stats = ZERO_STATS

        records.append({**row._asdict(), **stats._asdict()})

        if progress is not None:
            progress(done, len(rows), row)

    logger.info(f"Reconciled {len(records)} students ({failed} without stats)")

    df = pd.DataFrame(records, columns=[c for c in STUDENT_COLUMNS if c != 'rank'])
    return df.astype({'id': 'int64', **{c: 'int64' for c in STATS_COLUMNS}})


def ingest_roster(
    text: str,
    resolver: Resolver = resolve_stats,
    progress: Optional[ProgressCallback] = None,
    lock: Optional[threading.Lock] = None,
) -> dict:
    """
    Main entry point for roster ingestion.

    Args:
        text: Raw roster CSV text
        resolver: Stats resolver (defaults to the LeetCode API)
        progress: Optional per-row progress callback
        lock: Lock serializing passes (default: RECONCILE_LOCK)

    Returns:
        Dictionary with:
            - success: bool
            - rows: number of roster rows parsed
            - resolved: rows with stats from the resolver
            - failed: rows substituted with zero stats
            - students: ranked DataFrame

    Raises:
        FormatError: If the roster is malformed (before any network call)
        UploadInProgressError: If another pass is still running
        ValueError: If the input exceeds the size limit
    """
    lock = lock or RECONCILE_LOCK
    if not lock.acquire(blocking=False):
        raise UploadInProgressError("A roster upload is already being processed. Please wait for it to finish.")

    try:
        validate_input_size(text)

        logger.info("Parsing roster...")
        rows = parse_roster(text)

        logger.info(f"Resolving LeetCode stats for {len(rows)} students...")
        resolved = 0

        def counting_resolver(username):
            nonlocal resolved
            stats = resolver(username)
            if stats is not None:
                resolved += 1
            return stats

        reconciled = reconcile(rows, resolver=counting_resolver, progress=progress)
        students = rank_students(reconciled)
    finally:
        lock.release()

    logger.info(f"Processed {len(students)} students successfully")
    return {
        'success': True,
        'rows': len(rows),
        'resolved': resolved,
        'failed': len(rows) - resolved,
        'students': students,
    }


def main():
    """CLI interface for roster ingestion."""
    if len(sys.argv) < 2:
        print("Usage: python -m leetboard.ranking.pipeline roster.csv [output.csv]")
        sys.exit(1)

    input_path = Path(sys.argv[1])
    output_path = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    print("=" * 60)
    print("LeetBoard Roster Ingestion")
    print("=" * 60)

    def show_progress(done, total, row):
        print(f"  [{done}/{total}] {row.leetcode_username}")

    try:
        text = read_upload(input_path)
        result = ingest_roster(text, progress=show_progress)
    except IngestionError as e:
        print(f"\nINGESTION ERROR: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"\nINPUT ERROR: {e}")
        sys.exit(1)

    students = result['students']
    print("\n" + students.to_string(index=False))

    if output_path is not None:
        atomic_write_csv(students, output_path, index=False)

    print("\n" + "=" * 60)
    print("SUCCESS!")
    print(f"  Students: {result['rows']}")
    print(f"  Resolved: {result['resolved']}")
    print(f"  Zero-filled: {result['failed']}")
    if output_path is not None:
        print(f"  CSV: {output_path}")
    print("=" * 60)


if __name__ == "__main__":
    main()
