"""
Leaderboard Ranking

Modules:
- pipeline: Roster reconciliation against LeetCode stats
- engine: Competition ranking by total solved
- view: Sorting, pagination and UI state transitions
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "ingest_roster":
        from leetboard.ranking.pipeline import ingest_roster
        return ingest_roster
    if name == "reconcile":
        from leetboard.ranking.pipeline import reconcile
        return reconcile
    if name == "rank_students":
        from leetboard.ranking.engine import rank_students
        return rank_students
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
