"""
Roster Ingestion

Modules:
- errors: Ingestion exception hierarchy
- roster_parser: Parse uploaded roster CSV text
- stats_resolver: Fetch solved-problem counts from LeetCode
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "parse_roster":
        from leetboard.ingestion.roster_parser import parse_roster
        return parse_roster
    if name == "resolve_stats":
        from leetboard.ingestion.stats_resolver import resolve_stats
        return resolve_stats
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
