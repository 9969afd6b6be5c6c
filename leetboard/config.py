"""
Central configuration for LeetBoard.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

from pathlib import Path

# --- Project Paths ---
PROJECT_ROOT = Path(__file__).parent.parent
DATA_FOLDER = PROJECT_ROOT / "data"
OUTPUT_FOLDER = DATA_FOLDER / "processed"

# --- LeetCode API ---
LEETCODE_GRAPHQL_URL = "https://leetcode.com/graphql"
LEETCODE_PROFILE_URL = "https://leetcode.com/{username}"
REQUEST_TIMEOUT = 10  # Seconds per stats request (one attempt, no retries)

# Difficulty buckets reported by acSubmissionNum -> SolvedStats field
DIFFICULTY_BUCKETS = {
    "All": "total_solved",
    "Easy": "easy_solved",
    "Medium": "medium_solved",
    "Hard": "hard_solved",
}

# --- Roster Upload ---
# Upload header name -> RosterRow field
REQUIRED_COLUMNS = {
    "rollNumber": "roll_number",
    "name": "name",
    "leetcodeUsername": "leetcode_username",
}
MAX_INPUT_SIZE = 1_000_000  # Maximum upload size in bytes (~1MB)

# --- Student Records ---
STATS_COLUMNS = ["total_solved", "easy_solved", "medium_solved", "hard_solved"]
STUDENT_COLUMNS = ["id", "roll_number", "name", "leetcode_username", *STATS_COLUMNS, "rank"]
NUMERIC_COLUMNS = frozenset({"id", "rank", *STATS_COLUMNS})

# Column key -> header label, in display order
SORTABLE_COLUMNS = {
    "rank": "Rank",
    "name": "Name",
    "roll_number": "Roll Number",
    "total_solved": "Total Solved",
    "easy_solved": "Easy",
    "medium_solved": "Medium",
    "hard_solved": "Hard",
}

# --- Display ---
PAGE_SIZE = 15
ASCENDING = "ascending"
DESCENDING = "descending"
DEFAULT_SORT_KEY = "rank"
DEFAULT_SORT_DIRECTION = ASCENDING
