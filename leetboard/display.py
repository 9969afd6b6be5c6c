"""
Display helpers shared by the dashboard.

Kept free of Streamlit so they can be tested directly.
"""

from urllib.parse import quote

from leetboard.config import LEETCODE_PROFILE_URL


def profile_url(username: str) -> str:
    """Public LeetCode profile URL for a username."""
    return LEETCODE_PROFILE_URL.format(username=quote(username.strip(), safe=""))


def chart_labels(df) -> list[str]:
    """One label per student, unique even when names repeat on a page."""
    return [f"{name} ({roll})" for name, roll in zip(df['name'], df['roll_number'])]


def pending_upload(processed_id, file_id) -> bool:
    """True when a selected file has not yet been ingested successfully."""
    return file_id is not None and file_id != processed_id
