"""
LeetCode Stats Resolver

Fetches solved-problem counts for a single username from the LeetCode
GraphQL API.

resolve_stats() never raises: network errors, non-2xx responses, malformed
payloads and unknown users are all logged and collapse to None.

Usage:
    from leetboard.ingestion.stats_resolver import resolve_stats
    stats = resolve_stats("asharao1")
"""

from typing import NamedTuple, Optional

import requests

from leetboard.config import (
    DIFFICULTY_BUCKETS,
    LEETCODE_GRAPHQL_URL,
    LEETCODE_PROFILE_URL,
    REQUEST_TIMEOUT,
)
from leetboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

SOLVED_QUERY = """
query userProblemsSolved($username: String!) {
    allQuestionsCount {
        difficulty
        count
    }
    matchedUser(username: $username) {
        problemsSolvedBeatsStats {
            difficulty
            percentage
        }
        submitStatsGlobal {
            acSubmissionNum {
                difficulty
                count
            }
        }
    }
}
"""


class SolvedStats(NamedTuple):
    """
    Solved-problem counts as reported by LeetCode.

    Each count is reported independently; easy + medium + hard is not
    guaranteed to equal total.
    """
    total_solved: int = 0
    easy_solved: int = 0
    medium_solved: int = 0
    hard_solved: int = 0


ZERO_STATS = SolvedStats()


def extract_solved_stats(payload) -> Optional[SolvedStats]:
    """
    Map a GraphQL response body to SolvedStats.

    Args:
        payload: Decoded JSON response

    Returns:
        SolvedStats, or None if the user is unknown or any difficulty bucket
        is missing or invalid
    """
    if not isinstance(payload, dict):
        return None
    if payload.get("errors"):
        logger.warning(f"LeetCode API returned errors: {payload['errors']}")
        return None

    data = payload.get("data")
    user = data.get("matchedUser") if isinstance(data, dict) else None
    if not user:
        return None

    try:
        submissions = user["submitStatsGlobal"]["acSubmissionNum"]
        counts = {item["difficulty"]: item["count"] for item in submissions}
    except (KeyError, TypeError) as e:
        logger.warning(f"Malformed acSubmissionNum in response: {e!r}")
        return None

    stats = {}
    for difficulty, field in DIFFICULTY_BUCKETS.items():
        count = counts.get(difficulty)
        # bool is an int subclass; reject it along with negatives
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            logger.warning(f"Missing or invalid '{difficulty}' bucket: {count!r}")
            return None
        stats[field] = count

    return SolvedStats(**stats)


def resolve_stats(username: str, session: Optional[requests.Session] = None) -> Optional[SolvedStats]:
    """
    Resolve solved-problem counts for one LeetCode user.

    Exactly one request is made per call.

    Args:
        username: LeetCode username
        session: Optional requests session (a fresh one is used if omitted)

    Returns:
        SolvedStats on success, None if the stats could not be resolved
    """
    if not username or not username.strip():
        logger.warning("Skipping stats lookup for blank username")
        return None

    http = session or requests.Session()
    try:
        response = http.post(
            LEETCODE_GRAPHQL_URL,
            json={"query": SOLVED_QUERY, "variables": {"username": username}},
            headers={
                "Content-Type": "application/json",
                "Referer": LEETCODE_PROFILE_URL.format(username=username),
            },
            timeout=REQUEST_TIMEOUT,
        )
        if not response.ok:
            logger.warning(f"LeetCode API request for {username} failed with status: {response.status_code}")
            return None
        payload = response.json()
    except requests.RequestException as e:
        logger.warning(f"Error fetching LeetCode stats for {username}: {e}")
        return None
    except ValueError as e:
        logger.warning(f"Invalid JSON in LeetCode response for {username}: {e}")
        return None
    finally:
        if session is None:
            http.close()

    stats = extract_solved_stats(payload)
    if stats is None:
        logger.warning(f"Could not find user: {username}")
    return stats
