"""
Leaderboard Ranking Engine

Assigns competition ranks by total_solved. Students with equal totals share
a rank, and the next distinct total takes its 1-based position in the
ordering, so totals [50, 50, 40] rank [1, 1, 3].

The rank is stored on each record and is never touched by the display sort.
"""

import numpy as np
import pandas as pd

from leetboard.config import STUDENT_COLUMNS


def competition_ranks(scores) -> np.ndarray:
    """
    Compute ranks for scores already ordered from highest to lowest.

    A score equal to its predecessor inherits the predecessor's rank;
    any other score is ranked by its position.
    """
    scores = np.asarray(scores)
    if scores.size == 0:
        return np.array([], dtype=np.int64)

    positions = np.arange(1, scores.size + 1, dtype=np.int64)
    starts_new_rank = np.empty(scores.size, dtype=bool)
    starts_new_rank[0] = True
    starts_new_rank[1:] = scores[1:] != scores[:-1]
    return np.maximum.accumulate(np.where(starts_new_rank, positions, 0))


def rank_students(df: pd.DataFrame) -> pd.DataFrame:
    """
    Rank reconciled students by total_solved, highest first.

    Args:
        df: Reconciled students (every StudentRecord column except rank)

    Returns:
        New DataFrame ordered by total_solved descending with a 'rank' column.
        Equal totals keep their upload order.
    """
    ranked = df.sort_values('total_solved', ascending=False, kind='stable').reset_index(drop=True)
    ranked['rank'] = competition_ranks(ranked['total_solved'].to_numpy())
    return ranked[STUDENT_COLUMNS]
