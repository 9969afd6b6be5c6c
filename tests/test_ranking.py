"""
Tests for competition ranking.
"""

import pandas as pd
import pytest

from leetboard.config import STUDENT_COLUMNS
from leetboard.ranking.engine import competition_ranks, rank_students


def make_students(totals):
    return pd.DataFrame([
        {
            'id': i,
            'roll_number': f"21CS{1000 + i}",
            'name': f"Student {i}",
            'leetcode_username': f"user{i}",
            'total_solved': total,
            'easy_solved': 0,
            'medium_solved': 0,
            'hard_solved': 0,
        }
        for i, total in enumerate(totals, start=1)
    ])


class TestCompetitionRanks:
    """Tests for competition_ranks function."""

    @pytest.mark.parametrize("scores, expected", [
        ([50, 50, 40], [1, 1, 3]),
        ([90, 90, 80, 70, 70], [1, 1, 3, 4, 4]),
        ([100, 90, 80], [1, 2, 3]),
        ([7, 7, 7], [1, 1, 1]),
        ([5], [1]),
        ([], []),
    ])
    def test_ranks(self, scores, expected):
        assert competition_ranks(scores).tolist() == expected


class TestRankStudents:
    """Tests for rank_students function."""

    def test_orders_by_total_descending(self):
        ranked = rank_students(make_students([10, 30, 20]))
        assert ranked['total_solved'].tolist() == [30, 20, 10]
        assert ranked['rank'].tolist() == [1, 2, 3]

    def test_ties_share_rank_regardless_of_input_order(self):
        for totals in ([120, 120, 100], [100, 120, 120], [120, 100, 120]):
            ranked = rank_students(make_students(totals))
            assert ranked['rank'].tolist() == [1, 1, 3]

    def test_ties_keep_upload_order(self):
        ranked = rank_students(make_students([100, 120, 120]))
        assert ranked['id'].tolist() == [2, 3, 1]

    def test_has_all_student_columns(self):
        ranked = rank_students(make_students([1, 2]))
        assert list(ranked.columns) == STUDENT_COLUMNS

    def test_does_not_modify_input(self):
        students = make_students([10, 30])
        rank_students(students)
        assert 'rank' not in students.columns
        assert students['total_solved'].tolist() == [10, 30]

    def test_zero_stats_rank_last(self):
        ranked = rank_students(make_students([0, 15, 3]))
        assert ranked.iloc[-1]['total_solved'] == 0
        assert ranked.iloc[-1]['rank'] == 3


class TestRankingProperties:
    """Property-style checks over many score sequences."""

    def test_rank_is_position_of_first_equal_score(self):
        totals = [40, 10, 40, 25, 10, 10, 55, 0, 25]
        ranked = rank_students(make_students(totals))
        scores = ranked['total_solved'].tolist()
        for position, (score, rank) in enumerate(zip(scores, ranked['rank']), start=1):
            assert rank == scores.index(score) + 1
            assert rank <= position

    def test_ranks_non_decreasing(self):
        ranked = rank_students(make_students([3, 9, 9, 1, 4, 4, 4, 8]))
        ranks = ranked['rank'].tolist()
        assert ranks == sorted(ranks)
