"""
Tests for dashboard display helpers.
"""

import pandas as pd

from leetboard.display import chart_labels, pending_upload, profile_url


class TestProfileUrl:
    """Tests for profile_url function."""

    def test_builds_leetcode_profile_link(self):
        assert profile_url("asharao1") == "https://leetcode.com/asharao1"

    def test_strips_and_quotes_username(self):
        assert profile_url(" a b/c ") == "https://leetcode.com/a%20b%2Fc"


class TestChartLabels:
    """Tests for chart_labels function."""

    def test_duplicate_names_get_distinct_labels(self):
        df = pd.DataFrame({'name': ["Riya Das", "Riya Das"], 'roll_number': ["21CS1001", "21CS1002"]})
        labels = chart_labels(df)
        assert labels == ["Riya Das (21CS1001)", "Riya Das (21CS1002)"]
        assert len(set(labels)) == 2

    def test_empty_frame(self):
        assert chart_labels(pd.DataFrame({'name': [], 'roll_number': []})) == []


class TestPendingUpload:
    """Tests for pending_upload function."""

    def test_new_file_is_pending(self):
        assert pending_upload(None, "file-1") is True

    def test_successfully_ingested_file_is_not_pending(self):
        assert pending_upload("file-1", "file-1") is False

    def test_rejected_file_stays_pending(self):
        # A rejected upload never records its id, so the same file is retried
        processed_id = None
        assert pending_upload(processed_id, "file-1") is True
        assert pending_upload(processed_id, "file-1") is True

    def test_different_file_is_pending(self):
        assert pending_upload("file-1", "file-2") is True

    def test_no_file_selected(self):
        assert pending_upload("file-1", None) is False
