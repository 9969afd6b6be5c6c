"""Exceptions raised while turning an uploaded roster into a leaderboard."""


class IngestionError(Exception):
    """Custom exception for ingestion errors"""
    pass


class FormatError(IngestionError):
    """The upload is empty or its header is missing required columns"""
    pass


class FileReadError(IngestionError):
    """The upload could not be read at all"""
    pass


class UploadInProgressError(IngestionError):
    """Raised when a reconciliation pass is already running"""
    pass
