"""
Shared utilities for LeetBoard.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import logging
import shutil
import tempfile
from pathlib import Path

from leetboard.config import MAX_INPUT_SIZE
from leetboard.ingestion.errors import FileReadError


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# --- File Operations ---
def decode_upload(data: bytes) -> str:
    """
    Decode raw upload bytes into text.

    A UTF-8 byte order mark is dropped so it never ends up in the first header name.

    Raises:
        FileReadError: If the bytes are missing or are not valid UTF-8
    """
    if data is None:
        raise FileReadError("No file content was received.")
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise FileReadError(f"There was an issue reading the file: {e}") from e


def read_upload(path: Path) -> str:
    """
    Read a roster file from disk.

    Raises:
        FileReadError: If the file cannot be opened or decoded
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise FileReadError(f"Could not read {path}: {e}") from e
    return decode_upload(data)


def atomic_write_csv(df, path: Path, **kwargs) -> None:
    """
    Write a DataFrame to CSV atomically using a temporary file.

    This prevents data corruption if the write is interrupted.

    Args:
        df: pandas DataFrame to write
        path: Destination path for the CSV file
        **kwargs: Additional arguments to pass to df.to_csv()
    """
    logger = setup_logging(__name__)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            delete=False,
            suffix='.csv',
            dir=path.parent  # Same filesystem for atomic move
        ) as tmp:
            tmp_path = Path(tmp.name)
        df.to_csv(tmp_path, **kwargs)

        shutil.move(str(tmp_path), str(path))
        logger.debug(f"Atomically wrote {len(df)} rows to {path}")

    except Exception:
        if 'tmp_path' in locals() and tmp_path.exists():
            tmp_path.unlink()
        raise


# --- Validation ---
def validate_input_size(text: str, max_size: int = MAX_INPUT_SIZE) -> None:
    """
    Validate that input text does not exceed maximum size.

    Args:
        text: Input text to validate
        max_size: Maximum allowed size in bytes

    Raises:
        ValueError: If input exceeds max_size
    """
    if len(text) > max_size:
        raise ValueError(
            f"Input too large: {len(text):,} bytes. "
            f"Maximum allowed: {max_size:,} bytes"
        )


__all__ = [
    # Logging
    'setup_logging',
    # File operations
    'decode_upload',
    'read_upload',
    'atomic_write_csv',
    # Validation
    'validate_input_size',
]
