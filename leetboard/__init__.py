"""
LeetBoard - Core Package

This package contains the core modules for:
- Roster parsing and LeetCode stats resolution (leetboard.ingestion)
- Reconciliation, ranking, sorting and pagination (leetboard.ranking)
- Shared configuration and utilities
"""

from leetboard.config import *
