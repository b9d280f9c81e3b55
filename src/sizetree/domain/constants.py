from __future__ import annotations

"""
Domain Constants.

Reference thresholds of the disk-usage analysis and configuration
versioning.
"""

CURRENT_CONFIG_VERSION = "1.0.0"

# Directories at or below this total are summed by the bounded-sum query
DEFAULT_SIZE_THRESHOLD = 100_000

DISK_CAPACITY = 70_000_000
REQUIRED_FREE_SPACE = 30_000_000
