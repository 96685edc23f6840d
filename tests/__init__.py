"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime
from pathlib import Path

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
CUSTOM_CONFIG_FILE = "custom_behavior.config"

# Common timestamps
TEST_PI_DAY_NOON = datetime(2025, 3, 14, 12)
TEST_PI_DAY_DAY_OF_YEAR: int = 73

DECIMAL_DAY_TOLERANCE: float = 1e-9
"""``float``: allowed difference between day fractions after a round trip."""
