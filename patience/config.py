"""
Environment configuration.

PATIENCE_SEED       Default shuffle seed; unset means a fresh random deal
PATIENCE_LOG_LEVEL  Log level for the CLI (default WARNING)
"""

import os

_seed = os.getenv("PATIENCE_SEED")
PATIENCE_SEED = int(_seed) if _seed else None
PATIENCE_LOG_LEVEL = os.getenv("PATIENCE_LOG_LEVEL", "WARNING").upper()
