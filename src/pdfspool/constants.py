"""Centralized constants for pdfspool."""

# Printer backends selectable with --backend
BACKEND_NAMES = ("auto", "cups", "sumatra", "mock")

# Environment variables
ENV_BACKEND = "PDFSPOOL_BACKEND"
ENV_SUMATRA_PATH = "PDFSPOOL_SUMATRA_PATH"

# Duplex and disposition are fixed for every job
DUPLEX_LONG_EDGE = "two-sided-long-edge"
JOB_HOLD_NONE = "no-hold"

# Unit conversion factors to PDF points (72 points per inch)
UNIT_TO_POINTS = {
    "pt": 1.0,
    "in": 72.0,
    "mm": 72.0 / 25.4,
    "cm": 72.0 / 2.54,
}
