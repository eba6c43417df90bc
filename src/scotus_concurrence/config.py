"""Configuration constants for the SCOTUS concurrence tools."""

from pathlib import Path

# SCDB "justice centered" CSV column names
CASE_ID_FIELD = "caseId"
PERIOD_FIELD = "term"
MEMBER_ID_FIELD = "justiceName"
OUTCOME_FIELD = "majority"

DEFAULT_OUTPUT_PATH = Path("data") / "scdb-votes.json"

SOURCE_LABEL = "Supreme Court Database (SCDB) - https://scdb.la.psu.edu/"

DEFAULT_START_PERIOD = 2005  # initial window start for the interactive view
DEFAULT_MIN_SAMPLE = 1  # shared cases a pair needs to count toward the color scale
