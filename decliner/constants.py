from __future__ import annotations

SLOT_COUNT = 8

# Article tokens accepted as gender markers, singular and plural.
GENDER_TOKENS: dict[str, str] = {
    "ὁ": "masculine",
    "οἱ": "masculine",
    "ἡ": "feminine",
    "αἱ": "feminine",
    "το": "neuter",
    "τα": "neuter",
}

RECORD_FIELDNAMES: tuple[str, str, str] = ("nom", "gen", "gender")

INLINE_FIELD_COUNT = 3

DEFAULT_OUTFILE = "output.csv"
DEFAULT_CLEANED_FILE = "temp-cleaned.txt"
DEFAULT_LOG_LEVEL = "WARNING"
