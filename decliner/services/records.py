"""Reading noun records from inline strings and files, and writing results."""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Iterable
from pathlib import Path

from decliner.constants import INLINE_FIELD_COUNT, RECORD_FIELDNAMES
from decliner.domain.models import NounRecord, RecordRow
from decliner.domain.normalization import clean_text, contains_accents
from decliner.errors import AccentedInput, MalformedRecord, MissingFields, TooManyFields
from decliner.utils.formatting import write_paradigm_rows

logger = logging.getLogger(__name__)


def parse_inline(text: str) -> RecordRow:
    parts = text.split(",")
    if len(parts) > INLINE_FIELD_COUNT:
        raise TooManyFields(len(parts))
    if len(parts) < INLINE_FIELD_COUNT:
        raise MissingFields(len(parts))
    nominative, genitive, gender_token = (part.strip() for part in parts)
    return RecordRow(nominative=nominative, genitive=genitive, gender_token=gender_token)


def read_rows(text: str, *, has_header: bool) -> list[RecordRow]:
    """Parse comma-separated rows of nominative, genitive and gender.

    A header row, when present, must name the ``nom``, ``gen`` and ``gender``
    columns. Without one the columns are taken in that order.
    """
    reader = csv.DictReader(
        io.StringIO(text),
        fieldnames=None if has_header else list(RECORD_FIELDNAMES),
        skipinitialspace=True,
    )
    if has_header:
        reader.fieldnames = [name.strip() for name in reader.fieldnames or ()]
        missing = [name for name in RECORD_FIELDNAMES if name not in reader.fieldnames]
        if missing:
            raise MalformedRecord(1, f"header is missing column(s): {', '.join(missing)}")

    rows: list[RecordRow] = []
    for row in reader:
        values = [row.get(name) for name in RECORD_FIELDNAMES]
        if None in row or any(value is None for value in values):
            raise MalformedRecord(
                reader.line_num, f"expected {len(RECORD_FIELDNAMES)} fields"
            )
        nominative, genitive, gender_token = (value.strip() for value in values)
        rows.append(
            RecordRow(nominative=nominative, genitive=genitive, gender_token=gender_token)
        )
    return rows


def read_source(path: str | Path) -> str:
    """Read an input file, refusing it if any vowel still carries an accent."""
    contents = Path(path).read_text(encoding="utf-8")
    if contains_accents(contents):
        raise AccentedInput(str(path))
    return contents


def clean_file(source: str | Path, destination: str | Path) -> None:
    contents = Path(source).read_text(encoding="utf-8")
    Path(destination).write_text(clean_text(contents), encoding="utf-8")
    logger.info("Wrote accent-free copy of %s to %s", source, destination)


def write_paradigm_file(path: str | Path, records: Iterable[NounRecord]) -> int:
    with Path(path).open("w", encoding="utf-8", newline="") as output:
        written = write_paradigm_rows(output, records)
    logger.info("Wrote %d paradigm(s) to %s", written, path)
    return written
