from __future__ import annotations

import csv
from collections.abc import Iterable, Sequence
from typing import TextIO

from decliner.domain.models import NounRecord


def format_forms(forms: Sequence[str]) -> str:
    return ", ".join(forms)


def format_record(record: NounRecord, with_article: bool = False) -> str:
    forms = record.forms_with_article if with_article else record.forms
    if forms is None:
        raise ValueError(f"Noun {record.nominative_singular} has not been declined yet")
    return format_forms(forms)


def write_paradigm_rows(output: TextIO, records: Iterable[NounRecord]) -> int:
    """Write two rows per noun: bare forms, then forms with the article."""
    writer = csv.writer(output)
    written = 0
    for record in records:
        if not record.is_built:
            raise ValueError(f"Noun {record.nominative_singular} has not been declined yet")
        writer.writerow(record.forms)
        writer.writerow(record.forms_with_article)
        written += 1
    return written
