from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from decliner.domain.classification import get_gender
from decliner.domain.models import NounRecord, RecordRow
from decliner.domain.paradigm import ParadigmBuilder
from decliner.errors import StemTooShort, UnrecognizedGender, UnrecognizedPattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BatchResult:
    records: tuple[NounRecord, ...]
    skipped: int


class BatchDecliner:
    """Declines many rows, skipping the ones that cannot be classified."""

    def __init__(self, builder: ParadigmBuilder | None = None) -> None:
        self._builder = builder or ParadigmBuilder()

    def decline_rows(self, rows: Iterable[RecordRow]) -> BatchResult:
        records: list[NounRecord] = []
        skipped = 0
        for row in rows:
            record = self._decline_row(row)
            if record is None:
                skipped += 1
                continue
            records.append(record)
        logger.info("Declined %d noun(s), skipped %d", len(records), skipped)
        return BatchResult(records=tuple(records), skipped=skipped)

    def _decline_row(self, row: RecordRow) -> NounRecord | None:
        try:
            gender = get_gender(row.gender_token)
        except UnrecognizedGender as exc:
            logger.warning("Skipping %s: %s", row.nominative, exc)
            return None
        try:
            record = self._builder.new_record(row.nominative, row.genitive, gender)
        except (UnrecognizedPattern, StemTooShort) as exc:
            logger.warning("Skipping %s: %s", row.nominative, exc)
            return None
        return self._builder.build(record)
