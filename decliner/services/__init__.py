"""Service layer exports."""

from decliner.services.batch import BatchDecliner, BatchResult
from decliner.services.records import (
    clean_file,
    parse_inline,
    read_rows,
    read_source,
    write_paradigm_file,
)

__all__ = [
    "BatchDecliner",
    "BatchResult",
    "clean_file",
    "parse_inline",
    "read_rows",
    "read_source",
    "write_paradigm_file",
]
