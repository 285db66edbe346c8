from __future__ import annotations

from decliner.domain.models import DeclensionClass
from decliner.errors import StemTooShort

# Classes whose genitive ending is three characters long (-εως, -ους).
_LONG_GENITIVE_CLASSES: frozenset[DeclensionClass] = frozenset(
    {DeclensionClass.POLIS, DeclensionClass.GENOS}
)


def genitive_ending_length(declension_class: DeclensionClass) -> int:
    return 3 if declension_class in _LONG_GENITIVE_CLASSES else 2


def extract_stem(genitive: str, declension_class: DeclensionClass) -> str:
    required = genitive_ending_length(declension_class)
    if len(genitive) < required:
        raise StemTooShort(genitive, required)
    return genitive[:-required]
