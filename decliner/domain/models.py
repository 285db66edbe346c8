from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from decliner.constants import SLOT_COUNT


class DeclensionClass(Enum):
    """Noun paradigms, each named after its exemplar noun."""

    CHORA = "χωρα"
    TIME = "τιμη"
    MOUSA = "μουσα"
    KRITES = "κριτης"
    NEANIAS = "νεανιας"
    LOGOS = "λογος"
    DORON = "δωρον"
    PHULAX = "φυλαξ"
    CHEIMON = "χειμων"
    GERON = "γερων"
    GIGAS = "γιγας"
    BASILEUS = "βασιλευς"
    GENOS = "γενος"
    SOMA = "σωμα"
    POLIS = "πολις"
    ICHTHUS = "ιχθυς"

    @property
    def endings(self) -> tuple[str, ...]:
        return DECLENSION_ENDINGS[self]


class Gender(Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"

    @property
    def articles(self) -> tuple[str, ...]:
        return ARTICLES[self]


_THIRD_DECLENSION_CONSONANT = ("", "α", "ος", "ι", "ες", "ας", "ων", "σι")

DECLENSION_ENDINGS: dict[DeclensionClass, tuple[str, ...]] = {
    DeclensionClass.CHORA: ("α", "αν", "ας", "ᾳ", "αι", "ας", "ων", "αις"),
    DeclensionClass.TIME: ("η", "ην", "ης", "ῃ", "αι", "ας", "ων", "αις"),
    DeclensionClass.MOUSA: ("α", "αν", "ης", "ῃ", "αι", "ας", "ων", "αις"),
    DeclensionClass.KRITES: ("ης", "ην", "ου", "ῃ", "αι", "ας", "ων", "αις"),
    DeclensionClass.NEANIAS: ("ας", "αν", "ου", "ᾳ", "αι", "ας", "ων", "αις"),
    DeclensionClass.LOGOS: ("ος", "ον", "ου", "ῳ", "οι", "ους", "ων", "οις"),
    DeclensionClass.DORON: ("ον", "ον", "ου", "ῳ", "α", "α", "ων", "οις"),
    DeclensionClass.PHULAX: _THIRD_DECLENSION_CONSONANT,
    DeclensionClass.CHEIMON: _THIRD_DECLENSION_CONSONANT,
    DeclensionClass.GERON: _THIRD_DECLENSION_CONSONANT,
    DeclensionClass.GIGAS: _THIRD_DECLENSION_CONSONANT,
    DeclensionClass.BASILEUS: ("υς", "α", "ως", "ι", "ις", "ας", "ων", "υσι"),
    DeclensionClass.GENOS: ("", "", "ους", "ει", "η", "η", "ων", "εσι"),
    DeclensionClass.SOMA: ("", "", "ος", "ι", "α", "α", "ων", "σι"),
    DeclensionClass.POLIS: ("ις", "ιν", "εως", "ει", "εις", "εις", "εων", "εσι"),
    DeclensionClass.ICHTHUS: ("ς", "ν", "ος", "ι", "εις", "εις", "ων", "σι"),
}

ARTICLES: dict[Gender, tuple[str, ...]] = {
    Gender.MASCULINE: ("ὁ", "τον", "του", "τῳ", "οἱ", "τους", "των", "τοις"),
    Gender.FEMININE: ("ἡ", "την", "της", "τῃ", "αἱ", "τας", "των", "ταις"),
    Gender.NEUTER: ("το", "το", "του", "τῳ", "τα", "τα", "των", "τοις"),
}


def _check_tables() -> None:
    for table in (DECLENSION_ENDINGS, ARTICLES):
        for key, row in table.items():
            if len(row) != SLOT_COUNT:
                raise RuntimeError(f"{key} has {len(row)} slots, expected {SLOT_COUNT}")
    missing = set(DeclensionClass) - DECLENSION_ENDINGS.keys()
    if missing:
        raise RuntimeError(f"No endings defined for {sorted(c.name for c in missing)}")


_check_tables()


@dataclass(frozen=True, slots=True)
class RecordRow:
    """Raw input fields for one noun, before classification."""

    nominative: str
    genitive: str
    gender_token: str


@dataclass(frozen=True, slots=True)
class NounRecord:
    nominative_singular: str
    genitive_singular: str
    gender: Gender
    declension_class: DeclensionClass
    stem: str
    forms: tuple[str, ...] | None = None
    forms_with_article: tuple[str, ...] | None = None

    @property
    def is_built(self) -> bool:
        return self.forms is not None and self.forms_with_article is not None
