"""Map a nominative/genitive pair to its declension class.

Rules are tried top to bottom and the first match wins. A later, broader
suffix can cover an earlier one (every ``-νος`` also ends in ``-ος``), so table
order decides precedence and must not be re-sorted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from decliner.constants import GENDER_TOKENS
from decliner.domain.models import DeclensionClass, Gender
from decliner.errors import UnrecognizedGender, UnrecognizedPattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SuffixRule:
    nominative_suffix: str
    genitive_suffix: str
    declension_class: DeclensionClass

    def matches(self, nominative: str, genitive: str) -> bool:
        return nominative.endswith(self.nominative_suffix) and genitive.endswith(
            self.genitive_suffix
        )


CLASSIFICATION_RULES: tuple[SuffixRule, ...] = (
    # First declension
    SuffixRule("η", "ης", DeclensionClass.TIME),
    SuffixRule("α", "ας", DeclensionClass.CHORA),
    SuffixRule("α", "ης", DeclensionClass.MOUSA),
    SuffixRule("ης", "ου", DeclensionClass.KRITES),
    SuffixRule("ας", "ου", DeclensionClass.NEANIAS),
    # Second declension
    SuffixRule("ος", "ου", DeclensionClass.LOGOS),
    SuffixRule("ον", "ου", DeclensionClass.DORON),
    SuffixRule("οι", "ων", DeclensionClass.LOGOS),
    # Third declension
    SuffixRule("ων", "οντος", DeclensionClass.GERON),
    SuffixRule("ας", "αντος", DeclensionClass.GIGAS),
    SuffixRule("α", "ατος", DeclensionClass.SOMA),
    SuffixRule("τα", "ατων", DeclensionClass.SOMA),
    SuffixRule("α", "ων", DeclensionClass.DORON),
    SuffixRule("ος", "ους", DeclensionClass.GENOS),
    SuffixRule("ευς", "εως", DeclensionClass.BASILEUS),
    SuffixRule("ις", "εως", DeclensionClass.POLIS),
    SuffixRule("υς", "υος", DeclensionClass.ICHTHUS),
    # An empty nominative suffix matches any nominative.
    SuffixRule("", "νος", DeclensionClass.CHEIMON),
    SuffixRule("", "ος", DeclensionClass.PHULAX),
)


def classify(nominative: str, genitive: str) -> DeclensionClass:
    nominative = nominative.strip()
    genitive = genitive.strip()
    for rule in CLASSIFICATION_RULES:
        if rule.matches(nominative, genitive):
            logger.debug(
                "Classified %s, %s as %s (-%s, -%s)",
                nominative,
                genitive,
                rule.declension_class.name,
                rule.nominative_suffix,
                rule.genitive_suffix,
            )
            return rule.declension_class
    raise UnrecognizedPattern(nominative, genitive)


def get_gender(token: str) -> Gender:
    """Decode an article token (ὁ, ἡ, το or their plurals) into a gender."""
    value = GENDER_TOKENS.get(token.strip())
    if value is None:
        raise UnrecognizedGender(token)
    return Gender(value)
