from __future__ import annotations

from dataclasses import replace

from decliner.domain.classification import classify
from decliner.domain.models import DeclensionClass, Gender, NounRecord
from decliner.domain.phonology import rewrite
from decliner.domain.stems import extract_stem

# Slots whose compositional form is replaced by the nominative as supplied.
IRREGULAR_SLOTS: dict[DeclensionClass, tuple[int, ...]] = {
    DeclensionClass.PHULAX: (0,),
    DeclensionClass.CHEIMON: (0,),
    DeclensionClass.GERON: (0,),
    DeclensionClass.GIGAS: (0,),
    DeclensionClass.SOMA: (0, 1),
    DeclensionClass.GENOS: (0, 1),
}


class ParadigmBuilder:
    def new_record(self, nominative: str, genitive: str, gender: Gender) -> NounRecord:
        nominative = nominative.strip()
        genitive = genitive.strip()
        declension_class = classify(nominative, genitive)
        return NounRecord(
            nominative_singular=nominative,
            genitive_singular=genitive,
            gender=gender,
            declension_class=declension_class,
            stem=extract_stem(genitive, declension_class),
        )

    def build(self, record: NounRecord) -> NounRecord:
        declension_class = record.declension_class
        forms = [
            rewrite(declension_class, record.stem + ending)
            for ending in declension_class.endings
        ]
        for slot in IRREGULAR_SLOTS.get(declension_class, ()):
            forms[slot] = record.nominative_singular
        forms_with_article = tuple(
            f"{article} {form}" for article, form in zip(record.gender.articles, forms)
        )
        return replace(record, forms=tuple(forms), forms_with_article=forms_with_article)

    def decline(self, nominative: str, genitive: str, gender: Gender) -> NounRecord:
        return self.build(self.new_record(nominative, genitive, gender))
