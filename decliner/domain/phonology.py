from __future__ import annotations

from decliner.domain.models import DeclensionClass

# Literal replacements applied in order to stem + ending. Each replaces every
# occurrence of its pattern once per call.
SOUND_CHANGES: dict[DeclensionClass, tuple[tuple[str, str], ...]] = {
    DeclensionClass.PHULAX: (
        ("κσ", "ξ"),
        ("κτσ", "ξ"),
        ("δσ", "σ"),
        ("τσ", "σ"),
    ),
    DeclensionClass.CHEIMON: (("νσ", "σ"),),
    DeclensionClass.GERON: (("οντσι", "ουσι"),),
    DeclensionClass.GIGAS: (("αντσι", "ασι"),),
    DeclensionClass.SOMA: (("ατσι", "ασι"),),
}


def rewrite(declension_class: DeclensionClass, candidate: str) -> str:
    for old, new in SOUND_CHANGES.get(declension_class, ()):
        candidate = candidate.replace(old, new)
    return candidate
