from __future__ import annotations

import re

# Accented vowel -> the same vowel without its accent. Breathing and iota
# subscript survive.
_ACCENT_RULES: tuple[tuple[str, str], ...] = (
    ("[άὰᾶ]", "α"),
    ("[ᾴᾲᾷ]", "ᾳ"),
    ("[ἄἂἆ]", "ἀ"),
    ("[ᾄᾂᾆ]", "ᾀ"),
    ("[ἅἃἇ]", "ἁ"),
    ("[ᾅᾃᾇ]", "ᾁ"),
    ("[έὲ]", "ε"),
    ("[ἔἒ]", "ἐ"),
    ("[ἕἓ]", "ἑ"),
    ("[ήὴῆ]", "η"),
    ("[ῄῂῇ]", "ῃ"),
    ("[ἤἢἦ]", "ἠ"),
    ("[ᾔᾒᾖ]", "ᾐ"),
    ("[ἥἣἧ]", "ἡ"),
    ("[ᾕᾓᾗ]", "ᾑ"),
    ("[ίὶῖ]", "ι"),
    ("[ἴἲἶ]", "ἰ"),
    ("[ἵἳἷ]", "ἱ"),
    ("[όὸ]", "ο"),
    ("[ὄὂ]", "ὀ"),
    ("[ὅὃ]", "ὁ"),
    ("[ώὼῶ]", "ω"),
    ("[ῴῲῷ]", "ῳ"),
    ("[ὤὢὦ]", "ὠ"),
    ("[ᾤᾢᾦ]", "ᾠ"),
    ("[ὥὣὧ]", "ὡ"),
    ("[ᾥᾣᾧ]", "ᾡ"),
    ("[ύὺῦ]", "υ"),
    ("[ὔὒὖ]", "ὐ"),
    ("[ὕὓὗ]", "ὑ"),
)
_ACCENT_PATTERNS = tuple(
    (re.compile(pattern), replacement) for pattern, replacement in _ACCENT_RULES
)
_ACCENTED_RE = re.compile(r"[άἄἅὰἂἃᾴᾲᾷᾶέὲἔἒἕἓήἤἥὴἢἣῆῄῂῇίἴἵὶἲἳόὄὅὸὂὃώὤὥὼὣὢῶῴῲῷύὔὕὺὒὓ]")
_SPACE_BEFORE_COMMA_RE = re.compile(r" ,")


def clean_line(line: str) -> str:
    cleaned = line
    for pattern, replacement in _ACCENT_PATTERNS:
        cleaned = pattern.sub(replacement, cleaned)
    return _SPACE_BEFORE_COMMA_RE.sub(",", cleaned)


def clean_text(text: str) -> str:
    """Clean every line of ``text``; the result is newline-terminated per line."""
    return "".join(f"{clean_line(line)}\n" for line in text.splitlines())


def contains_accents(text: str) -> bool:
    return _ACCENTED_RE.search(text) is not None
