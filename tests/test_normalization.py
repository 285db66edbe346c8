from decliner.domain.normalization import clean_line, clean_text, contains_accents


def test_clean_line_strips_accents_and_space_before_comma() -> None:
    assert clean_line("χώρα , χώρας , ἡ") == "χωρα, χωρας, ἡ"


def test_clean_line_keeps_breathing_and_iota_subscript() -> None:
    assert clean_line("ἄνθρωπος") == "ἀνθρωπος"
    assert clean_line("ὅδος") == "ὁδος"
    assert clean_line("ᾷ ᾅ ῇ ῷ") == "ᾳ ᾁ ῃ ῳ"
    assert clean_line("δῶρον") == "δωρον"


def test_clean_text_terminates_every_line() -> None:
    assert clean_text("λόγος\nτιμή") == "λογος\nτιμη\n"


def test_contains_accents_detects_accented_vowels() -> None:
    assert contains_accents("nom,gen,gender\nχώρα,χωρας,ἡ\n")
    assert contains_accents("ῆ")


def test_contains_accents_allows_breathings_and_subscripts() -> None:
    assert not contains_accents("ἀνθρωπος,ἀνθρωπου,ὁ")
    assert not contains_accents("χωρᾳ τῳ")
