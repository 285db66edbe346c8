import pytest

from decliner.domain.classification import CLASSIFICATION_RULES, classify, get_gender
from decliner.domain.models import DeclensionClass, Gender
from decliner.errors import UnrecognizedGender, UnrecognizedPattern

_EXAMPLES = (
    ("τιμη", "τιμης", DeclensionClass.TIME),
    ("χωρα", "χωρας", DeclensionClass.CHORA),
    ("μουσα", "μουσης", DeclensionClass.MOUSA),
    ("κριτης", "κριτου", DeclensionClass.KRITES),
    ("νεανιας", "νεανιου", DeclensionClass.NEANIAS),
    ("λογος", "λογου", DeclensionClass.LOGOS),
    ("δωρον", "δωρου", DeclensionClass.DORON),
    ("λογοι", "λογων", DeclensionClass.LOGOS),
    ("γερων", "γεροντος", DeclensionClass.GERON),
    ("γιγας", "γιγαντος", DeclensionClass.GIGAS),
    ("σωμα", "σωματος", DeclensionClass.SOMA),
    ("σωματα", "σωματων", DeclensionClass.SOMA),
    ("δωρα", "δωρων", DeclensionClass.DORON),
    ("γενος", "γενους", DeclensionClass.GENOS),
    ("βασιλευς", "βασιλεως", DeclensionClass.BASILEUS),
    ("πολις", "πολεως", DeclensionClass.POLIS),
    ("ιχθυς", "ιχθυος", DeclensionClass.ICHTHUS),
    ("χειμων", "χειμωνος", DeclensionClass.CHEIMON),
    ("φυλαξ", "φυλακος", DeclensionClass.PHULAX),
)


def test_rule_table_has_nineteen_rules_in_order() -> None:
    assert len(CLASSIFICATION_RULES) == 19
    assert [rule.declension_class for rule in CLASSIFICATION_RULES] == [
        expected for _, _, expected in _EXAMPLES
    ]


def test_classify_maps_each_rule_example() -> None:
    for nominative, genitive, expected in _EXAMPLES:
        assert classify(nominative, genitive) is expected, (nominative, genitive)


def test_classify_prefers_nasal_stem_over_generic_genitive() -> None:
    assert classify("δαιμων", "δαιμονος") is DeclensionClass.CHEIMON
    assert classify("ελπις", "ελπιδος") is DeclensionClass.PHULAX


def test_classify_uses_first_matching_rule() -> None:
    # -τα/-ατων also satisfies the later -α/-ων rule.
    assert classify("ονοματα", "ονοματων") is DeclensionClass.SOMA


def test_classify_strips_surrounding_whitespace() -> None:
    assert classify(" χωρα ", "χωρας\n") is DeclensionClass.CHORA


def test_classify_rejects_unknown_pattern() -> None:
    with pytest.raises(UnrecognizedPattern) as excinfo:
        classify("λογος", "λογοι")
    assert excinfo.value.nominative == "λογος"
    assert excinfo.value.genitive == "λογοι"
    assert "[λογος, λογοι]" in str(excinfo.value)


def test_get_gender_decodes_singular_and_plural_articles() -> None:
    assert get_gender("ὁ") is Gender.MASCULINE
    assert get_gender("οἱ") is Gender.MASCULINE
    assert get_gender("ἡ") is Gender.FEMININE
    assert get_gender("αἱ") is Gender.FEMININE
    assert get_gender(" το ") is Gender.NEUTER
    assert get_gender("τα") is Gender.NEUTER


def test_get_gender_rejects_unknown_token() -> None:
    with pytest.raises(UnrecognizedGender) as excinfo:
        get_gender("ξ")
    assert excinfo.value.token == "ξ"
