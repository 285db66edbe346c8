from pathlib import Path

import pytest

from decliner.domain.models import RecordRow
from decliner.errors import AccentedInput, MalformedRecord, MissingFields, TooManyFields
from decliner.services.records import clean_file, parse_inline, read_rows, read_source


def test_parse_inline_strips_fields() -> None:
    assert parse_inline("χωρα, χωρας, ἡ\n") == RecordRow("χωρα", "χωρας", "ἡ")


def test_parse_inline_rejects_extra_parts() -> None:
    with pytest.raises(TooManyFields) as excinfo:
        parse_inline("χώρα, χώρας, ἡ, extra")
    assert excinfo.value.count == 4


def test_parse_inline_rejects_missing_parts() -> None:
    with pytest.raises(MissingFields):
        parse_inline("χωρα, χωρας")


def test_read_rows_without_header_uses_positional_columns() -> None:
    rows = read_rows("χωρα, χωρας, ἡ\nλογος,λογου,ὁ\n", has_header=False)
    assert rows == [RecordRow("χωρα", "χωρας", "ἡ"), RecordRow("λογος", "λογου", "ὁ")]


def test_read_rows_with_header_maps_named_columns() -> None:
    text = "gender, nom, gen\nτο, δωρον, δωρου\n\nἡ, τιμη, τιμης\n"
    rows = read_rows(text, has_header=True)
    assert rows == [RecordRow("δωρον", "δωρου", "το"), RecordRow("τιμη", "τιμης", "ἡ")]


def test_read_rows_rejects_header_without_required_column() -> None:
    with pytest.raises(MalformedRecord) as excinfo:
        read_rows("nom,genitive,gender\nχωρα,χωρας,ἡ\n", has_header=True)
    assert "gen" in excinfo.value.reason


def test_read_rows_rejects_short_and_long_rows() -> None:
    with pytest.raises(MalformedRecord) as excinfo:
        read_rows("χωρα,χωρας,ἡ\nλογος,λογου\n", has_header=False)
    assert excinfo.value.line == 2
    with pytest.raises(MalformedRecord):
        read_rows("χωρα,χωρας,ἡ,extra\n", has_header=False)


def test_read_source_refuses_accented_file(tmp_path: Path) -> None:
    path = tmp_path / "nouns.csv"
    path.write_text("nom,gen,gender\nχώρα,χώρας,ἡ\n", encoding="utf-8")
    with pytest.raises(AccentedInput) as excinfo:
        read_source(path)
    assert "contains accents" in str(excinfo.value)


def test_read_source_returns_clean_contents(tmp_path: Path) -> None:
    path = tmp_path / "nouns.csv"
    path.write_text("nom,gen,gender\nχωρα,χωρας,ἡ\n", encoding="utf-8")
    assert read_source(path) == "nom,gen,gender\nχωρα,χωρας,ἡ\n"


def test_clean_file_writes_accent_free_copy(tmp_path: Path) -> None:
    source = tmp_path / "accented.csv"
    destination = tmp_path / "cleaned.csv"
    source.write_text("χώρα , χώρας , ἡ\n", encoding="utf-8")
    clean_file(source, destination)
    assert destination.read_text(encoding="utf-8") == "χωρα, χωρας, ἡ\n"
