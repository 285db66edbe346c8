from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from decliner.config import ConfigError, Settings, load_settings
from decliner.domain.classification import get_gender
from decliner.domain.paradigm import ParadigmBuilder
from decliner.errors import DeclinerError
from decliner.logging_setup import configure_logging
from decliner.services import (
    BatchDecliner,
    clean_file,
    parse_inline,
    read_rows,
    read_source,
    write_paradigm_file,
)
from decliner.utils.formatting import format_record

logger = logging.getLogger(__name__)

_DESCRIPTION = """\
Declines Greek nouns, printing to stdout by default.
The noun is produced without the article unless --with-article is given.
With --outfile the output is written as comma-separated rows: each noun is
given first without the article and then with it."""


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decliner",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("infile", nargs="?", help="File to read from.")
    parser.add_argument("-s", "--from-str", help="String to read from.")
    parser.add_argument(
        "-o",
        "--outfile",
        nargs="?",
        const=settings.default_outfile,
        help=f"File to write to (default when given without a value: {settings.default_outfile}).",
    )
    parser.add_argument(
        "-w",
        "--with-article",
        action="store_true",
        help="Print with article.",
    )
    parser.add_argument(
        "--clean",
        action="store_true",
        help=f"Write an accent-free copy of INFILE to {settings.cleaned_file} and exit.",
    )
    return parser


def _run(args: argparse.Namespace, settings: Settings) -> None:
    if args.clean:
        clean_file(args.infile, settings.cleaned_file)
        return

    infile_supplied = args.infile is not None
    source = read_source(args.infile) if infile_supplied else args.from_str

    if args.outfile:
        rows = read_rows(source, has_header=infile_supplied)
        result = BatchDecliner().decline_rows(rows)
        write_paradigm_file(args.outfile, result.records)
        return

    row = parse_inline(source)
    record = ParadigmBuilder().decline(row.nominative, row.genitive, get_gender(row.gender_token))
    print(format_record(record, with_article=args.with_article))


def main(argv: Sequence[str] | None = None) -> None:
    try:
        settings = load_settings()
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc

    parser = build_parser(settings)
    args = parser.parse_args(argv)
    if args.infile is None and args.from_str is None:
        parser.error("one of INFILE or --from-str is required")
    if args.clean and args.infile is None:
        parser.error("--clean requires INFILE")

    configure_logging(settings.log_level)
    logger.debug("Loaded configuration: %s", settings.safe_log_values())

    try:
        _run(args, settings)
    except DeclinerError as exc:
        raise SystemExit(str(exc)) from exc
    except OSError as exc:
        raise SystemExit(f"I/O error: {exc}") from exc


if __name__ == "__main__":
    main()
