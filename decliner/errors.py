from __future__ import annotations


class DeclinerError(ValueError):
    """Base class for every error raised while reading or declining nouns."""


class UnrecognizedPattern(DeclinerError):
    """Raised when no classification rule matches a nominative/genitive pair."""

    def __init__(self, nominative: str, genitive: str) -> None:
        self.nominative = nominative
        self.genitive = genitive
        super().__init__(f"[{nominative}, {genitive}] is not a recognised noun type.")


class UnrecognizedGender(DeclinerError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"'{token}' is not recognised as one of ὁ, ἡ, το.")


class StemTooShort(DeclinerError):
    def __init__(self, genitive: str, required: int) -> None:
        self.genitive = genitive
        self.required = required
        super().__init__(
            f"Genitive '{genitive}' is too short: at least {required} characters are required."
        )


class TooManyFields(DeclinerError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Too many parts supplied ({count}). "
            "Did you mean to include an 'outfile' argument?"
        )


class MissingFields(DeclinerError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Expected nominative, genitive and gender separated by commas, got {count} part(s)."
        )


class MalformedRecord(DeclinerError):
    """Raised when a tabular row or header lacks one of the record fields."""

    def __init__(self, line: int, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed record on line {line}: {reason}")


class AccentedInput(DeclinerError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File {path} contains accents. Please remove them.")
