import re

_AADHAAR_PATTERN = re.compile(r"\d{12}", re.ASCII)
_WHITESPACE = re.compile(r"\s+")


def is_valid_aadhaar_format(value: str | None) -> bool:
    if not value:
        return False
    return _AADHAAR_PATTERN.fullmatch(value) is not None


def normalize_text(text: str) -> str:
    """Remove every whitespace character."""
    return _WHITESPACE.sub("", text)


def contains_identifier(text: str, identifier: str) -> bool:
    # Stripping whitespace can join unrelated digit runs into a false match.
    return identifier in normalize_text(text)
