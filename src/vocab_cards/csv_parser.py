"""CSV import for vocabulary card files."""
import logging
import re
from pathlib import Path

from vocab_cards.models import CANONICAL_HEADERS, LEARNING, CardRecord

logger = logging.getLogger(__name__)

_EDGE_QUOTES = re.compile(r'^"|"$')


class CardImportError(Exception):
    """Import failure carrying a message fit to show the user."""

    default_message = "Failed to process file"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InputFormatError(CardImportError):
    default_message = "Please upload a CSV file"


class ReadError(CardImportError):
    default_message = "Failed to process file"


def split_row(line: str) -> list[str]:
    """Split one data row on commas outside double quotes.

    A doubled quote inside a quoted span is kept as a single literal quote.
    """
    values = []
    current = []
    inside_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if inside_quotes and line[i + 1:i + 2] == '"':
                current.append('"')
                i += 2
                continue
            inside_quotes = not inside_quotes
        elif char == "," and not inside_quotes:
            values.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1
    values.append("".join(current).strip())
    return values


def split_row_legacy(line: str) -> list[str]:
    """Toggle-on-quote scan followed by a leading/trailing quote strip.

    Escaped quotes (``""``) are dropped rather than kept.
    """
    values = []
    current = []
    inside_quotes = False
    for char in line:
        if char == '"':
            inside_quotes = not inside_quotes
        elif char == "," and not inside_quotes:
            values.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    values.append("".join(current).strip())
    return [_EDGE_QUOTES.sub("", v).strip() for v in values]


def row_to_card(headers: list[str], values: list[str]) -> CardRecord:
    # Positional match; missing trailing values become "", extras are dropped.
    row = {header: (values[i] if i < len(values) else "") for i, header in enumerate(headers)}
    fields = {field: row.get(header, "") for field, header in CANONICAL_HEADERS.items()}
    return CardRecord(**fields, status=LEARNING)


def parse_csv(text: str, legacy_quotes: bool = False) -> list[CardRecord]:
    """Parse CSV text (first line is the header) into cards.

    Never raises on malformed rows: unknown headers and short rows yield
    empty fields.
    """
    if not text.strip():
        return []
    lines = text.split("\n")
    headers = [h.strip() for h in lines[0].split(",")]
    split = split_row_legacy if legacy_quotes else split_row
    cards = [
        row_to_card(headers, split(line))
        for line in lines[1:]
        if line.strip()
    ]
    missing = [h for h in CANONICAL_HEADERS.values() if h not in headers]
    if missing:
        logger.info("CSV header lacks columns %s; those fields are left empty", missing)
    return cards


def read_csv_file(file_path: str) -> str:
    path = Path(file_path)
    if not path.name.endswith(".csv"):
        raise InputFormatError()
    try:
        # utf-8-sig drops the BOM spreadsheet exports prepend
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        raise ReadError() from e


def load_csv_file(file_path: str, legacy_quotes: bool = False) -> list[CardRecord]:
    """Read and parse a .csv file. Raises CardImportError subclasses."""
    cards = parse_csv(read_csv_file(file_path), legacy_quotes=legacy_quotes)
    logger.info("Parsed %d cards from %s", len(cards), Path(file_path).name)
    return cards
