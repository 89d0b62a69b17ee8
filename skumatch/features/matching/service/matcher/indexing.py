from typing import Iterable, Tuple

from skumatch.services.system.logger_service import get_logger
from .models import IndexedEntry, MatchIndex, SkuRecord
from .normalization import contains_volume, token_set, tokenize
from .vocabulary import HINT_CATEGORY_SUBSTRINGS

logger = get_logger(__name__)


def extract_hints(record: SkuRecord) -> Tuple[str, ...]:
    """
    Collect the strong signals of a record.

    Brand-line tokens are kept when they carry a quantity (``350ml``) or a
    category word (sparkling, coffee, frappe...). Every flavor token is kept
    unconditionally. Order of first appearance is preserved.
    """
    hints = {}
    for token in tokenize(record.brand_line):
        if contains_volume(token):
            hints[token] = None
        if any(category in token for category in HINT_CATEGORY_SUBSTRINGS):
            hints[token] = None

    for token in tokenize(record.flavor):
        hints[token] = None

    return tuple(hints)


def build_entry(record: SkuRecord) -> IndexedEntry:
    return IndexedEntry(
        record=record,
        tokens=token_set(f"{record.brand_line} {record.flavor} {record.code}"),
        hints=extract_hints(record),
        flavor_tokens=token_set(record.flavor),
    )


def build_index(catalog: Iterable[SkuRecord]) -> MatchIndex:
    """Build the searchable index, one entry per record, in catalog order."""
    entries = tuple(build_entry(record) for record in catalog)
    logger.debug("Match index built", extra={"entries": len(entries)})
    return MatchIndex(entries=entries)
