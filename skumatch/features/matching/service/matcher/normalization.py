import re
from typing import FrozenSet, Iterable, List, Sequence

from .vocabulary import KO_TO_EN_SYNONYMS

# ASCII punctuation plus the CJK quotes/separators that show up in Korean packaging OCR
PUNCTUATION_PATTERN = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()\[\]\"'“”‘’、·]")

# Digits immediately followed by a unit, e.g. "350ml", "146g", "2l"
VOLUME_PATTERN = re.compile(r'([0-9]+)(ml|g|l)', re.IGNORECASE)

_NON_ALNUM_PATTERN = re.compile(r'[^0-9a-z]', re.IGNORECASE)

# Unicode whitespace plus the BOM, which str.isspace() does not cover
WHITESPACE_PATTERN = re.compile(r"[\s\ufeff]+")


def normalize_text(text: str) -> str:
    """
    Lowercase *text* and replace punctuation with single spaces.

    Whitespace is left as-is; ``tokenize`` collapses it.
    """
    if not text:
        return ""
    return PUNCTUATION_PATTERN.sub(' ', text.lower())


def tokenize(text: str) -> List[str]:
    """Split normalized text into tokens, in order of occurrence, duplicates kept."""
    return [token for token in WHITESPACE_PATTERN.split(normalize_text(text)) if token]


def expand_synonyms(tokens: Sequence[str]) -> List[str]:
    """
    Append the English words of every Korean dictionary hit.

    Original tokens are always kept; the result is deduplicated with the
    first occurrence winning.
    """
    expanded = list(tokens)
    for token in tokens:
        synonym = KO_TO_EN_SYNONYMS.get(token)
        if synonym:
            expanded.extend(synonym.split())
    return list(dict.fromkeys(expanded))


def token_set(text: str) -> FrozenSet[str]:
    """Canonical token set used for both catalog entries and queries."""
    return frozenset(expand_synonyms(tokenize(text)))


def detect_volume_tokens(tokens: Iterable[str]) -> FrozenSet[str]:
    """
    Pick out quantity tokens such as ``350ml`` from a token set.

    Each token is stripped of non-alphanumerics before matching, so
    ``"350ml)"`` or ``"350ml짜리"`` still yield ``"350ml"``.
    """
    volumes = set()
    for token in tokens:
        match = VOLUME_PATTERN.search(_NON_ALNUM_PATTERN.sub('', token))
        if match:
            volumes.add(match.group(0))
    return frozenset(volumes)


def contains_volume(token: str) -> bool:
    return VOLUME_PATTERN.search(token) is not None
