"""
Fixed lookup tables used by normalization and scoring.

All weights are constants; nothing here is learned or reloaded at runtime.
"""
from typing import Dict, FrozenSet, Tuple

# Korean OCR terms -> space separated English tokens found in the catalog
KO_TO_EN_SYNONYMS: Dict[str, str] = {
    '샤인머스캣': 'shine muscat',
    '포도': 'grape',
    '복숭아': 'peach',
    '라임': 'lime',
    '유자': 'yuzu',
    '쿠키앤크림': 'cookies cream',
    '커피': 'coffee',
    '카페라떼': 'cafe latte',
    '카페라테': 'cafe latte',
    '녹차': 'green tea',
    '바닐라': 'vanilla',
}

# Brand keyword -> bonus when echoed by both the entry and the query.
# Iteration order is the accumulation order.
BRAND_BOOSTS: Dict[str, float] = {
    'okf': 0.05,
    'hersheys': 0.05,
    'hershey': 0.05,
    'starbucks': 0.05,
    'lotte': 0.04,
    'pepsico': 0.03,
}

FLAVOR_KEYWORDS: FrozenSet[str] = frozenset({
    'grape',
    'peach',
    'yuzu',
    'lime',
    'muscat',
    'shine',
    'milk',
    'vanilla',
    'mocha',
    'cookies',
    'cream',
    'matcha',
    'green',
    'tea',
    'caramel',
    'hazelnut',
    'pike',
    'place',
    'roast',
    'dark',
    'chocolate',
    'americano',
    'sweetened',
})

# Substrings that mark a brand-line token as a category hint ("frapp" covers frappe/frappuccino)
HINT_CATEGORY_SUBSTRINGS: Tuple[str, ...] = ('sparkling', 'coffee', 'frapp')

HINT_BONUS = 0.03
VOLUME_BONUS = 0.04
FLAVOR_CONFLICT_PENALTY = 0.1

# Number of runner-up results returned next to the top match
ALTERNATIVES_LIMIT = 3
