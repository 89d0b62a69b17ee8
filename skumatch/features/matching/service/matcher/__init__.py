from .core import SkuMatcher, rank_candidates
from .models import SkuRecord, IndexedEntry, MatchIndex, MatchResult, MatchOutcome
from .normalization import normalize_text, tokenize, expand_synonyms, token_set, detect_volume_tokens
from .indexing import build_index, extract_hints
from .similarity import SimilarityCalculator, jaccard_similarity
