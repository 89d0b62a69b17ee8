import pytest

from skumatch.features.matching.service.matcher import (
    SimilarityCalculator,
    SkuRecord,
    build_index,
    detect_volume_tokens,
    extract_hints,
    jaccard_similarity,
    token_set,
)

OKF_GRAPE = SkuRecord(code="OKFSZGRA", brand_line="OKF Sparkling Zero 350ml", flavor="Grape")
OKF_MUSCAT = SkuRecord(code="OKFSMUSC", brand_line="OKF Sparkling Zero 350ml", flavor="Shine Muscat")
PIKE_BOTTLE = SkuRecord(code="STAPPRBC", brand_line="Starbucks Bottle Coffee 275ml", flavor="Pike Place Roast")
FRAPPUCCINO = SkuRecord(code="STAFRMOC", brand_line="Starbucks Frappuccino 281ml", flavor="Mocha")


@pytest.fixture
def calculator():
    return SimilarityCalculator()


def entry_for(record):
    return build_index([record]).entries[0]


def score(calculator, record, text):
    query = token_set(text)
    return calculator.score_entry(entry_for(record), query, detect_volume_tokens(query))


def test_jaccard_similarity():
    assert jaccard_similarity({"a", "b"}, {"b", "c"}) == pytest.approx(1 / 3)
    assert jaccard_similarity({"a"}, {"a"}) == 1.0
    assert jaccard_similarity(set(), set()) == 0.0
    assert jaccard_similarity({"a"}, set()) == 0.0


def test_extract_hints_keeps_volume_category_and_flavor_tokens():
    assert extract_hints(OKF_MUSCAT) == ("sparkling", "350ml", "shine", "muscat")


def test_extract_hints_matches_frappe_variants():
    assert extract_hints(FRAPPUCCINO) == ("frappuccino", "281ml", "mocha")


def test_build_index_tokens_cover_brand_flavor_and_code():
    entry = entry_for(OKF_MUSCAT)
    assert entry.tokens == {"okf", "sparkling", "zero", "350ml", "shine", "muscat", "okfsmusc"}
    assert entry.flavor_tokens == {"shine", "muscat"}
    assert entry.record is OKF_MUSCAT


def test_hint_and_volume_bonus_both_apply(calculator):
    # jaccard 4/10, three hint hits, one volume hit, okf brand boost
    result = score(calculator, OKF_MUSCAT, "OKF 스파클링 제로 샤인머스캣 350ml")
    assert result == pytest.approx(0.4 + 3 * 0.03 + 0.04 + 0.05)


def test_brand_boost_needs_brand_on_both_sides(calculator):
    with_brand = score(calculator, OKF_GRAPE, "okf")
    without_brand = score(calculator, OKF_GRAPE, "grape")
    assert with_brand == pytest.approx(1 / 6 + 0.05)
    assert without_brand == pytest.approx(1 / 6 + 0.03)


def test_flavor_conflict_penalty_applies_once(calculator):
    entry = entry_for(OKF_GRAPE)
    query = token_set("okf peach lime yuzu")
    value, reasons = calculator.explain_entry(entry, query, detect_volume_tokens(query))

    assert value == pytest.approx(1 / 9 + 0.05 - 0.1)
    conflict_reasons = [reason for reason in reasons if reason.startswith("Flavor conflict")]
    assert conflict_reasons == ["Flavor conflict: lime, peach, yuzu"]


def test_no_conflict_when_query_flavor_matches_entry(calculator):
    entry = entry_for(OKF_GRAPE)
    query = token_set("grape")
    _, reasons = calculator.explain_entry(entry, query, detect_volume_tokens(query))
    assert not any(reason.startswith("Flavor conflict") for reason in reasons)


def test_score_is_clamped_to_one(calculator):
    assert score(calculator, PIKE_BOTTLE, "Starbucks Pike Place Roast 275ml Bottle Coffee") == 1.0


def test_score_is_clamped_to_zero(calculator):
    assert score(calculator, OKF_GRAPE, "Hershey Kisses Cookies & Cream") == 0.0


def test_score_entry_agrees_with_explain_entry(calculator):
    entry = entry_for(OKF_MUSCAT)
    query = token_set("OKF Sparkling Zero Grape 350ml - Zero Sugar")
    volumes = detect_volume_tokens(query)
    explained, reasons = calculator.explain_entry(entry, query, volumes)

    assert calculator.score_entry(entry, query, volumes) == explained
    assert "Volume match: 350ml" in reasons
    assert "Brand boost: okf" in reasons
