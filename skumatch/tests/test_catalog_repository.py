import pytest

from skumatch.features.matching.repository.catalog_repository import CatalogError, CatalogRepository
from skumatch.features.matching.service.matcher import SkuMatcher


def test_bundled_catalog_loads(catalog_records):
    codes = [record.code for record in catalog_records]
    assert len(codes) == len(set(codes))
    assert {"OKFSMUSC", "OKFSZGRA", "LOWHEKIC", "STAPPRBC", "STAPPRSB"} <= set(codes)


def test_find_by_id(catalog_repository):
    record = catalog_repository.find_by_id("LOWHEKIC")
    assert record.brand_line == "Lotte Hershey's Kisses 146g"
    assert record.flavor == "Cookies & Cream"
    assert catalog_repository.find_by_id("MISSING") is None


def test_find_all_returns_a_copy(catalog_repository):
    records = catalog_repository.find_all()
    records.clear()
    assert catalog_repository.find_all()


def test_optional_fields_are_normalized(write_catalog):
    path = write_catalog([
        {"code": " OKFSZGRA ", "brand_line": "OKF Sparkling Zero 350ml", "flavor": "Grape",
         "units_per_box": 24, "shelf_life": ""},
    ])
    [record] = CatalogRepository(path).load_catalog()
    assert record.code == "OKFSZGRA"
    assert record.units_per_box == "24"
    assert record.shelf_life is None


def test_missing_file_raises(tmp_path):
    with pytest.raises(CatalogError, match="not found"):
        CatalogRepository(tmp_path / "absent.json").load_catalog()


def test_invalid_json_raises(write_catalog):
    path = write_catalog("[{not json")
    with pytest.raises(CatalogError, match="not valid JSON"):
        CatalogRepository(path).load_catalog()


def test_non_array_document_raises(write_catalog):
    path = write_catalog({"code": "OKFSZGRA"})
    with pytest.raises(CatalogError, match="JSON array"):
        CatalogRepository(path).load_catalog()


def test_invalid_record_raises(write_catalog):
    path = write_catalog([{"brand_line": "OKF Sparkling Zero 350ml", "flavor": "Grape"}])
    with pytest.raises(CatalogError, match="index 0"):
        CatalogRepository(path).load_catalog()


def test_duplicate_code_raises(write_catalog):
    record = {"code": "OKFSZGRA", "brand_line": "OKF Sparkling Zero 350ml", "flavor": "Grape"}
    path = write_catalog([record, dict(record, flavor="Peach")])
    with pytest.raises(CatalogError, match="Duplicate SKU code"):
        CatalogRepository(path).load_catalog()


def test_empty_array_is_a_valid_catalog(write_catalog):
    path = write_catalog([])
    assert CatalogRepository(path).load_catalog() == []


def test_matcher_propagates_catalog_error(tmp_path):
    repository = CatalogRepository(tmp_path / "absent.json")
    matcher = SkuMatcher(catalog_loader=repository.load_catalog)
    with pytest.raises(CatalogError):
        matcher.match_sku("OKF Sparkling Zero Grape 350ml")


def test_matcher_uses_custom_catalog(write_catalog):
    path = write_catalog([
        {"code": "KOGTLAT", "brand_line": "Lotte Let's Be 240ml", "flavor": "녹차 라떼"},
        {"code": "KOVAN", "brand_line": "Lotte Let's Be 240ml", "flavor": "바닐라"},
    ])
    matcher = SkuMatcher(catalog_loader=CatalogRepository(path).load_catalog)
    outcome = matcher.match_sku("Lotte green tea 240ml")
    assert outcome.match.code == "KOGTLAT"
    assert [alt.code for alt in outcome.alternatives] == ["KOVAN"]


def test_record_without_flavor_raises(write_catalog):
    path = write_catalog([
        {"code": "OKFSZGRA", "brand_line": "OKF Sparkling Zero 350ml", "flavor": "Grape"},
        {"code": "OKFSZPEA", "brand_line": "OKF Sparkling Zero 350ml"},
    ])
    with pytest.raises(CatalogError, match="index 1"):
        CatalogRepository(path).load_catalog()
