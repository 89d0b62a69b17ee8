import json
import os
import sys
import tempfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Must be set before the logging service and the app are imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='skumatch-logs-'))
os.environ.setdefault('ENVIRONMENT', 'test')
os.environ.setdefault('RATELIMIT_ENABLED', 'false')

from skumatch.features.matching.repository.catalog_repository import CatalogRepository
from skumatch.features.matching.service.matcher import SkuMatcher


@pytest.fixture(scope="session")
def catalog_repository():
    return CatalogRepository()


@pytest.fixture(scope="session")
def catalog_records(catalog_repository):
    return catalog_repository.load_catalog()


@pytest.fixture()
def matcher(catalog_repository):
    return SkuMatcher(catalog_loader=catalog_repository.load_catalog)


@pytest.fixture()
def write_catalog(tmp_path):
    """Write a catalog file and return its path."""
    def _write(content, name="catalog.json"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding='utf-8')
        else:
            path.write_text(json.dumps(content, ensure_ascii=False), encoding='utf-8')
        return path
    return _write
