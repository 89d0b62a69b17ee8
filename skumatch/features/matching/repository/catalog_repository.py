"""
Catalog Repository.
Loads the read-only SKU master file.
"""
import json
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from skumatch.common.base.base_repository import BaseRepository
from skumatch.features.matching.service.matcher.models import SkuRecord
from skumatch.schemas.sku_schemas import SkuRecordSchema
from skumatch.services.system.logger_service import get_logger

logger = get_logger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[3] / 'data' / 'sku_master.json'


class CatalogError(RuntimeError):
    """The SKU catalog is missing or malformed; the match index cannot be built."""


class CatalogRepository(BaseRepository[SkuRecord]):
    def __init__(self, catalog_path: Optional[Union[str, Path]] = None):
        self.catalog_path = Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH
        self._records: Optional[List[SkuRecord]] = None
        self._by_code: Dict[str, SkuRecord] = {}
        self._lock = threading.Lock()

    def load_catalog(self) -> List[SkuRecord]:
        """
        Read and validate every record of the catalog file.

        Raises:
            CatalogError: file missing/unreadable, invalid JSON, not a JSON
                array, an invalid record, or a duplicated code.
        """
        with self._lock:
            if self._records is None:
                records = self._read_records()
                self._by_code = {record.code: record for record in records}
                self._records = records
            return list(self._records)

    def find_all(self) -> List[SkuRecord]:
        return self.load_catalog()

    def find_by_id(self, id: str) -> Optional[SkuRecord]:
        self.load_catalog()
        return self._by_code.get(id)

    def _read_records(self) -> List[SkuRecord]:
        try:
            with open(self.catalog_path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except FileNotFoundError as e:
            raise CatalogError(f"Catalog file not found: {self.catalog_path}") from e
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalog file is not valid JSON: {e}") from e
        except OSError as e:
            raise CatalogError(f"Catalog file could not be read: {e}") from e

        if not isinstance(raw, list):
            raise CatalogError("Catalog must be a JSON array of SKU records")

        records: List[SkuRecord] = []
        seen_codes = set()
        for position, item in enumerate(raw):
            record = self._parse_record(item, position)
            if record.code in seen_codes:
                raise CatalogError(f"Duplicate SKU code in catalog: {record.code}")
            seen_codes.add(record.code)
            records.append(record)

        logger.info(
            "SKU catalog loaded",
            extra={"path": str(self.catalog_path), "count": len(records)}
        )
        return records

    @staticmethod
    def _parse_record(item: Any, position: int) -> SkuRecord:
        try:
            schema = SkuRecordSchema.model_validate(item)
        except ValidationError as e:
            raise CatalogError(f"Invalid SKU record at index {position}: {e.errors()}") from e

        return SkuRecord(
            code=schema.code,
            brand_line=schema.brand_line,
            flavor=schema.flavor,
            units_per_box=schema.units_per_box,
            shelf_life=schema.shelf_life,
        )
