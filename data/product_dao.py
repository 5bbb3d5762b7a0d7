# data/product_dao.py
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from models.product import Product

logger = logging.getLogger("shopping.store")


class ProductDao(ABC):
    # Product store the shopping service reads and writes inventory through.

    @abstractmethod
    def get_all(self) -> list[Product]:
        pass

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        pass

    @abstractmethod
    def save(self, product: Product) -> None:
        pass


class InMemoryProductDao(ProductDao):
    def __init__(self, products: list[Product] | None = None):
        self.products: dict[str, Product] = {}  # sku -> product
        for p in products or []:
            self.products[p.sku] = p

    def get_all(self) -> list[Product]:
        return list(self.products.values())

    def get_by_name(self, name: str) -> Product | None:
        for p in self.products.values():
            if p.name == name:
                return p
        return None

    def save(self, product: Product) -> None:
        self.products[product.sku] = product


class JsonProductDao(ProductDao):
    def __init__(self, storage_dir: str | Path = "data/storage"):
        # base folder where products.json lives
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        # sku -> Product, so repeated lookups hand out the same object
        self._cache: dict[str, Product] = {}

    def _file_path(self) -> Path:
        return self.storage_dir / "products.json"

    def _read_json(self) -> list[dict]:
        # Load products from disk. Missing, empty or bad file -> empty list.
        path = self._file_path()
        if not path.exists():
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read().strip()
                if text == "":
                    return []
                data = json.loads(text)
        except (OSError, ValueError):
            # corrupted or unreadable -> fail safe
            logger.warning(f"could not read {path}, treating store as empty")
            return []
        if not isinstance(data, list):
            # if corrupted format, recover gracefully
            return []
        rows = [row for row in data if self._is_valid_row(row)]
        if len(rows) != len(data):
            logger.warning(f"{path}: skipped {len(data) - len(rows)} malformed product row(s)")
        return rows

    @staticmethod
    def _is_valid_row(row) -> bool:
        return (
            isinstance(row, dict)
            and "sku" in row
            and "name" in row
            and isinstance(row.get("count"), int)
        )

    def _write_json(self, data: list[dict]) -> None:
        #Save the product list back to disk with pretty formatting.
        with open(self._file_path(), "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def _to_product(self, row: dict) -> Product:
        product = self._cache.get(row["sku"])
        if product is None:
            product = Product(sku=row["sku"], name=row["name"], count=row["count"])
            self._cache[product.sku] = product
        else:
            product.name = row["name"]
            product.count = row["count"]
        return product

    def get_all(self) -> list[Product]:
        return [self._to_product(row) for row in self._read_json()]

    def get_by_name(self, name: str) -> Product | None:
        for row in self._read_json():
            if row.get("name") == name:
                return self._to_product(row)
        return None

    def save(self, product: Product) -> None:
        rows = self._read_json()
        record = {"sku": product.sku, "name": product.name, "count": product.count}
        for i, row in enumerate(rows):
            if row.get("sku") == product.sku:
                rows[i] = record
                break
        else:
            rows.append(record)
        self._write_json(rows)
        self._cache[product.sku] = product
