"""Product Snapshot - dict serialization / deserialization for Product.

Invariants:
    - product_to_snapshot produces a JSON-safe dict; "info" omitted when empty
    - product_from_snapshot requires id, name and price; info defaults to ""
    - Malformed input raises ValueError (callers map it to their own error type)

Design Decisions:
    - Separate from product.py: the record stays a bare dataclass
    - Used for seed loading and for structured log payloads
"""

from product_api.core.domain_types import ProductId, Price
from product_api.core.product import Product

_REQUIRED_KEYS: tuple[str, ...] = ("id", "name", "price")


def product_to_snapshot(product: Product) -> dict:
    """Serialize a Product to a plain dict."""
    snapshot: dict = {"id": product.id, "name": product.name}
    if product.info:
        snapshot["info"] = product.info
    snapshot["price"] = product.price
    return snapshot


def product_from_snapshot(data: dict) -> Product:
    """Build a Product from a dict produced by product_to_snapshot (or a seed file)."""
    if not isinstance(data, dict):
        raise ValueError(f"product snapshot must be an object, got {type(data).__name__}")
    missing = [k for k in _REQUIRED_KEYS if k not in data]
    if missing:
        raise ValueError(f"product snapshot missing keys: {', '.join(missing)}")
    # bool is an int subclass; reject it explicitly
    if isinstance(data["id"], bool) or not isinstance(data["id"], int):
        raise ValueError("product id must be an integer")
    if isinstance(data["price"], bool) or not isinstance(data["price"], (int, float)):
        raise ValueError("product price must be a number")
    return Product(
        id=ProductId(data["id"]),
        name=str(data["name"]),
        info=str(data.get("info") or ""),
        price=Price(float(data["price"])),
    )


def products_from_snapshots(items: list) -> list[Product]:
    """Deserialize a list of snapshots, preserving order."""
    if not isinstance(items, list):
        raise ValueError("product snapshots must be a list")
    return [product_from_snapshot(item) for item in items]
