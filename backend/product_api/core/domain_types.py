"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId wraps int; ids are not guaranteed unique under the random strategy
    - Random ids fall in [0, MAX_PRODUCT_ID)
    - All valid strategies encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: pydantic-settings coerces env values without custom parsers
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", int)


# ─── Value Types ─────────────────────────────────────────────────

Price = NewType("Price", float)


# ─── Enums ───────────────────────────────────────────────────────

class IdStrategy(str, Enum):
    """How new product ids are chosen on create."""
    RANDOM = "random"
    SEQUENTIAL = "sequential"


class Operation(str, Enum):
    """Mutations, surfaced in structured logs."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


# ─── Constants ───────────────────────────────────────────────────

MAX_PRODUCT_ID = 100_000
