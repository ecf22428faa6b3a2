"""Id Generator - chooses ids for newly created products.

Invariants:
    - RandomIdGenerator returns ids in [0, MAX_PRODUCT_ID); collisions are possible
    - RandomIdGenerator reseeds from the wall clock on every call
    - SequentialIdGenerator returns max(existing ids) + 1, or 1 for an empty store
    - Generators are called by ProductStore while it holds its lock

Design Decisions:
    - Random strategy is the default: reproduces the historical id behavior,
      including duplicates (see DESIGN.md)
    - Sequential strategy opt-in via settings.product_id_strategy
"""

import random
import time
from typing import Protocol, Sequence

from product_api.core.domain_types import IdStrategy, ProductId, MAX_PRODUCT_ID
from product_api.core.product import Product


class IdGenerator(Protocol):
    """Contract for id generation - implemented by the strategies below."""
    def next_id(self, existing: Sequence[Product]) -> ProductId: ...


class RandomIdGenerator:
    """Pseudo-random id in [0, upper), reseeded from the clock each call."""

    def __init__(self, upper: int = MAX_PRODUCT_ID, clock=time.time_ns):
        self._upper = upper
        self._clock = clock

    def next_id(self, existing: Sequence[Product]) -> ProductId:
        rng = random.Random(self._clock())
        return ProductId(rng.randrange(self._upper))


class SequentialIdGenerator:
    """Monotonic id: one past the largest id currently stored."""

    def next_id(self, existing: Sequence[Product]) -> ProductId:
        return ProductId(max((p.id for p in existing), default=0) + 1)


def build_id_generator(strategy: IdStrategy) -> IdGenerator:
    """Map a configured strategy to its generator."""
    if strategy == IdStrategy.SEQUENTIAL:
        return SequentialIdGenerator()
    return RandomIdGenerator()
