"""ProductStore tests - pure tests for the in-memory record store.

Tests cover:
    - Lookup by id (present / absent)
    - list_products order, length and copy semantics
    - create, update (partial), delete (first match, repeated delete)
    - Lock-guarded concurrent creates
"""

import threading

import pytest

from product_api.core.domain_types import MAX_PRODUCT_ID
from product_api.core.id_generator import SequentialIdGenerator
from product_api.core.product import Product
from product_api.core.product_store import ProductStore
from product_api.core.seed_data import default_products


# --- get --------------------------------------------------------------------

@pytest.mark.parametrize("product_id", [1, 2, 3])
def test_get_returns_matching_record(store, product_id):
    product = store.get(product_id)
    assert product is not None
    assert product.id == product_id
    assert product.name == f"product {product_id}"


@pytest.mark.parametrize("product_id", [0, 4, -1, 99_999])
def test_get_absent_id_returns_none(store, product_id):
    assert store.get(product_id) is None


def test_get_returns_copy(store):
    product = store.get(1)
    product.name = "changed outside"
    assert store.get(1).name == "product 1"


# --- list_products ----------------------------------------------------------

def test_list_preserves_insertion_order(store):
    assert [p.id for p in store.list_products()] == [1, 2, 3]


def test_list_length_matches_store(store):
    assert len(store.list_products()) == len(store) == 3


def test_list_is_snapshot(store):
    snapshot = store.list_products()
    store.delete(1)
    assert len(snapshot) == 3
    assert len(store.list_products()) == 2


def test_empty_store_lists_nothing():
    assert ProductStore().list_products() == []


# --- create -----------------------------------------------------------------

def test_create_appends_record(store):
    product = store.create(name="X", info="Y", price=12.5)
    products = store.list_products()
    assert len(products) == 4
    assert products[-1] == product
    assert (product.name, product.info, product.price) == ("X", "Y", 12.5)
    assert 0 <= product.id < MAX_PRODUCT_ID


def test_create_without_info_stores_empty_string(store):
    product = store.create(name="X", price=1)
    assert product.info == ""
    assert isinstance(product.price, float)


def test_create_uses_injected_generator(fixed_ids):
    store = ProductStore(default_products(), id_generator=fixed_ids(42))
    assert store.create(name="X", price=1.0).id == 42


def test_create_allows_duplicate_ids(fixed_ids):
    store = ProductStore(default_products(), id_generator=fixed_ids(2))
    store.create(name="dup", price=1.0)
    assert [p.id for p in store.list_products()] == [1, 2, 3, 2]
    assert store.get(2).name == "product 2"


def test_create_sequential_ids():
    store = ProductStore(default_products(), id_generator=SequentialIdGenerator())
    assert store.create(name="a", price=1.0).id == 4
    assert store.create(name="b", price=1.0).id == 5


# --- update -----------------------------------------------------------------

def test_update_price_only(store):
    updated = store.update(2, price=9.99)
    assert updated.price == 9.99
    assert store.get(2) == Product(
        id=2, name="product 2", info="product2 description", price=9.99,
    )


def test_update_all_fields(store):
    updated = store.update(3, name="new", info="new info", price=1.5)
    assert updated == Product(id=3, name="new", info="new info", price=1.5)


def test_update_no_changes_returns_record_unchanged(store):
    assert store.update(1) == store.get(1)


def test_update_missing_returns_none(store):
    before = store.list_products()
    assert store.update(404, name="ghost") is None
    assert store.list_products() == before


def test_update_rejects_unknown_fields(store):
    with pytest.raises(ValueError, match="id"):
        store.update(1, id=7)


def test_update_touches_first_duplicate_only(fixed_ids):
    store = ProductStore(default_products(), id_generator=fixed_ids(1))
    store.create(name="dup", price=5.0)
    store.update(1, name="renamed")
    names = [p.name for p in store.list_products() if p.id == 1]
    assert names == ["renamed", "dup"]


# --- delete -----------------------------------------------------------------

def test_delete_removes_and_returns_record(store):
    deleted = store.delete(2)
    assert deleted.name == "product 2"
    assert store.get(2) is None
    assert [p.id for p in store.list_products()] == [1, 3]


def test_delete_twice_returns_none(store):
    store.delete(2)
    assert store.delete(2) is None
    assert len(store) == 2


def test_delete_first_duplicate_only(fixed_ids):
    store = ProductStore(default_products(), id_generator=fixed_ids(3))
    store.create(name="dup", price=5.0)
    assert store.delete(3).name == "product 3"
    assert [p.name for p in store.list_products()] == ["product 1", "product 2", "dup"]


# --- seeding and concurrency ------------------------------------------------

def test_stores_do_not_share_seed_records():
    first = ProductStore(default_products())
    second = ProductStore(default_products())
    first.update(1, name="only first")
    assert second.get(1).name == "product 1"


def test_concurrent_creates_are_not_lost():
    store = ProductStore(id_generator=SequentialIdGenerator())

    def worker():
        for _ in range(50):
            store.create(name="t", price=1.0)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [p.id for p in store.list_products()]
    assert len(ids) == 400
    assert sorted(ids) == list(range(1, 401))
