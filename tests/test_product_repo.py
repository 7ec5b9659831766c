from decimal import Decimal

import pytest

from product_api.domain.errors import ProductNotFound
from product_api.repos.product_repo import ProductRepo


def test_insert_returns_generated_id(session):
    repo = ProductRepo(session)

    first = repo.insert("A", Decimal("1.50"))
    second = repo.insert("B", Decimal("2.00"))
    repo.commit()

    assert second == first + 1
    assert repo.fetch_one(first).name == "A"


def test_fetch_one_missing(session):
    repo = ProductRepo(session)

    with pytest.raises(ProductNotFound) as exc_info:
        repo.fetch_one(5)

    assert exc_info.value.product_id == 5


def test_price_keeps_two_decimals(session):
    repo = ProductRepo(session)
    product_id = repo.insert("A", Decimal("11.22"))
    repo.commit()
    session.expire_all()

    assert repo.fetch_one(product_id).price == Decimal("11.22")


def test_fetch_range(session):
    repo = ProductRepo(session)
    ids = [repo.insert(f"P{i}", Decimal(i)) for i in range(5)]
    repo.commit()

    assert [p.id for p in repo.fetch_range(1, 3)] == ids[1:4]
    assert repo.fetch_range(10, 3) == []


def test_update_and_delete(session):
    repo = ProductRepo(session)
    product_id = repo.insert("old", Decimal("1.00"))
    repo.commit()

    repo.update(product_id, "new", Decimal("9.99"))
    repo.commit()
    session.expire_all()
    updated = repo.fetch_one(product_id)
    assert (updated.name, updated.price) == ("new", Decimal("9.99"))

    repo.delete(product_id)
    repo.commit()
    with pytest.raises(ProductNotFound):
        repo.fetch_one(product_id)


def test_update_and_delete_missing_rows_are_silent(session):
    repo = ProductRepo(session)

    repo.update(404, "nobody", Decimal("1.00"))
    repo.delete(404)
    repo.commit()

    assert repo.fetch_range(0, 10) == []
