import json

import pytest
from pydantic import ValidationError

from artisan_hub.core.config import PACKAGE_DIR
from artisan_hub.domain.repositories.catalog_repo import load_catalog


def test_bundled_fixtures_load():
    snapshot = load_catalog(PACKAGE_DIR / "data")

    assert len(snapshot.products) == 6
    assert len(snapshot.artisans) == 4
    assert len(snapshot.orders) == 6
    # every product points at a known artisan
    artisan_ids = {a.id for a in snapshot.artisans}
    assert all(p.artisan_id in artisan_ids for p in snapshot.products)


def _write_fixtures(tmp_path, products, artisans=(), orders=()):
    (tmp_path / "products.json").write_text(json.dumps(products), encoding="utf-8")
    (tmp_path / "artisans.json").write_text(json.dumps(list(artisans)), encoding="utf-8")
    (tmp_path / "orders.json").write_text(json.dumps(list(orders)), encoding="utf-8")


def test_fixture_must_be_an_array(tmp_path):
    _write_fixtures(tmp_path, {"id": "p1"})
    with pytest.raises(ValueError, match="products.json"):
        load_catalog(tmp_path)


def test_invalid_record_fails_loading(tmp_path):
    _write_fixtures(tmp_path, [{"id": "p1", "title": "Pot", "slug": "pot", "price": -5,
                                "artisanId": "a1", "category": "Pottery"}])
    with pytest.raises(ValidationError):
        load_catalog(tmp_path)


def test_camel_case_keys_are_read(tmp_path):
    _write_fixtures(
        tmp_path,
        [{"id": "p1", "title": "Pot", "slug": "pot", "price": 10, "artisanId": "a1",
          "category": "Pottery", "shortDescription": "Small pot"}],
        orders=[{"id": "o1", "productId": "p1", "buyer": "B", "amount": 10, "status": "pending",
                 "orderedAt": "2025-02-03T14:05:00Z"}],
    )
    snapshot = load_catalog(tmp_path)
    assert snapshot.products[0].short_description == "Small pot"
    assert snapshot.orders[0].product_id == "p1"
