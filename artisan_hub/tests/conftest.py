from datetime import date, datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from artisan_hub.api import deps
from artisan_hub.domain.models.catalog import Artisan, CatalogSnapshot, Order, Product
from artisan_hub.main import app


def _product(pid, title, category, artisan_id, price=1000.0, stock=10):
    return Product(
        id=pid,
        title=title,
        slug=title.lower().replace(" ", "-"),
        short_description=f"{title} short",
        long_description=f"{title} long",
        price=price,
        artisan_id=artisan_id,
        category=category,
        stock=stock,
        created_at=date(2025, 1, 1),
    )


def _order(oid, product_id, amount, status, ordered_at):
    return Order(
        id=oid,
        product_id=product_id,
        buyer="Test Buyer",
        amount=amount,
        status=status,
        ordered_at=ordered_at,
    )


@pytest.fixture
def snapshot() -> CatalogSnapshot:
    return CatalogSnapshot(
        products=(
            _product("p1", "Block Print Saree", "Textiles", "a1", price=4200, stock=6),
            _product("p2", "Terracotta Pitcher", "Pottery", "a2", price=850, stock=12),
            _product("p3", "Silver Jhumka", "Jewelry", "a3", price=12500, stock=3),
            _product("p4", "Blue Pottery Vase", "pottery", "a2", price=2900, stock=4),
        ),
        artisans=(
            Artisan(id="a1", name="Lakshmi Devi", language="Hindi"),
            Artisan(id="a2", name="Ramesh Prajapati", language="Gujarati"),
            Artisan(id="a3", name="Meenakshi Sundaram", language="Tamil"),
        ),
        orders=(
            _order("o1", "p1", 4200, "delivered", datetime(2025, 1, 18, 9, 24, tzinfo=timezone.utc)),
            _order("o2", "p2", 1700, "shipped", datetime(2025, 2, 3, 14, 5, tzinfo=timezone.utc)),
            _order("o3", "p3", 12500, "pending", datetime(2025, 2, 11, 18, 40, tzinfo=timezone.utc)),
            _order("o4", "p2", 850, "cancelled", datetime(2025, 2, 14, 7, 55, tzinfo=timezone.utc)),
            _order("o5", "p4", 2900, "Pending", datetime(2025, 3, 1, 16, 30, tzinfo=timezone.utc)),
        ),
    )


@pytest.fixture
def fake_llm():
    llm = MagicMock()
    llm.complete = AsyncMock(return_value="{}")
    llm.transcribe = AsyncMock(return_value="")
    return llm


def _make_db(**collections):
    """MagicMock database: db["name"] returns the given collection mock (a fresh one otherwise)."""
    cols = dict(collections)
    db = MagicMock()

    def _get(name):
        if name not in cols:
            cols[name] = MagicMock()
        return cols[name]

    db.__getitem__.side_effect = _get

    # motor session with a transaction, both used as async context managers
    session = MagicMock()
    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=False)
    transaction = MagicMock()
    transaction.__aenter__ = AsyncMock(return_value=transaction)
    transaction.__aexit__ = AsyncMock(return_value=False)
    session.start_transaction.return_value = transaction
    db.client.start_session = AsyncMock(return_value=session)
    return db


@pytest.fixture
def make_db():
    return _make_db


@pytest.fixture
def client(snapshot, fake_llm):
    app.dependency_overrides[deps.catalog_dep] = lambda: snapshot
    app.dependency_overrides[deps.llm_dep] = lambda: fake_llm
    app.dependency_overrides[deps.optional_mongo_db] = lambda: None
    app.dependency_overrides[deps.redis_dep] = lambda: None
    # no context manager: the lifespan (fixtures, Mongo, Redis) is not started
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"X-User-Id": "user_42"}
