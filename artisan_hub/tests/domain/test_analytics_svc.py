from unittest.mock import AsyncMock, MagicMock

import pytest

from artisan_hub.domain.services.analytics_svc import generate_artisan_insights


def _collection(find_one=None, docs=()):
    col = MagicMock()
    col.find_one = AsyncMock(return_value=find_one)
    col.find.return_value.to_list = AsyncMock(return_value=list(docs))
    col.update_one = AsyncMock()
    return col


@pytest.mark.asyncio
async def test_insights_for_own_artisan(make_db, fake_llm):
    fake_llm.complete.return_value = "Sales are growing. Add more pottery."
    analytics = _collection()
    db = make_db(
        artisans=_collection(find_one={"id": "a1", "userId": "u1"}),
        orders=_collection(docs=[{"totalAmount": 1200}, {"totalAmount": 800.5}]),
        products=_collection(docs=[{"views": 10}, {"views": 5}, {}]),
        analytics=analytics,
    )

    out = await generate_artisan_insights(db, fake_llm, artisan_id="a1", user_id="u1", period="weekly")

    assert out["metrics"] == {"sales": 2, "revenue": 2000.5, "views": 15, "orders": 2, "products": 3}
    assert out["insights"] == "Sales are growing. Add more pottery."
    assert out["period"] == "weekly"
    flt, update = analytics.update_one.call_args.args
    assert flt == {"artisanId": "a1"}
    assert update["$set"]["metrics"]["revenue"] == 2000.5
    assert analytics.update_one.call_args.kwargs["upsert"] is True


@pytest.mark.asyncio
@pytest.mark.parametrize("artisan", [None, {"id": "a1", "userId": "someone-else"}])
async def test_insights_denied_for_other_users(make_db, fake_llm, artisan):
    db = make_db(artisans=_collection(find_one=artisan))

    with pytest.raises(PermissionError):
        await generate_artisan_insights(db, fake_llm, artisan_id="a1", user_id="u1")
    fake_llm.complete.assert_not_awaited()
