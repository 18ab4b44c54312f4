def test_list_products_pottery_with_limit(client):
    res = client.get("/api/products", params={"category": "Pottery", "limit": "1"})

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["count"] == 1
    assert body["data"][0]["id"] == "p2"
    assert body["data"][0]["artisanId"] == "a2"
    assert body["filters"] == {"category": "Pottery", "artisanId": None, "limit": "1"}


def test_list_products_lenient_limit(client):
    body = client.get("/api/products", params={"limit": "2abc"}).json()
    assert body["count"] == 2
    body = client.get("/api/products", params={"limit": "zero"}).json()
    assert body["count"] == 4


def test_product_by_slug(client):
    res = client.get("/api/products/terracotta-pitcher")
    assert res.status_code == 200
    assert res.json()["data"]["id"] == "p2"


def test_unknown_product_is_404(client):
    res = client.get("/api/products/does-not-exist")
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Product not found"}


def test_artisan_detail_lists_products(client):
    body = client.get("/api/artisans/a2").json()
    assert body["data"]["name"] == "Ramesh Prajapati"
    assert [p["id"] for p in body["products"]] == ["p2", "p4"]

    assert client.get("/api/artisans/a9").status_code == 404


def test_orders_newest_first(client):
    body = client.get("/api/orders", params={"status": "PENDING"}).json()
    assert [o["id"] for o in body["data"]] == ["o5", "o3"]
    assert body["data"][0]["orderedAt"].startswith("2025-03-01T16:30:00")


def test_order_detail(client):
    assert client.get("/api/orders/o2").json()["data"]["status"] == "shipped"
    res = client.get("/api/orders/o99")
    assert res.status_code == 404
    assert res.json()["error"] == "Order not found"


def test_dashboard(client):
    data = client.get("/api/dashboard").json()["data"]
    assert data["totalOrders"] == 5
    assert data["totalSales"] == 21300
    assert [p["id"] for p in data["lowStockProducts"]] == ["p3", "p4"]


def test_unmatched_route(client):
    res = client.get("/api/unknown")
    assert res.status_code == 404
    body = res.json()
    assert body["error"] == "Not Found"
    assert "/api/unknown" in body["message"]
    assert "/api/products" in body["availableEndpoints"]
