import json


def _create_product(client, **fields):
    data = {"name": "Widget", "price": "10", "warrantyMonths": "6", "initialStock": "5"}
    data.update(fields)
    resp = client.post("/api/admin/product", data=data)
    assert resp.status_code == 200
    return resp.json()["product"]


def test_ping(client):
    resp = client.get("/api/ping")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "msg": "pong"}


def test_metrics_endpoint(client):
    client.get("/api/ping")
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "http_requests_total" in resp.text


def test_unknown_route_is_json_error(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert "error" in resp.json()


def test_create_product_form(client, store):
    resp = client.post(
        "/api/admin/product",
        data={"name": "Widget", "price": "9.5", "warrantyMonths": "6", "category": "Tools", "initialStock": "4"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Product added"
    product = body["product"]
    assert product["price"] == 9.5
    assert product["warrantyMonths"] == 6
    assert product["stock"] == 4
    assert product["category"] == "Tools"
    assert product["image"] is None
    assert product["createdAt"].endswith("Z")
    assert json.loads(store.path.read_text())["products"][0]["id"] == product["id"]


def test_create_product_with_image_is_served(client, blobs):
    resp = client.post(
        "/api/admin/product",
        data={"name": "Camera"},
        files={"image": ("holiday.png", b"\x89PNG-data", "image/png")},
    )

    assert resp.status_code == 200
    image = resp.json()["product"]["image"]
    assert image.startswith("/uploads/")
    assert image.endswith(".png")

    served = client.get(image)
    assert served.status_code == 200
    assert served.content == b"\x89PNG-data"
    assert served.headers["content-type"].startswith("image/png")


def test_missing_upload_is_404(client):
    resp = client.get("/uploads/does-not-exist.png")
    assert resp.status_code == 404
    assert resp.json() == {"error": "File not found"}


def test_create_product_without_name(client):
    resp = client.post("/api/admin/product", data={"price": "3"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Product name required"}


def test_list_and_get_products(client):
    widget = _create_product(client)
    _create_product(client, name="Lamp", category="Lighting")

    assert [p["name"] for p in client.get("/api/products").json()] == ["Widget", "Lamp"]
    assert [p["name"] for p in client.get("/api/products", params={"q": "general"}).json()] == ["Widget"]
    assert [p["name"] for p in client.get("/api/products", params={"category": "LIGHTING"}).json()] == ["Lamp"]

    resp = client.get(f"/api/products/{widget['id']}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Widget"


def test_get_product_not_found(client):
    resp = client.get("/api/products/prod_missing")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}


def test_adjust_stock(client):
    widget = _create_product(client)

    resp = client.post("/api/admin/stock", json={"productId": widget["id"], "addQuantity": 7})
    assert resp.status_code == 200
    assert resp.json()["message"] == "Stock updated"
    assert resp.json()["product"]["stock"] == 12

    resp = client.post("/api/admin/stock", json={"productId": widget["id"], "addQuantity": "-2"})
    assert resp.json()["product"]["stock"] == 10


def test_adjust_stock_unknown_product(client):
    resp = client.post("/api/admin/stock", json={"productId": "prod_missing", "addQuantity": 1})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}


def test_create_order_missing_fields(client):
    widget = _create_product(client)
    resp = client.post("/api/orders", json={"name": "Ann", "productId": widget["id"], "quantity": 1})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing fields"}


def test_create_order_invalid_quantity_is_bad_request(client):
    widget = _create_product(client)
    resp = client.post(
        "/api/orders",
        json={"name": "Ann", "phone": "555", "productId": widget["id"], "quantity": "many"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Invalid request")


def test_create_order_accepts_numeric_strings(client):
    widget = _create_product(client)
    resp = client.post(
        "/api/orders",
        json={"name": "Ann", "phone": 5551234, "productId": widget["id"], "quantity": "2"},
    )
    assert resp.status_code == 200
    order = resp.json()["order"]
    assert order["quantity"] == 2
    assert order["phone"] == "5551234"
    assert order["serialNumber"] is None
    assert order["status"] == "PENDING"
    assert "approvedAt" not in order


def test_list_orders_with_product_and_status(client):
    widget = _create_product(client)
    first = client.post(
        "/api/orders", json={"name": "Ann", "phone": "1", "productId": widget["id"], "quantity": 1}
    ).json()["order"]
    client.post("/api/orders", json={"name": "Bob", "phone": "2", "productId": widget["id"], "quantity": 1})
    client.post(f"/api/admin/orders/{first['id']}/approve")

    orders = client.get("/api/admin/orders").json()
    assert [o["name"] for o in orders] == ["Ann", "Bob"]
    assert orders[0]["product"]["id"] == widget["id"]

    pending = client.get("/api/admin/orders", params={"status": "PENDING"}).json()
    assert [o["name"] for o in pending] == ["Bob"]


def test_approve_and_reject_unknown_order(client):
    for action in ("approve", "reject"):
        resp = client.post(f"/api/admin/orders/ord_missing/{action}")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Order not found"}


def test_search_empty_query_is_a_list(client):
    assert client.get("/api/search").json() == []
    assert client.get("/api/search", params={"q": ""}).json() == []


def test_search_shape(client):
    _create_product(client)
    body = client.get("/api/search", params={"q": "widg"}).json()
    assert set(body) == {"products", "orders"}
    assert [p["name"] for p in body["products"]] == ["Widget"]


def test_create_product_empty_category_is_kept(client):
    resp = client.post("/api/admin/product", data={"name": "Widget", "category": ""})
    assert resp.status_code == 200
    assert resp.json()["product"]["category"] == ""


def test_create_product_absent_category_defaults(client):
    resp = client.post("/api/admin/product", data={"name": "Widget"})
    assert resp.json()["product"]["category"] == "General"


def test_create_product_multipart_empty_category_is_kept(client):
    resp = client.post(
        "/api/admin/product",
        data={"name": "Camera", "category": ""},
        files={"image": ("a.gif", b"GIF89a", "image/gif")},
    )
    assert resp.status_code == 200
    assert resp.json()["product"]["category"] == ""
    assert resp.json()["product"]["image"].endswith(".gif")


def test_create_order_without_body_is_missing_fields(client, store):
    resp = client.post("/api/orders")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing fields"}
    assert store.load().orders == []


def test_adjust_stock_without_body_is_not_found(client):
    resp = client.post("/api/admin/stock")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}


def test_validation_message_without_location():
    import asyncio
    from fastapi.exceptions import RequestValidationError
    from inventory_api.main import validation_error_handler

    exc = RequestValidationError([{"loc": ("body",), "msg": "Field required", "type": "missing"}])
    resp = asyncio.run(validation_error_handler(None, exc))

    assert resp.status_code == 400
    assert json.loads(resp.body) == {"error": "Invalid request: Field required"}
