from shopifyService.models import Asset, Order, Product, Theme


def test_new_model():
    product = Product(title="Burton Custom Freestyle 151")

    assert product.is_new()
    assert product.exists is False
    assert product.get_original() == {}
    assert product["title"] == "Burton Custom Freestyle 151"


def test_from_response_syncs_original():
    data = {"id": 450789469, "email": "bob.norman@example.com", "line_items": [{"id": 1}]}

    order = Order.from_response(data)

    assert order.exists is True
    assert order.is_new() is False
    assert order.get_key() == 450789469
    assert order.get_original() == data
    assert order.line_items == [{"id": 1}]


def test_snapshots_are_independent():
    order = Order.from_response({"id": 1, "tags": ["a"]})

    order["tags"].append("b")

    assert order.get_original("tags") == ["a"]
    assert order.is_dirty("tags")


def test_dirty_tracking():
    product = Product.from_response({"id": 1, "title": "Old", "vendor": "Burton"})
    assert product.is_dirty() is False

    product.set_attribute("title", "New")
    product["status"] = "draft"

    assert product.get_dirty() == {"title": "New", "status": "draft"}
    assert product.is_dirty("title")
    assert not product.is_dirty("vendor")


def test_attribute_access():
    product = Product(id=9, title="Board")

    assert product.get_attribute("title") == "Board"
    assert product.get_attribute("vendor") is None
    assert product.get_attribute("vendor", "unknown") == "unknown"
    assert product.get_key() == 9


def test_payload_for_new_model_sends_everything():
    product = Product({"title": "Board"}, vendor="Burton")

    assert product.to_payload() == {"product": {"title": "Board", "vendor": "Burton"}}


def test_payload_for_persisted_model_is_partial():
    product = Product.from_response({"id": 7, "title": "Old", "vendor": "Burton"})
    product.fill({"title": "New"})

    assert product.to_payload() == {"product": {"title": "New", "id": 7}}


def test_sync_original_replaces_state_wholesale():
    theme = Theme.from_response({"id": 3, "name": "Dawn", "role": "unpublished"})
    theme["name"] = "Local edit"

    theme.sync_original({"id": 3, "role": "main"})

    assert theme.to_dict() == {"id": 3, "role": "main"}
    assert theme.get_original() == {"id": 3, "role": "main"}
    assert "name" not in theme
    assert theme.is_published()


def test_unwrap():
    assert Order.unwrap({"order": {"id": 1}}) == {"id": 1}
    assert Order.unwrap({"orders": [{"id": 1}]}, many=True) == [{"id": 1}]
    assert Order.unwrap({"id": 1}) == {"id": 1}
    assert Order.unwrap(None) is None


def test_descriptors():
    assert (Asset.resource_name(), Asset.resource_name_many(), Asset.identifier()) == (
        "asset", "assets", "id"
    )
    assert Product.resource_name_many() == "products"


def test_repr():
    assert repr(Order.from_response({"id": 5})) == "<Order id=5>"
