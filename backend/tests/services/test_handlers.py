"""Terminal Handlers — tests for create/update/delete against an isolated store."""

from app.core.records import Order
from app.core.validation_pipeline import RequestContext
from app.infrastructure.id_generator import IdGenerator
from app.infrastructure.resource_store import ResourceStore
from app.services.handle_dishes import DishHandlers
from app.services.handle_orders import OrderHandlers

DISH = {"name": "Soup", "description": "Hot", "price": 4, "image_url": "u"}


def test_dish_create_appends_with_new_id():
    store = ResourceStore("dishes")
    handlers = DishHandlers(store, IdGenerator())
    dish = handlers.create(RequestContext(payload={"data": DISH}))
    assert store.list() == [dish]
    assert dish.name == "Soup"


def test_dish_list_returns_copy_of_sequence():
    store = ResourceStore("dishes")
    handlers = DishHandlers(store, IdGenerator())
    handlers.create(RequestContext(payload={"data": DISH}))
    listed = handlers.list()
    listed.clear()
    assert len(store) == 1


def test_order_delete_removes_resolved_order():
    keep = Order.from_data("keep", {"dishes": [{"quantity": 1}]})
    drop = Order.from_data("drop", {"dishes": [{"quantity": 1}]})
    store = ResourceStore("orders", [keep, drop])
    handlers = OrderHandlers(store, IdGenerator())
    removed = handlers.delete(RequestContext(resolved={"order": drop}))
    assert removed is drop
    assert store.list() == [keep]


def test_order_delete_tolerates_already_removed_order():
    gone = Order.from_data("gone", {"dishes": [{"quantity": 1}]})
    handlers = OrderHandlers(ResourceStore("orders"), IdGenerator())
    assert handlers.delete(RequestContext(resolved={"order": gone})) is None
