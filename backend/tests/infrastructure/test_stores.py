"""Process-wide Stores — tests for startup seeding and id reservation."""

from app.infrastructure.stores import dish_store, order_store, id_generator, init_stores


def test_init_stores_seeds_sample_records():
    init_stores(seed=True)
    assert len(dish_store) > 0
    assert len(order_store) > 0
    for record in (*dish_store.list(), *order_store.list()):
        assert record.id in id_generator


def test_seeded_orders_have_valid_line_items():
    init_stores(seed=True)
    for order in order_store.list():
        assert order.dishes
        assert all(item["quantity"] >= 1 for item in order.dishes)


def test_init_stores_without_seed_is_empty():
    init_stores(seed=False)
    assert len(dish_store) == 0
    assert len(order_store) == 0
