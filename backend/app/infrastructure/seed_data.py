"""Seed Data — sample dishes and orders loaded at startup when settings.seed_data is on.

Invariants:
    - Ids are 32-char hex like generated ids, and are reserved in the IdGenerator on load
    - Every order's line items reference a seeded dish and carry quantity >= 1
    - Functions return fresh records on every call (stores mutate them in place)
"""

from app.core.domain_types import DishId, OrderId, OrderStatus
from app.core.records import Dish, Order

_DISHES: list[dict] = [
    {
        "id": "3c637d011d844ebab1205fef8a7e36ea",
        "name": "Century Eggs",
        "description": "Whole eggs preserved in clay and ash for a few months",
        "price": 17,
        "image_url": "https://images.pexels.com/photos/60616/pexels-photo-60616.jpeg?h=530&w=350",
    },
    {
        "id": "d351db2b49b69679504652ea1cf38241",
        "name": "Dolcelatte and chickpea spaghetti",
        "description": "Spaghetti topped with a blend of dolcelatte and fresh chickpeas",
        "price": 19,
        "image_url": "https://images.pexels.com/photos/1279330/pexels-photo-1279330.jpeg?h=530&w=350",
    },
    {
        "id": "90c3d873684bf381dfab29034b5bba73",
        "name": "Falafel and tahini bagel",
        "description": "A warm bagel filled with falafel and tahini",
        "price": 6,
        "image_url": "https://images.pexels.com/photos/4560606/pexels-photo-4560606.jpeg?h=530&w=350",
    },
]

_ORDERS: list[dict] = [
    {
        "id": "f6069a542257054114138301947672ba",
        "deliverTo": "1600 Pennsylvania Avenue NW, Washington, DC 20500",
        "mobileNumber": "(202) 456-1111",
        "status": OrderStatus.OUT_FOR_DELIVERY.value,
        "dishes": [{**_DISHES[1], "quantity": 2}],
    },
    {
        "id": "5a887d326e83d3c5bdcbee398ea32aff",
        "deliverTo": "308 Negra Arroyo Lane, Albuquerque, NM",
        "mobileNumber": "(505) 143-3369",
        "status": OrderStatus.PENDING.value,
        "dishes": [{**_DISHES[0], "quantity": 1}],
    },
    {
        "id": "8b5c4f2a1d7e4b9c8a6f3e2d1c0b9a87",
        "deliverTo": "742 Evergreen Terrace, Springfield",
        "mobileNumber": "(939) 555-0113",
        "status": OrderStatus.DELIVERED.value,
        "dishes": [
            {**_DISHES[2], "quantity": 3},
            {**_DISHES[0], "quantity": 1},
        ],
    },
]


def seed_dishes() -> list[Dish]:
    return [Dish.from_data(DishId(d["id"]), d) for d in _DISHES]


def seed_orders() -> list[Order]:
    return [
        Order.from_data(
            OrderId(o["id"]),
            {**o, "dishes": [dict(item) for item in o["dishes"]]},
        )
        for o in _ORDERS
    ]
