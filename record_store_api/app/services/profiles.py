"""
Entity profiles.

A profile describes one record type served by the store: its fields,
how each field is validated on create and update, the message returned
when required fields are missing, which fields are searchable and how
statistics are computed.  The service runs with exactly one profile,
selected by ``settings.record_type``.

Validation rules per field
--------------------------

Each field carries two policies, one for create and one for update:

``truthy``
    The value must be "filled in": ``0``, ``""``, ``null`` and NaN do
    not count.
``present``
    Supplying the key is enough, whatever the value.  This is what lets
    a product be created or restocked with ``stock: 0``.

The product profile mixes both on purpose: text fields sent as ``""`` in
an update are ignored rather than blanking the product, while numeric
fields are applied whenever they are sent.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel

from record_store_api.app.schemas.record import ProductRead, ProductStats, UserRead, UserStats
from record_store_api.app.services.coercion import divide, round_half_up

TEXT = "text"
NUMBER = "number"

TRUTHY = "truthy"
PRESENT = "present"

Record = Dict[str, Any]


@dataclass(frozen=True)
class FieldSpec:
    """A single record field and its validation policies."""

    name: str
    kind: str = TEXT
    create_policy: str = TRUTHY
    update_policy: str = PRESENT


@dataclass(frozen=True)
class EntityProfile:
    """Configuration of one record type."""

    collection: str
    label: str
    fields: Tuple[FieldSpec, ...]
    missing_fields_message: str
    stats: Callable[[List[Record]], Dict[str, Any]]
    read_model: Type[BaseModel]
    stats_model: Type[BaseModel]
    search_fields: Tuple[str, ...] = ()
    demo_records: Tuple[Dict[str, Any], ...] = field(default=(), repr=False)

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)

    @property
    def searchable(self) -> bool:
        return bool(self.search_fields)

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"


def user_stats(records: List[Record]) -> Dict[str, Any]:
    total = len(records)
    average_age = divide(sum(record["age"] for record in records), total)
    return {
        "total": total,
        "averageAge": round_half_up(average_age * 10) / 10,
    }


def product_stats(records: List[Record]) -> Dict[str, Any]:
    total_stock = sum(record["stock"] for record in records)
    total_value = sum(record["price"] * record["stock"] for record in records)
    # dict preserves first‑seen order
    categories = list(dict.fromkeys(record["category"] for record in records))
    return {
        "totalProducts": len(records),
        "totalStock": total_stock,
        "totalValue": total_value,
        "categories": categories,
        "avgPrice": round_half_up(divide(total_value, total_stock)),
    }


USER_PROFILE = EntityProfile(
    collection="users",
    label="user",
    fields=(
        FieldSpec("name", TEXT),
        FieldSpec("age", NUMBER),
    ),
    missing_fields_message="name and age are required",
    stats=user_stats,
    read_model=UserRead,
    stats_model=UserStats,
    demo_records=(
        {"name": "Петр", "age": 16},
        {"name": "Иван", "age": 18},
        {"name": "Дарья", "age": 20},
        {"name": "Мария", "age": 22},
        {"name": "Алексей", "age": 25},
    ),
)

PRODUCT_PROFILE = EntityProfile(
    collection="products",
    label="product",
    fields=(
        FieldSpec("name", TEXT, update_policy=TRUTHY),
        FieldSpec("category", TEXT, update_policy=TRUTHY),
        FieldSpec("description", TEXT, update_policy=TRUTHY),
        FieldSpec("price", NUMBER),
        FieldSpec("stock", NUMBER, create_policy=PRESENT),
    ),
    missing_fields_message="all fields are required",
    stats=product_stats,
    read_model=ProductRead,
    stats_model=ProductStats,
    search_fields=("name", "category", "description"),
    demo_records=(
        {"name": "Ноутбук ASUS ROG", "category": "Электроника",
         "description": "Игровой ноутбук с RTX 4060, 16GB RAM, 512GB SSD", "price": 120000, "stock": 5},
        {"name": "Смартфон iPhone 15", "category": "Электроника",
         "description": "128GB, черный, A16 Bionic", "price": 89990, "stock": 10},
        {"name": "Наушники Sony WH-1000XM5", "category": "Аксессуары",
         "description": "Беспроводные, активное шумоподавление", "price": 29990, "stock": 7},
        {"name": "Книга \"JavaScript для детей\"", "category": "Книги",
         "description": "Основы программирования, 288 стр.", "price": 1200, "stock": 15},
        {"name": "Фитнес-браслет Xiaomi Mi Band 8", "category": "Электроника",
         "description": "Черный, AMOLED экран, пульсометр", "price": 3990, "stock": 20},
        {"name": "Рюкзак для ноутбука", "category": "Аксессуары",
         "description": "Водонепроницаемый, 15.6\", серый", "price": 4500, "stock": 8},
        {"name": "Кофеварка DeLonghi", "category": "Для дома",
         "description": "Капельная, 1.25л, таймер", "price": 6990, "stock": 3},
        {"name": "Монитор LG 27\" 4K", "category": "Электроника",
         "description": "IPS, HDR10, USB-C", "price": 32990, "stock": 4},
        {"name": "Клавиатура Logitech MX Keys", "category": "Аксессуары",
         "description": "Беспроводная, подсветка, для Mac/Windows", "price": 11990, "stock": 6},
        {"name": "Мышь Razer DeathAdder V2", "category": "Аксессуары",
         "description": "Игровая, проводная, 20000 DPI", "price": 5490, "stock": 12},
        {"name": "Внешний SSD Samsung T7 1TB", "category": "Электроника",
         "description": "USB 3.2, 1050MB/s, метал. корпус", "price": 8990, "stock": 9},
        {"name": "Чехол для iPhone 15", "category": "Аксессуары",
         "description": "Силиконовый, прозрачный, MagSafe", "price": 1290, "stock": 25},
    ),
)

PROFILES: Dict[str, EntityProfile] = {
    USER_PROFILE.collection: USER_PROFILE,
    PRODUCT_PROFILE.collection: PRODUCT_PROFILE,
}


def get_profile(name: Optional[str]) -> EntityProfile:
    """Return the profile registered under ``name`` (``users`` or ``products``)."""
    key = (name or "").strip().lower()
    try:
        return PROFILES[key]
    except KeyError:
        raise ValueError(
            f"Unknown record type {name!r}; expected one of: {', '.join(sorted(PROFILES))}"
        ) from None
