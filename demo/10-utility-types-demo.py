"""Typing utilities: dataclasses.replace, asdict, TypedDict totality, Mapping views."""

import random
from dataclasses import asdict, dataclass, fields, replace
from types import MappingProxyType
from typing import Literal, NotRequired, Required, TypedDict


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: float
    description: str
    in_stock: bool


# Partial: every key optional
class ProductUpdate(TypedDict, total=False):
    name: str
    price: float
    description: str
    in_stock: bool


# Required/NotRequired on individual keys
class ProductDraft(TypedDict, total=False):
    name: Required[str]
    price: Required[float]
    description: NotRequired[str]


ProductCategory = Literal["electronics", "clothing", "food"]


def update_product(product: Product, updates: ProductUpdate) -> Product:
    return replace(product, **updates)


def preview(product: Product) -> str:
    # Pick: only the fields a preview needs
    picked = {k: v for k, v in asdict(product).items() if k in ("id", "name", "price")}
    return f"{picked['name']} - £{picked['price']}"


def create_product(draft: ProductDraft) -> Product:
    # Omit: the caller never supplies an id
    return Product(
        id=random.Random(draft["name"]).randint(1, 999),
        name=draft["name"],
        price=draft["price"],
        description=draft.get("description", ""),
        in_stock=True,
    )


def main() -> None:
    laptop = Product(1, "Laptop", 999.99, "A fast laptop", True)

    print("=== Partial updates (dataclasses.replace) ===")
    updated = update_product(laptop, {"price": 899.99, "in_stock": False})
    print(f"Original: {laptop}")
    print(f"Updated:  {updated}")

    print("\n=== Readonly (frozen) ===")
    try:
        laptop.price = 1.0  # type: ignore[misc]
    except AttributeError as e:
        print(f"Cannot assign: {type(e).__name__}")

    print("\n=== Pick ===")
    print(preview(laptop))

    print("\n=== Omit / Required ===")
    mouse = create_product({"name": "Mouse", "price": 19.99})
    print(mouse)
    print(f"ProductDraft required keys: {sorted(ProductDraft.__required_keys__)}")
    print(f"ProductDraft optional keys: {sorted(ProductDraft.__optional_keys__)}")

    print("\n=== Record (dict keyed by Literal) ===")
    stock: dict[ProductCategory, int] = {"electronics": 42, "clothing": 17, "food": 99}
    for category, count in stock.items():
        print(f"{category}: {count}")

    print("\n=== Readonly mapping ===")
    frozen_stock = MappingProxyType(stock)
    try:
        frozen_stock["food"] = 0  # type: ignore[index]
    except TypeError as e:
        print(f"TypeError: {e}")

    print("\n=== Field introspection ===")
    print(f"Product fields: {[f.name for f in fields(Product)]}")


if __name__ == "__main__":
    main()
