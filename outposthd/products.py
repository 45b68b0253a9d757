"""Moving products between product pools."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Protocol

Product = Hashable


class ProductPool(Protocol):
    """What a transfer needs from a pool of stored products."""

    def empty(self) -> bool: ...

    def at_capacity(self) -> bool: ...

    def available_storage(self) -> int: ...

    def count(self, product: Product) -> int: ...

    def store(self, product: Product, amount: int) -> None: ...

    def pull(self, product: Product, amount: int) -> None: ...


def transfer_products(
    source: ProductPool,
    destination: ProductPool,
    product_types: Iterable[Product],
    storage_required: Callable[[Product, int], int],
    storage_per_unit: Callable[[Product], int],
) -> None:
    """Move as many products as fit from ``source`` into ``destination``.

    Products are moved in the order of ``product_types``. A product is moved
    whole when it fits; otherwise as many whole units as the remaining
    storage allows are moved and the transfer goes on with the next product.
    """
    if source.empty() or destination.at_capacity():
        return

    for product in product_types:
        available = destination.available_storage()
        if available == 0:
            return

        amount = source.count(product)
        if available < storage_required(product, amount):
            amount = available // storage_per_unit(product)

        destination.store(product, amount)
        source.pull(product, amount)