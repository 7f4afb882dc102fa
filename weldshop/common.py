"""Shared data model: products, price lists, orders and the producer/customer roles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class Product:
    """A plate a producer sells: its dimensions and price."""

    width: int
    height: int
    cost: float


@dataclass
class PriceList:
    """The products one producer offers for one material."""

    material_id: int
    products: list[Product] = field(default_factory=list)

    def add(self, product: Product) -> PriceList:
        """Append a product and return the list, so calls can be chained."""
        self.products.append(product)
        return self


@dataclass
class Order:
    """A plate a customer wants welded; ``cost`` is filled in once solved."""

    width: int
    height: int
    welding_strength: float
    cost: float = 0.0


@dataclass
class OrderList:
    """A batch of orders for one material."""

    material_id: int
    orders: list[Order] = field(default_factory=list)

    def add(self, order: Order) -> OrderList:
        """Append an order and return the list, so calls can be chained."""
        self.orders.append(order)
        return self


class Producer(ABC):
    """Something that answers price-list requests, possibly later and from another thread."""

    @abstractmethod
    def send_price_list(self, material_id: int) -> None:
        """Ask for the price list of the given material."""


class Customer(ABC):
    """Something that issues order lists and is told when they are done."""

    @abstractmethod
    def wait_for_demand(self) -> OrderList | None:
        """Block until the next order list is available; ``None`` means no more demand."""

    @abstractmethod
    def completed(self, order_list: OrderList) -> None:
        """Receive an order list whose orders all have their cost filled in."""