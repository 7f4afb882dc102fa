"""A welding company that turns customer orders into priced plates using producers' price lists."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from .common import Customer, Order, OrderList, PriceList, Producer, Product
from .solver import solve_order


def merge_price_lists(price_lists: Iterable[PriceList]) -> list[Product]:
    """Merge products from several price lists, keeping the cheapest of each plate size.

    A plate and its rotation count as the same size. Products keep the order in
    which their size first appeared, and are copies of the originals.
    """
    merged: list[Product] = []
    by_size: dict[tuple[int, int], Product] = {}
    for price_list in price_lists:
        for product in price_list.products:
            key = (
                min(product.width, product.height),
                max(product.width, product.height),
            )
            existing = by_size.get(key)
            if existing is None:
                copy = replace(product)
                by_size[key] = copy
                merged.append(copy)
            else:
                existing.cost = min(existing.cost, product.cost)
    return merged


@dataclass
class MaterialInfo:
    """Price lists gathered for one material, and their merged form."""

    material_id: int
    price_lists: list[PriceList] = field(default_factory=list)
    complete: bool = False
    _senders: set[int] = field(default_factory=set, repr=False)
    _unified: PriceList | None = field(default=None, repr=False)

    def add(self, producer: Producer, price_list: PriceList) -> bool:
        """Record a producer's price list; return False if that producer already sent one."""
        key = id(producer)
        if key in self._senders:
            return False
        self._senders.add(key)
        self.price_lists.append(price_list)
        return True

    @property
    def sender_count(self) -> int:
        """Number of distinct producers whose price list has been recorded."""
        return len(self._senders)

    def unify(self) -> PriceList:
        """Return the merged price list, computing it on the first call only."""
        if self._unified is None:
            self._unified = PriceList(
                self.material_id, merge_price_lists(self.price_lists)
            )
        return self._unified


@dataclass(eq=False)
class _Package:
    customer: Customer
    order_list: OrderList
    price_list: PriceList
    total: int
    done: int = 0


class WeldingCompany:
    """Collects price lists from producers and prices customers' orders with worker threads."""

    def __init__(self) -> None:
        self.producers: list[Producer] = []
        self.customers: list[Customer] = []
        self._materials: dict[int, MaterialInfo] = {}
        self._lock = threading.Lock()
        self._price_lists_ready = threading.Condition(self._lock)
        self._work: queue.Queue[tuple[Order, _Package] | None] = queue.Queue()
        self._customer_threads: list[threading.Thread] = []
        self._worker_threads: list[threading.Thread] = []
        self._active_customers = 0
        self._worker_count = 0

    @staticmethod
    def using_progtest_solver() -> bool:
        """The company solves orders itself rather than through an external batch solver."""
        return False

    def add_producer(self, producer: Producer) -> None:
        """Register a producer; call before :meth:`start`."""
        self.producers.append(producer)

    def add_customer(self, customer: Customer) -> None:
        """Register a customer; call before :meth:`start`."""
        self.customers.append(customer)

    def add_price_list(self, producer: Producer, price_list: PriceList) -> None:
        """Accept a price list sent by a producer, from any thread."""
        with self._price_lists_ready:
            info = self._materials.setdefault(
                price_list.material_id, MaterialInfo(price_list.material_id)
            )
            info.add(producer, price_list)
            if info.sender_count == len(self.producers):
                info.complete = True
                self._price_lists_ready.notify_all()

    def material(self, material_id: int) -> MaterialInfo | None:
        """Return what is known about a material, if anything."""
        with self._lock:
            return self._materials.get(material_id)

    def start(self, thread_count: int) -> None:
        """Start one thread per customer and ``thread_count`` worker threads."""
        if thread_count < 0:
            raise ValueError("thread count must not be negative")
        self._active_customers = len(self.customers)
        self._worker_count = thread_count
        if not self.customers:
            self._lights_out()

        for customer in self.customers:
            thread = threading.Thread(target=self._serve_customer, args=(customer,))
            self._customer_threads.append(thread)
            thread.start()

        for _ in range(thread_count):
            thread = threading.Thread(target=self._work_loop)
            self._worker_threads.append(thread)
            thread.start()

    def stop(self) -> None:
        """Wait until every customer is served and every worker has finished."""
        for thread in self._customer_threads:
            thread.join()
        for thread in self._worker_threads:
            thread.join()
        self._customer_threads.clear()
        self._worker_threads.clear()

    def _lights_out(self) -> None:
        for _ in range(self._worker_count):
            self._work.put(None)

    def _serve_customer(self, customer: Customer) -> None:
        while True:
            order_list = customer.wait_for_demand()
            if order_list is None:
                break
            material_id = order_list.material_id

            with self._lock:
                known = material_id in self._materials
            if not known:
                # Producers may answer synchronously, so the lock must be free here.
                for producer in self.producers:
                    producer.send_price_list(material_id)

            with self._price_lists_ready:
                info = self._materials.setdefault(
                    material_id, MaterialInfo(material_id)
                )
                if not self.producers:
                    info.complete = True
                self._price_lists_ready.wait_for(lambda: info.complete)
                price_list = info.unify()

            package = _Package(
                customer, order_list, price_list, len(order_list.orders)
            )
            for order in order_list.orders:
                self._work.put((order, package))

        with self._lock:
            self._active_customers -= 1
            if self._active_customers == 0:
                self._lights_out()

    def _work_loop(self) -> None:
        while True:
            item = self._work.get()
            if item is None:
                break
            order, package = item
            solve_order(package.price_list, order)
            with self._lock:
                package.done += 1
                finished = package.done == package.total
            if finished:
                package.customer.completed(package.order_list)