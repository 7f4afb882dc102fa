"""Randomised end-to-end exercise of the welding company with sample producers and customers."""

from __future__ import annotations

import argparse
import math
import random
import sys
import threading
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from typing import TextIO

from .common import Customer, Order, OrderList, PriceList, Producer, Product
from .company import WeldingCompany

Receiver = Callable[[Producer, PriceList], None]

DEFAULT_MAX_SIZE = 200
DEFAULT_MAX_COST = 500.0
DEFAULT_MAX_COUNT = 100
TOLERANCE = 1e-5


@dataclass
class Plate:
    """A purchasable plate used by the reference cost computation."""

    width: int
    height: int
    price: float


def min_cost(width: int, height: int, price: float, plates: Iterable[Plate]) -> float:
    """Reference minimum cost of a ``width`` x ``height`` plate, or ``math.inf``.

    Every split into two smaller plates is tried; a seam of length ``n`` costs
    ``n * price``. A plate with a zero dimension costs nothing.
    """
    if width < 0 or height < 0:
        raise ValueError("plate dimensions must not be negative")

    cheapest: dict[tuple[int, int], float] = {}
    for plate in plates:
        key = (min(plate.width, plate.height), max(plate.width, plate.height))
        cheapest[key] = min(cheapest.get(key, math.inf), plate.price)

    dp = [[math.inf] * (height + 1) for _ in range(width + 1)]
    for w in range(width + 1):
        for h in range(height + 1):
            if w == 0 or h == 0:
                dp[w][h] = 0.0
                continue

            best = cheapest.get((min(w, h), max(w, h)), math.inf)

            seam = h * price
            for k in range(1, w):
                left, right = dp[k][h], dp[w - k][h]
                if left != math.inf and right != math.inf:
                    best = min(best, left + right + seam)

            seam = w * price
            column = dp[w]
            for k in range(1, h):
                top, bottom = column[k], column[h - k]
                if top != math.inf and bottom != math.inf:
                    best = min(best, top + bottom + seam)

            dp[w][h] = best

    return dp[width][height]


def generate_products(count: int, rng: random.Random) -> list[Product]:
    """Return ``count`` random products with sides below the default maximum size."""
    return [
        Product(
            rng.randrange(DEFAULT_MAX_SIZE),
            rng.randrange(DEFAULT_MAX_SIZE),
            rng.uniform(0.0, DEFAULT_MAX_COST),
        )
        for _ in range(count)
    ]


def generate_orders(
    count: int, products: Sequence[Product], rng: random.Random
) -> list[tuple[Order, float]]:
    """Return ``count`` random orders paired with their reference cost from ``products``."""
    plates = [Plate(p.width, p.height, p.cost) for p in products]
    result: list[tuple[Order, float]] = []
    for _ in range(count):
        width = rng.randrange(DEFAULT_MAX_SIZE)
        height = rng.randrange(DEFAULT_MAX_SIZE)
        strength = rng.uniform(0.0, DEFAULT_MAX_COST)
        result.append(
            (Order(width, height, strength), min_cost(width, height, strength, plates))
        )
    return result


def _price_list(material_id: int, products: Iterable[Product]) -> PriceList:
    return PriceList(material_id, [replace(product) for product in products])


class SyncProducer(Producer):
    """Answers price-list requests for materials 0 to 2 immediately, on the caller's thread."""

    def __init__(self, receiver: Receiver, products: Sequence[Product]) -> None:
        self._receiver = receiver
        self._products = list(products)

    def send_price_list(self, material_id: int) -> None:
        if material_id > 2:
            return
        self._receiver(self, _price_list(material_id, self._products))


class AsyncProducer(Producer):
    """Answers requests for material 1 from its own thread, sending lists for materials 1 and 2."""

    def __init__(self, receiver: Receiver, products: Sequence[Product]) -> None:
        self._receiver = receiver
        self._products = list(products)
        self._cond = threading.Condition()
        self._requests = 0
        self._stopping = False
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start the thread that serves requests."""
        if self._thread is not None:
            raise RuntimeError("producer already started")
        self._thread = threading.Thread(target=self._run)
        self._thread.start()

    def stop(self) -> None:
        """Ask the serving thread to finish and wait for it."""
        with self._cond:
            self._stopping = True
            self._cond.notify()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def send_price_list(self, material_id: int) -> None:
        if material_id != 1:
            return
        with self._cond:
            self._requests += 1
            self._cond.notify()

    def _run(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._stopping or self._requests > 0)
                if self._stopping:
                    break
                self._requests -= 1
            self._receiver(self, _price_list(1, self._products))
            self._receiver(self, _price_list(2, self._products))


class TestCustomer(Customer):
    """Issues the same order list a fixed number of times and checks each completed result."""

    __test__ = False

    def __init__(
        self,
        count: int,
        orders: Sequence[tuple[Order, float]],
        output: TextIO | None = None,
    ) -> None:
        self._remaining = count
        self._orders = list(orders)
        self._output = output
        self._lock = threading.Lock()
        self.statuses: list[bool] = []

    def wait_for_demand(self) -> OrderList | None:
        if not self._remaining:
            return None
        self._remaining -= 1
        return OrderList(1, [replace(order, cost=0.0) for order, _ in self._orders])

    def completed(self, order_list: OrderList) -> None:
        out = self._output if self._output is not None else sys.stdout
        ok = True
        for (_, expected), order in zip(self._orders, order_list.orders):
            if _mismatch(expected, order.cost):
                out.write(f"is: {order.cost:f}, should be: {expected:f}: ERROR\n")
                ok = False
                break
        out.write(f"TestCustomer.completed, status = {'OK' if ok else 'fail'}\n")
        with self._lock:
            self.statuses.append(ok)


def _mismatch(expected: float, actual: float) -> bool:
    if expected == actual:
        return False
    if math.isinf(expected) or math.isinf(actual):
        return True
    return abs(expected - actual) > TOLERANCE * expected


def run_simulation(
    company: WeldingCompany,
    workers: int,
    async_producers: int,
    sync_producers: int,
    customers: int,
    rng: random.Random,
) -> list[TestCustomer]:
    """Wire random producers and customers to ``company``, run it to the end and return the customers."""
    async_products = generate_products(rng.randrange(DEFAULT_MAX_COUNT), rng)
    sync_products = generate_products(rng.randrange(DEFAULT_MAX_COUNT), rng)
    orders = generate_orders(
        rng.randrange(DEFAULT_MAX_COUNT), async_products + sync_products, rng
    )

    started: list[AsyncProducer] = []
    try:
        for _ in range(async_producers):
            producer = AsyncProducer(company.add_price_list, async_products)
            company.add_producer(producer)
            producer.start()
            started.append(producer)

        for _ in range(sync_producers):
            company.add_producer(SyncProducer(company.add_price_list, sync_products))

        test_customers = [
            TestCustomer(rng.randrange(DEFAULT_MAX_COUNT), orders)
            for _ in range(customers)
        ]
        for customer in test_customers:
            company.add_customer(customer)

        company.start(workers)
        company.stop()
    finally:
        for producer in started:
            producer.stop()

    return test_customers


def main(argv: Sequence[str] | None = None) -> int:
    """Run a randomised simulation and print each customer's verdicts."""
    parser = argparse.ArgumentParser(description="Exercise the welding company with random data.")
    parser.add_argument("--workers", type=int, default=3)
    parser.add_argument("--async-producers", type=int, default=1)
    parser.add_argument("--sync-producers", type=int, default=1)
    parser.add_argument("--customers", type=int, default=1)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    run_simulation(
        WeldingCompany(),
        args.workers,
        args.async_producers,
        args.sync_producers,
        args.customers,
        rng,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())