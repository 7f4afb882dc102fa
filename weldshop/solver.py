"""Minimum welding cost of a plate assembled from purchasable products."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Sequence

from .common import Order, PriceList, Product

IMPOSSIBLE_MESSAGE = "It is not possible to fill the grid with the given tiles."
RESULT_PREFIX = "The minimum price to fill the grid is: "


def min_weld_cost(
    products: Iterable[Product],
    width: int,
    height: int,
    welding_strength: float,
) -> float:
    """Return the cheapest cost of a ``width`` x ``height`` plate, or ``math.inf``.

    Plates can only be welded together, never cut, and may be rotated. Welding
    two plates along an edge of length ``n`` costs ``n * welding_strength``.
    """
    if width < 0 or height < 0:
        raise ValueError("plate dimensions must not be negative")

    memo = [[math.inf] * (height + 1) for _ in range(width + 1)]
    for product in products:
        if product.width <= width and product.height <= height:
            memo[product.width][product.height] = product.cost
        if product.height <= width and product.width <= height:
            memo[product.height][product.width] = product.cost

    if memo[width][height] != math.inf:
        return memo[width][height]

    for w, column in enumerate(memo):
        for h in range(height + 1):
            here = column[h]
            if here == math.inf:
                continue

            # Weld a plate of the same height to the right.
            seam = welding_strength * h
            for i in range(1, min(w, width - w) + 1):
                other = memo[i][h]
                if other != math.inf:
                    memo[w + i][h] = min(memo[w + i][h], here + other + seam)

            # Weld a plate of the same width underneath.
            seam = welding_strength * w
            for j in range(1, min(h, height - h) + 1):
                other = column[j]
                if other != math.inf:
                    column[h + j] = min(column[h + j], here + other + seam)

    return memo[width][height]


def solve_order(price_list: PriceList, order: Order) -> float:
    """Fill in ``order.cost`` from the price list and return it."""
    order.cost = min_weld_cost(
        price_list.products, order.width, order.height, order.welding_strength
    )
    return order.cost


def describe_result(order: Order, products: Sequence[Product]) -> str:
    """Solve the order and return a one-line human-readable verdict."""
    cost = min_weld_cost(products, order.width, order.height, order.welding_strength)
    order.cost = cost
    if cost == math.inf:
        return IMPOSSIBLE_MESSAGE
    return f"{RESULT_PREFIX}{cost:g}"


_DEMO = (
    (Order(4, 4, 1.0), (Product(1, 1, 1),)),
    (Order(4, 4, 1.0), (Product(2, 2, 1),)),
    (
        Order(10, 9, 1.0),
        (
            Product(4, 2, 1),
            Product(4, 7, 1),
            Product(6, 5, 1),
            Product(6, 1, 1),
            Product(6, 3, 1),
        ),
    ),
    (Order(3, 3, 1.0), (Product(1, 2, 1),)),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the verdicts for a fixed set of sample orders."""
    del argv
    for order, products in _DEMO:
        sample = Order(order.width, order.height, order.welding_strength)
        sys.stdout.write(describe_result(sample, products) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())