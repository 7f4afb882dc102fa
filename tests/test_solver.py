import math

import pytest

from weldshop.common import Order, PriceList, Product
from weldshop.solver import (
    IMPOSSIBLE_MESSAGE,
    RESULT_PREFIX,
    describe_result,
    main,
    min_weld_cost,
    solve_order,
)


def test_exact_product_is_used_directly():
    assert min_weld_cost([Product(3, 5, 150)], 3, 5, 1.0) == 150


def test_rotated_product_matches():
    assert min_weld_cost([Product(5, 3, 150)], 3, 5, 1.0) == 150


def test_exact_match_short_circuits_even_if_welding_is_cheaper():
    products = [Product(1, 1, 1), Product(2, 1, 100)]
    assert min_weld_cost(products, 2, 1, 0.0) == 100


def test_oversized_product_cannot_be_cut():
    assert min_weld_cost([Product(5, 5, 1)], 3, 3, 1.0) == math.inf


def test_odd_area_from_dominoes_is_impossible():
    assert min_weld_cost([Product(1, 2, 1)], 3, 3, 1.0) == math.inf


def test_two_unit_tiles_with_seam():
    assert min_weld_cost([Product(1, 1, 1)], 2, 1, 1.0) == 3


def test_square_from_four_squares():
    assert min_weld_cost([Product(2, 2, 1)], 4, 4, 1.0) == 12


@pytest.mark.parametrize("width,height", [(1, 1), (2, 3), (4, 4), (5, 2)])
def test_free_welding_sums_unit_tiles(width, height):
    price = 2.5
    assert min_weld_cost([Product(1, 1, price)], width, height, 0.0) == pytest.approx(
        width * height * price
    )


def test_welding_cost_never_below_free_welding():
    products = [Product(1, 1, 1), Product(2, 1, 1)]
    free = min_weld_cost(products, 4, 3, 0.0)
    paid = min_weld_cost(products, 4, 3, 1.0)
    assert paid >= free


def test_later_duplicate_product_overrides_earlier():
    products = [Product(2, 3, 10), Product(3, 2, 20)]
    assert min_weld_cost(products, 2, 3, 1.0) == 20


def test_negative_dimension_rejected():
    with pytest.raises(ValueError):
        min_weld_cost([Product(1, 1, 1)], -1, 2, 1.0)


def test_solve_order_fills_cost():
    price_list = PriceList(1).add(Product(2, 7, 125))
    order = Order(7, 2, 1.0)
    result = solve_order(price_list, order)
    assert result == 125
    assert order.cost == 125


def test_solve_order_impossible_sets_infinity():
    order = Order(3, 3, 1.0)
    solve_order(PriceList(1).add(Product(1, 2, 1)), order)
    assert order.cost == math.inf


def test_describe_result_success():
    order = Order(3, 5, 1.0)
    message = describe_result(order, [Product(3, 5, 150)])
    assert message == RESULT_PREFIX + "150"
    assert order.cost == 150


def test_describe_result_impossible():
    message = describe_result(Order(3, 3, 1.0), [Product(1, 2, 1)])
    assert message == IMPOSSIBLE_MESSAGE


def test_main_prints_four_verdicts(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert all(line.startswith(RESULT_PREFIX) for line in lines[:3])
    assert lines[3] == IMPOSSIBLE_MESSAGE