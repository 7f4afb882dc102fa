import pytest

from weldshop.common import (
    Customer,
    Order,
    OrderList,
    PriceList,
    Producer,
    Product,
)


def test_price_list_add_chains_and_keeps_order():
    first = Product(1, 1, 10)
    second = Product(2, 7, 120)
    price_list = PriceList(3)
    returned = price_list.add(first).add(second)
    assert returned is price_list
    assert price_list.products == [first, second]
    assert price_list.material_id == 3


def test_price_lists_do_not_share_products():
    a = PriceList(1)
    b = PriceList(1)
    a.add(Product(2, 2, 5.0))
    assert b.products == []


def test_order_cost_defaults_to_zero():
    order = Order(7, 12, 1.0)
    assert order.cost == 0.0
    assert (order.width, order.height, order.welding_strength) == (7, 12, 1.0)


def test_order_list_add_chains():
    orders = OrderList(1)
    o1 = Order(1, 1, 0.0)
    o2 = Order(8, 4, 10.0)
    assert orders.add(o1).add(o2) is orders
    assert orders.orders == [o1, o2]


def test_producer_is_abstract():
    with pytest.raises(TypeError):
        Producer()


def test_customer_is_abstract():
    with pytest.raises(TypeError):
        Customer()


def test_order_list_carries_orders_through_a_customer():
    demand = OrderList(4).add(Order(2, 3, 1.0)).add(Order(5, 1, 0.5))

    class OneShotCustomer(Customer):
        def __init__(self, pending):
            self.pending = [pending]
            self.done = []

        def wait_for_demand(self):
            return self.pending.pop() if self.pending else None

        def completed(self, order_list):
            self.done.append(order_list)

    customer = OneShotCustomer(demand)
    received = customer.wait_for_demand()
    assert received.material_id == 4
    assert [(o.width, o.height) for o in received.orders] == [(2, 3), (5, 1)]
    assert customer.wait_for_demand() is None
    customer.completed(received)
    assert customer.done == [demand]


def test_products_compare_by_value():
    assert Product(3, 4, 7.5) == Product(3, 4, 7.5)
    assert Product(3, 4, 7.5) != Product(4, 3, 7.5)
    price_list = PriceList(2).add(Product(3, 4, 7.5))
    assert price_list.products == [Product(3, 4, 7.5)]