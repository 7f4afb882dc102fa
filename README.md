# weldshop

weldshop finds the cheapest way to build a rectangular plate by welding
together stock plates from a price list. It also includes a threaded company
simulation. In it, producers send price lists, customers place orders, and
worker threads price every order.

## The cost model

A stock plate of size `w × h` at price `p` can be used as it is or turned 90°.
Plates can be welded together but never cut. The cost of a seam depends on its
length:

- Two plates of equal height `h` welded side by side cost `h × welding_strength` for the seam.
- Two plates of equal width `w` stacked on top of each other cost `w × welding_strength` for the seam.

The cost of an order is the cheapest way to reach exactly the ordered size. If
no combination reaches that size, the cost is `math.inf`. Negative dimensions
raise `ValueError`.

If a price list has more than one entry of the same size, in either
orientation, `min_weld_cost` uses the one that comes last. The company merges
the lists before it prices anything (see below), so each size then has a single
entry at the cheapest price.

## Library use

```python
from weldshop.common import Product, PriceList, Order
from weldshop.solver import min_weld_cost, solve_order, describe_result

products = [Product(2, 2, 1.0)]
print(min_weld_cost(products, 4, 4, 1.0))

price_list = PriceList(1)
price_list.add(Product(1, 1, 10.0)).add(Product(2, 7, 120.0))
order = Order(7, 12, 1.0)
solve_order(price_list, order)      # fills in and returns order.cost
print(order.cost)

print(describe_result(Order(3, 3, 1.0), [Product(1, 2, 1)]))
```

### Data model

`weldshop.common` defines the data classes and the two roles:

- `Product`, with fields `width`, `height` and `cost`.
- `PriceList`, with fields `material_id` and `products`. Its `add` method returns the list so that calls can be chained.
- `Order`, with fields `width`, `height`, `welding_strength` and `cost`.
- `OrderList`, with fields `material_id` and `orders`. Its `add` method also chains.
- `Producer`, an abstract class with the method `send_price_list(material_id)`.
- `Customer`, an abstract class with the methods `wait_for_demand()` and `completed(order_list)`. `wait_for_demand()` returns `None` when the customer has no more orders.

### The company

`weldshop.company` holds the concurrent part.

`merge_price_lists(price_lists)` combines several price lists into one. Where
several entries share a plate size, in either orientation, the result keeps the
cheapest. Entries appear in the order in which their size first occurred.

`MaterialInfo` collects the price lists for one material. It accepts one list
per producer, and `unify()` returns the merged `PriceList`. The merge runs on
the first call only.

`WeldingCompany` works as follows:

- `add_producer` and `add_customer` register the participants. Call them before `start`.
- `start(thread_count)` starts one thread per customer and `thread_count` worker threads.
- For each order list from a customer whose material the company has not seen yet, the company asks every producer for a price list.
- The customer thread then waits until every producer has answered through `add_price_list(producer, price_list)`. The producers may answer synchronously or from their own threads.
- Once all the lists are in, the company merges them and hands each order to the workers.
- When every order in a list is priced, the customer's `completed` is called with that list.
- `stop()` waits until all customers are served and all workers have finished.
- `material(material_id)` returns the `MaterialInfo` the company has for that material, or `None` if it has none.
- `WeldingCompany.using_progtest_solver()` returns `False`. The company always prices orders itself with `solve_order`.

## Commands

```
weldshop-solve
```

Prints the verdict for each of four built-in example orders. The verdict is
either the minimum cost or a statement that the grid cannot be filled with the
given tiles.

```
weldshop-simulate [--workers N] [--async-producers N] [--sync-producers N] [--customers N] [--seed N]
```

Runs the full company simulation on random price lists and orders. Without
options it uses 3 workers, 1 asynchronous producer, 1 synchronous producer and
1 customer. `--seed` makes the run repeatable.

The producers answer as follows:

- Synchronous producers answer at once for materials 0 to 2.
- Asynchronous producers answer requests for material 1 from their own thread, and send lists for materials 1 and 2.

Each customer issues its order list a random number of times. It checks every
completed list against an independent reference computation
(`weldshop.tester.min_cost`) with a relative tolerance of `1e-5`. For each list
it prints `TestCustomer.completed, status = OK` or `status = fail`. A mismatch
also prints the value found and the expected value. The two computations do not
agree on every input, so some runs report `fail`.

`weldshop.tester.run_simulation` runs the same thing from Python. It returns
the customers, and each customer's `statuses` attribute holds one boolean per
completed list.

## What it does not do

- Orders are priced one at a time by the company's own worker threads. There is no hand-off to an external batch solver.
- Producers and customers exist only in memory. Nothing is read from or written to files, and nothing travels over a network.

## Tests

```
pip install -e .[test]
pytest
```