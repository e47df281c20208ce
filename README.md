# subway-kiosk

A small subway ticket vending machine that runs in the terminal. Its screens
and prompts are in Chinese. It works like this:

1. A welcome screen. Press Enter to go in.
2. A main menu with three choices: buy tickets (`1`), view the line map (`2`),
   or exit (`3`).
3. A purchase screen with three choices of its own: calculate the fare (`1`),
   pay with coins (`2`), or go back to the main menu (`3`). To calculate the
   fare you enter the start station, the end station and the number of tickets.
   The number of tickets must be from 1 to 10. If you leave it blank, you get 1.
4. A coin payment step. It shows the amount due and keeps asking for money
   until you have paid enough. Then it prints your change. Input that is not a
   number counts as no money. If you choose to pay before any fare has been
   calculated, it asks you to calculate the fare first.

If you give an invalid menu choice, it says so and asks again. When the input
ends (end of file), the current screen closes. Ctrl-C stops the program with
exit status 130.

## Installing

```
pip install .
```

## Running

```
subway-kiosk
```

The command takes no options apart from `--help`.

## Fare rules

The fare depends on a simulated distance between the start and end stations.
That distance is the difference in the lengths of the two station names, plus 3.
Surrounding whitespace is removed from the names first.

| Simulated distance | Price per ticket |
|--------------------|------------------|
| 3 or less          | 2 yuan           |
| 4 to 6             | 3 yuan           |
| more than 6        | 4 yuan           |

The total is the price per ticket multiplied by the number of tickets.

## Using it as a library

```python
from subway_kiosk.fares import quote, make_change

q = quote("人民广场", "陆家嘴", 2)
print(q.distance, q.unit_price, q.total)   # 4 3 6
print(make_change(q.total, 10))            # 4
```

The module `subway_kiosk.fares` provides the following:

- `simulated_distance(start, end)` and `unit_price(distance)` apply the rules
  above.
- `quote(start, end, count)` returns a frozen `Quote`. Its fields are `start`,
  `end`, `count`, `distance` and `unit_price`, and it has a `total` property.
  It raises `FareError` in these cases:
  - a station name is blank;
  - the count is not an integer;
  - the count is outside 1 to 10.
- `make_change(total, paid)` returns `paid - total`. It raises `FareError` if
  the total is not positive. It raises `InsufficientPayment` if the amount
  paid is less than the total. `InsufficientPayment` is a subclass of
  `FareError` and has `total`, `paid` and `shortfall`.

You can run the whole kiosk with your own input and output.
`subway_kiosk.kiosk.Kiosk(input_func, output_func)` takes two functions:

- a function that takes a prompt and returns a line, like `input`;
- a function that takes a line and writes it out, like `print`.

`run()` goes through the welcome screen and the main menu, then returns 0. You
can also drive single screens with `welcome()`, `menu()`, `buy_ticket()`,
`show_map()` and `pay(total)`. `pay(total)` returns the change, or `None` if
nothing was paid.

## What it does not do

- The map screen shows only its title. It has no line map picture or route
  data.
- There is no real network of stations. Fares come only from the
  name-length rule above.
- Tickets are not stored, printed or recorded anywhere.

## Tests

```
pip install .[test]
pytest
```