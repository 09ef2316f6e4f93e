# simpan

A small interactive warehouse ledger for the terminal. Customers leave items
in storage. Each item gets an owner, a name, the next free ID and a price.
Items can be listed, looked up by owner, and taken out by ID. Taking an item
out records it in a history file, and the history gives the total takings.

The menus and messages are in Indonesian.

## Installing

```
pip install .
```

## Running

```
simpan
simpan --data dataGudang.txt --history histori.txt
```

`--data` names the file of stored items. It defaults to `dataGudang.txt`.
`--history` names the file of taken items. It defaults to `histori.txt`.
Both paths are relative to the current directory.

The main menu offers:

- `1` add items. Enter the owner name, the item name and the price. The ID is one more than the ID of the last stored record. You can add several items in a row.
- `2` take an item by its ID. Each stored item with that ID is shown and, once you confirm, written to the history file.
- `3` search the items stored under one owner name. The name must match exactly.
- `4` list every stored item in a table.
- `5` history. This opens a sub-menu with these options:
  - list the taken items
  - show their prices and the total takings
  - list the stored items sorted from cheapest to dearest
  - go back
- `0` show the main menu again.

After each action the program asks whether to go back to the menu. Answer
`n` to quit. The program also stops when input ends or on Ctrl-C.

## File format

Each line of either file holds `owner item id price`, separated by
whitespace. Spaces in names are written as underscores and turned back into
spaces when read. Reading stops at the first record whose ID or price is not
an integer.

## Using it from Python

```python
from simpan.storage import Warehouse

warehouse = Warehouse("dataGudang.txt", "histori.txt")
item = warehouse.add("Budi Santoso", "Meja Kayu", 150000)
print(warehouse.find_by_owner("Budi Santoso"))
warehouse.take(item)
print(warehouse.total_profit())
```

`simpan.storage` provides:

- `Item`, a frozen dataclass with the fields `owner`, `name`, `id` and `price`.
- `Warehouse`, with these methods:
  - `items()` and `history()` read the two files. They raise `FileNotFoundError` if a file is missing.
  - `last_id()` returns the ID of the last stored record.
  - `add()` stores a new item.
  - `find_by_id()` and `find_by_owner()` look up stored items.
  - `take()` appends an item to the history file.
  - `total_profit()` sums the prices in the history.
  - `sorted_items()` returns the stored items ordered by price.
- Helpers for the file format: `parse_items`, `format_line`, `encode_name`, `decode_name` and `sort_by_price`.

`simpan.cli` provides:

- `Console`, the interactive menu. It takes a `Warehouse`, an input function and an output stream, so it can be driven from code.
- The table renderers `format_item_table`, `format_sorted_table` and `format_history`.

`simpan.terminal` provides:

- `header_text`, the coloured banner.
- `show_header`, which writes the banner to a stream.
- `clear_screen`, which clears the screen and redraws the banner.

## What it does not do

- There are no user accounts and no login. "Logout" in the menu only shows the main menu again.
- Taking an item out does not remove it from the data file. It stays listed there and can be taken again.
- Nothing can be edited or deleted except by editing the text files by hand.

## Tests

```
pip install .[test]
pytest
```