"""Warehouse records kept in plain whitespace-separated text files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

DEFAULT_DATA_FILE = "dataGudang.txt"
DEFAULT_HISTORY_FILE = "histori.txt"

_INTEGER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Item:
    """One stored good: who owns it, what it is, its id and its price."""

    owner: str
    name: str
    id: int
    price: int


def encode_name(name: str) -> str:
    """Replace spaces with underscores so the name is a single token."""
    return name.replace(" ", "_")


def decode_name(name: str) -> str:
    """Turn underscores back into spaces."""
    return name.replace("_", " ")


def is_yes(answer: str) -> bool:
    """True when the answer's first non-blank character is 'y' or 'Y'."""
    stripped = answer.strip()
    return stripped[:1] in ("y", "Y")


def parse_items(text: str) -> list[Item]:
    """Read records of four tokens each, stopping at the first malformed one."""
    tokens = iter(text.split())
    items: list[Item] = []
    for owner, name, id_token, price_token in zip(tokens, tokens, tokens, tokens):
        if not (_INTEGER.fullmatch(id_token) and _INTEGER.fullmatch(price_token)):
            break
        items.append(
            Item(decode_name(owner), decode_name(name), int(id_token), int(price_token))
        )
    return items


def format_line(item: Item) -> str:
    """Render an item as one line of the storage format, without newline."""
    return f"{encode_name(item.owner)} {encode_name(item.name)} {item.id} {item.price}"


def sort_by_price(items: Iterable[Item]) -> list[Item]:
    """Return the items ordered by ascending price, keeping ties in order."""
    return sorted(items, key=lambda item: item.price)


class Warehouse:
    """Stored goods file plus the history file of goods already collected."""

    def __init__(
        self,
        data_path: str | Path = DEFAULT_DATA_FILE,
        history_path: str | Path = DEFAULT_HISTORY_FILE,
    ) -> None:
        self.data_path = Path(data_path)
        self.history_path = Path(history_path)

    @staticmethod
    def _read(path: Path) -> list[Item]:
        return parse_items(path.read_text(encoding="utf-8"))

    @staticmethod
    def _append(path: Path, item: Item) -> None:
        with path.open("a", encoding="utf-8") as handle:
            handle.write(format_line(item) + "\n")

    def items(self) -> list[Item]:
        """All stored items; raises FileNotFoundError if there is no data file."""
        return self._read(self.data_path)

    def last_id(self) -> int:
        """Id of the last stored record, or 0 when there is none."""
        try:
            stored = self.items()
        except FileNotFoundError:
            return 0
        return stored[-1].id if stored else 0

    def add(self, owner: str, name: str, price: int) -> Item:
        """Store a new item with the next free id and return it."""
        item = Item(owner, name, self.last_id() + 1, int(price))
        self._append(self.data_path, item)
        return item

    def find_by_id(self, item_id: int) -> list[Item]:
        """Every stored item whose id matches."""
        return [item for item in self.items() if item.id == item_id]

    def find_by_owner(self, owner: str) -> list[Item]:
        """Every stored item belonging to ``owner``."""
        return [item for item in self.items() if item.owner == owner]

    def take(self, item: Item) -> None:
        """Record that an item has been collected."""
        self._append(self.history_path, item)

    def history(self) -> list[Item]:
        """Collected items; raises FileNotFoundError if there is no history."""
        return self._read(self.history_path)

    def total_profit(self) -> int:
        """Sum of prices in the history, or 0 when there is no history."""
        try:
            return sum(item.price for item in self.history())
        except FileNotFoundError:
            return 0

    def sorted_items(self) -> list[Item]:
        """Stored items ordered by ascending price."""
        return sort_by_price(self.items())