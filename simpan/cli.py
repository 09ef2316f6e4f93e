"""Interactive menu for storing, collecting and reviewing warehouse goods."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, TextIO

from simpan.storage import (
    DEFAULT_DATA_FILE,
    DEFAULT_HISTORY_FILE,
    Item,
    Warehouse,
    is_yes,
    sort_by_price,
)
from simpan.terminal import clear_screen

RULE = "=" * 40
WIDE_RULE = "=" * 60
INVALID_INPUT = "Input tidak valid, silakan coba lagi."
SORTED_NOTE = "Data telah diurutkan berdasarkan harga termurah."


def _title_box(title: str) -> str:
    return f"{RULE}\n{' ' * 8}{title}\n{RULE}\n"


def format_item_table(items: Iterable[Item]) -> str:
    """Render stored items as the listing table."""
    lines = [
        RULE,
        "Nama".ljust(25) + "Barang".ljust(15) + "ID".ljust(5) + "Harga".ljust(10) + " ",
        RULE,
    ]
    lines.extend(
        item.owner.ljust(25)
        + item.name.ljust(15)
        + str(item.id).ljust(5)
        + "Rp"
        + str(item.price).ljust(10)
        for item in items
    )
    return "\n".join(lines) + "\n"


def format_sorted_table(items: Iterable[Item]) -> str:
    """Render items ordered by ascending price, followed by a note."""
    lines = [
        WIDE_RULE,
        "Nama".ljust(20) + "Barang".ljust(20) + "ID".ljust(5) + "Harga".ljust(10),
        WIDE_RULE,
    ]
    lines.extend(
        item.owner.ljust(20)
        + item.name.ljust(20)
        + str(item.id).ljust(5)
        + f"Rp{item.price}"
        for item in sort_by_price(items)
    )
    lines.append("")
    lines.append(SORTED_NOTE)
    return "\n".join(lines) + "\n"


def format_history(items: Iterable[Item]) -> str:
    """Render collected items, one line each."""
    return "".join(
        f"Nama: {item.owner}, Barang: {item.name}, ID: {item.id}, Harga: Rp{item.price}\n"
        for item in items
    )


class Console:
    """Text menu driving a :class:`Warehouse` through prompts and answers."""

    def __init__(
        self,
        warehouse: Warehouse | None = None,
        input_func: Callable[..., str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.warehouse = warehouse if warehouse is not None else Warehouse()
        self._input = input_func if input_func is not None else input
        self.output = output if output is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._input("")

    def _ask_choice(self, prompt: str) -> str:
        return self._ask(prompt).strip()[:1]

    def _ask_int(self, prompt: str) -> int:
        while True:
            answer = self._ask(prompt).strip()
            try:
                return int(answer)
            except ValueError:
                self._write(INVALID_INPUT + "\n")

    def _error_box(self) -> None:
        self._write(
            f"{RULE}\n{' ' * 4}Mohon maaf Anda salah input\n\n\n"
            f"{' ' * 4}Mohon masukkan input kembali\n{RULE}\n"
        )

    def run(self) -> None:
        """Show the main menu until the user leaves or input runs out."""
        try:
            while self.menu():
                pass
        except (EOFError, KeyboardInterrupt):
            self._write("\n")

    def menu(self) -> bool:
        """Show the main menu once; return False when the user wants to quit."""
        clear_screen(self.output)
        self._write(
            f"{RULE}\n{' ' * 8}SELAMAT DATANG DI GUDANG\n{RULE}\n"
            "0. Logout\n"
            "1. Menambah item\n"
            "2. Mengambil item\n"
            "3. Mencari item\n"
            "4. Menampilkan item\n"
            "5. Histori\n"
            f"{RULE}\n"
        )
        choice = self._ask_choice("Mau ngapain    : ")
        self._write(RULE + "\n")
        actions = {
            "1": self.add_items,
            "2": self.take_item,
            "3": self.search_items,
            "4": self.show_items,
            "5": self.history_menu,
        }
        if choice == "0":
            return True
        action = actions.get(choice)
        if action is None:
            self._error_box()
            return True
        action()
        answer = self._ask_choice("Kembali ke menu? (y/n) : ")
        if answer in ("Y", "y"):
            return True
        if answer in ("N", "n"):
            return False
        self._error_box()
        return True

    def add_items(self) -> None:
        """Prompt for new goods and store each one with the next free id."""
        clear_screen(self.output)
        self._write(_title_box("Menambah Items"))
        while True:
            owner = self._ask("Nama Pelanggan : ").strip()
            name = self._ask("Nama Barang    : ").strip()
            self._write(f"ID Barang      : {self.warehouse.last_id() + 1}\n")
            price = self._ask_int("Harga Barang   : ")
            self.warehouse.add(owner, name, price)
            self._write(RULE + "\n")
            if not is_yes(self._ask("Ingin menambah barang lagi? (y/n): ")):
                return

    def take_item(self) -> None:
        """Ask for an id and, once confirmed, move matching goods to history."""
        clear_screen(self.output)
        self._write(_title_box("Mengambil Items"))
        answer = self._ask("Masukkan ID barang yang diambil: ").strip()
        try:
            item_id = int(answer)
        except ValueError:
            self._write(INVALID_INPUT + "\n")
            return
        taken = False
        try:
            matches = self.warehouse.find_by_id(item_id)
        except FileNotFoundError:
            self._write("File tidak ditemukan.\n")
            matches = []
        for item in matches:
            self._write(
                f"Nama Pengguna  : {item.owner}\n"
                f"Nama Barang    : {item.name}\n"
                f"ID Barang      : {item.id}\n"
                f"Harga Barang   : Rp{item.price}\n"
            )
            confirm = self._ask_choice(
                f"Apakah {item.owner} yakin ingin mengambil barang ini?(y/n) : \n"
            )
            if confirm in ("Y", "y"):
                self._write(
                    f"Barang milik {item.owner} dengan ID {item_id} telah diambil.\n"
                )
                self.warehouse.take(item)
                taken = True
            elif confirm in ("N", "n"):
                self._write("Pengambilan dibatalkan.\n")
        if not taken:
            self._write(f"Tidak ada barang dengan ID {item_id}\n")

    def search_items(self) -> None:
        """List the goods belonging to a client."""
        clear_screen(self.output)
        self._write(_title_box("Mencari Items"))
        owner = self._ask("Masukkan nama client: ").strip()
        self._write(f"Barang milik {owner}:\n")
        try:
            found = self.warehouse.find_by_owner(owner)
        except FileNotFoundError:
            self._write("File tidak ditemukan\n")
            found = []
        for item in found:
            self._write(f"- {item.name} (ID: {item.id})( Harga: Rp{item.price})\n")
        if not found:
            self._write("Barang tidak ditemukan\n")

    def show_items(self) -> None:
        """Print every stored item."""
        clear_screen(self.output)
        self._write(_title_box("Menampilkan Items"))
        try:
            items = self.warehouse.items()
        except FileNotFoundError:
            self._write("File tidak ditemukan.\n")
            return
        self._write(format_item_table(items))

    def _show_history(self) -> None:
        try:
            self._write(format_history(self.warehouse.history()))
        except FileNotFoundError:
            self._write("Gagal membuka file histori.\n")

    def _show_profit(self) -> None:
        try:
            collected = self.warehouse.history()
        except FileNotFoundError:
            self._write("Gagal membuka file histori.\n")
            return
        for item in collected:
            self._write(f"Harga: Rp{item.price}\n")
        self._write("-" * 10 + " +\n")
        self._write(f"Total Keuntungan: Rp{sum(item.price for item in collected)}\n")

    def _show_sorted(self) -> None:
        try:
            self._write(format_sorted_table(self.warehouse.items()))
        except FileNotFoundError:
            self._write("ERROR: File tidak ditemukan.\n")

    def history_menu(self) -> None:
        """Sub-menu for the history of collected goods."""
        clear_screen(self.output)
        actions = {
            "1": self._show_history,
            "2": self._show_profit,
            "3": self._show_sorted,
        }
        while True:
            self._write(
                _title_box("Histori Items")
                + "1. Menampilkan Histori\n"
                "2. Menampilkan Total Keuntungan\n"
                "3. Sorting Histori \n"
                "4. Exit History\n"
            )
            choice = self._ask_choice("Pilih : ")
            if choice == "4":
                return
            action = actions.get(choice)
            if action is None:
                self._write("Input tidak sesuai.\n Tolong Input yang sesuai\n")
                continue
            action()
            self._write(RULE + "\n")
            if not is_yes(self._ask("Kembali ke menu histori? (y/n) : ")):
                return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive warehouse menu."""
    parser = argparse.ArgumentParser(
        prog="simpan", description="SIMpan BArang ONLINE warehouse menu."
    )
    parser.add_argument("--data", default=DEFAULT_DATA_FILE, help="stored goods file")
    parser.add_argument(
        "--history", default=DEFAULT_HISTORY_FILE, help="collected goods file"
    )
    args = parser.parse_args(argv)
    Console(Warehouse(args.data, args.history)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())