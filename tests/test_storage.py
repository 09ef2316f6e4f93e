import pytest

from simpan.storage import (
    Item,
    Warehouse,
    decode_name,
    encode_name,
    format_line,
    is_yes,
    parse_items,
    sort_by_price,
)


@pytest.fixture
def warehouse(tmp_path):
    return Warehouse(tmp_path / "dataGudang.txt", tmp_path / "histori.txt")


def test_encode_removes_spaces_and_decode_restores():
    name = "Budi Santoso Putra"
    encoded = encode_name(name)
    assert " " not in encoded
    assert decode_name(encoded) == name


def test_encode_pinned_value():
    assert encode_name("Rak Buku") == "Rak_Buku"


@pytest.mark.parametrize("answer", ["y", "Y", " y", "yes"])
def test_is_yes_true(answer):
    assert is_yes(answer) is True


@pytest.mark.parametrize("answer", ["n", "N", "", "x", "1"])
def test_is_yes_false(answer):
    assert is_yes(answer) is False


def test_parse_items_reads_records():
    items = parse_items("Budi Rak_Buku 1 5000\nSiti Meja 2 3000\n")
    assert items == [Item("Budi", "Rak Buku", 1, 5000), Item("Siti", "Meja", 2, 3000)]


def test_parse_items_stops_at_malformed_record():
    items = parse_items("a b 1 10\nc d x 20\ne f 3 30\n")
    assert items == [Item("a", "b", 1, 10)]


def test_parse_items_ignores_incomplete_tail():
    assert parse_items("a b 1 10 c d 2") == [Item("a", "b", 1, 10)]


def test_format_line_round_trip():
    item = Item("Budi Santoso", "Kabel Listrik", 7, 1200)
    assert parse_items(format_line(item)) == [item]


def test_sort_by_price_is_ascending_and_stable():
    items = [Item("a", "x", 1, 30), Item("b", "y", 2, 10), Item("c", "z", 3, 10)]
    result = sort_by_price(items)
    assert [i.price for i in result] == sorted(i.price for i in items)
    assert [i.id for i in result if i.price == 10] == [2, 3]


def test_last_id_without_file_is_zero(warehouse):
    assert warehouse.last_id() == 0


def test_add_assigns_increasing_ids(warehouse):
    first = warehouse.add("Budi", "Laptop", 9000)
    second = warehouse.add("Siti", "Printer", 4000)
    assert first.id == 1
    assert second.id == first.id + 1
    assert warehouse.items() == [first, second]
    assert warehouse.last_id() == second.id


def test_items_missing_file_raises(warehouse):
    with pytest.raises(FileNotFoundError):
        warehouse.items()


def test_find_by_id_and_owner(warehouse):
    a = warehouse.add("Budi Santoso", "Meja", 100)
    b = warehouse.add("Siti", "Kursi", 200)
    c = warehouse.add("Budi Santoso", "Lampu", 50)
    assert warehouse.find_by_id(b.id) == [b]
    assert warehouse.find_by_id(c.id + 10) == []
    assert warehouse.find_by_owner("Budi Santoso") == [a, c]


def test_take_records_history_and_keeps_stock(warehouse):
    item = warehouse.add("Budi", "Proyektor", 700)
    warehouse.take(item)
    assert warehouse.history() == [item]
    assert warehouse.items() == [item]


def test_total_profit(warehouse):
    assert warehouse.total_profit() == 0
    x = warehouse.add("a", "b", 150)
    y = warehouse.add("c", "d", 250)
    warehouse.take(x)
    warehouse.take(y)
    assert warehouse.total_profit() == x.price + y.price


def test_history_missing_raises(warehouse):
    with pytest.raises(FileNotFoundError):
        warehouse.history()


def test_sorted_items(warehouse):
    warehouse.add("a", "b", 300)
    warehouse.add("c", "d", 100)
    warehouse.add("e", "f", 200)
    prices = [i.price for i in warehouse.sorted_items()]
    assert prices == sorted(prices)
    assert len(prices) == len(warehouse.items())