import io

from simpan import terminal


def test_header_contains_title():
    assert "SIMpan BArang ONLINE" in terminal.header_text()


def test_header_starts_with_cyan_bold_and_ends_with_reset():
    text = terminal.header_text()
    assert text.startswith("\033[36m" + "\033[1m")
    assert text.endswith("\033[0m")


def test_header_contains_every_banner_line():
    text = terminal.header_text()
    assert all(line in text for line in terminal._BANNER_LINES)


def test_show_header_writes_header_text():
    out = io.StringIO()
    terminal.show_header(out)
    assert out.getvalue() == terminal.header_text()


def test_clear_screen_writes_escape_then_header():
    out = io.StringIO()
    terminal.clear_screen(out)
    assert out.getvalue() == "\033[2J\033[H\033[1;1H" + terminal.header_text()


def test_clear_screen_twice_repeats_output():
    out = io.StringIO()
    terminal.clear_screen(out)
    once = out.getvalue()
    terminal.clear_screen(out)
    assert out.getvalue() == once * 2