import subprocess
import sys

import pytest

from warungkasir.models import all_makanan, all_snack
from warungkasir.terminal import clear_terminal, paginate


@pytest.fixture
def run_calls(monkeypatch):
    calls = []

    def fake_run(command, **kwargs):
        calls.append(list(command))

    monkeypatch.setattr(subprocess, "run", fake_run)
    return calls


def feed(monkeypatch, *lines):
    remaining = iter(lines)

    def fake_input(prompt=""):
        print(prompt, end="")
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_clear_on_linux_runs_clear(monkeypatch, run_calls, capsys):
    monkeypatch.setattr(sys, "platform", "linux")
    clear_terminal()
    assert run_calls == [["clear"]]
    assert capsys.readouterr().out == ""


def test_clear_on_windows_runs_cls(monkeypatch, run_calls, capsys):
    monkeypatch.setattr(sys, "platform", "win32")
    clear_terminal()
    assert run_calls == [["cmd", "/c", "cls"]]
    assert capsys.readouterr().out == ""


def test_clear_elsewhere_prints_escape(monkeypatch, run_calls, capsys):
    monkeypatch.setattr(sys, "platform", "sunos5")
    clear_terminal()
    assert run_calls == []
    assert capsys.readouterr().out == "\033[H\033[2J"


def test_clear_ignores_missing_command(monkeypatch, capsys):
    def failing_run(command, **kwargs):
        raise FileNotFoundError(command[0])

    monkeypatch.setattr(subprocess, "run", failing_run)
    monkeypatch.setattr(sys, "platform", "linux")
    clear_terminal()
    assert capsys.readouterr().out == ""


def test_pick_first_item(monkeypatch, run_calls):
    items = all_makanan()
    feed(monkeypatch, "1")
    assert paginate("Menu", items, 5) == items[0]


def test_zero_returns_none(monkeypatch, run_calls):
    feed(monkeypatch, "0")
    assert paginate("Menu", all_makanan(), 5) is None


def test_end_of_input_returns_none(monkeypatch, run_calls):
    feed(monkeypatch)
    assert paginate("Menu", all_makanan(), 5) is None


def test_first_page_shows_only_first_items(monkeypatch, run_calls, capsys):
    items = all_makanan()
    feed(monkeypatch, "0")
    paginate("Judul", items, 5)
    out = capsys.readouterr().out
    assert "Judul" in out
    assert "-" * 30 in out
    assert f"5. {items[4].name} - Rp {items[4].price}" in out
    assert f"6. {items[5].name}" not in out


def test_next_page_then_pick(monkeypatch, run_calls, capsys):
    items = all_makanan()
    feed(monkeypatch, ">", "6")
    assert paginate("Menu", items, 5) == items[5]
    out = capsys.readouterr().out
    assert f"6. {items[5].name} - Rp {items[5].price}" in out


def test_number_from_other_page_is_accepted(monkeypatch, run_calls):
    items = all_snack()
    feed(monkeypatch, str(len(items)))
    assert paginate("Menu", items, 5) == items[-1]


def test_prev_on_first_page_stays(monkeypatch, run_calls, capsys):
    items = all_makanan()
    feed(monkeypatch, "<", "0")
    paginate("Menu", items, 5)
    out = capsys.readouterr().out
    assert out.count(f"1. {items[0].name}") == 2


def test_next_on_last_page_stays(monkeypatch, run_calls, capsys):
    items = all_makanan()[:3]
    feed(monkeypatch, ">", "0")
    paginate("Menu", items, 5)
    out = capsys.readouterr().out
    assert out.count(f"1. {items[0].name}") == 2


def test_next_then_prev_returns_to_first_page(monkeypatch, run_calls, capsys):
    items = all_makanan()
    feed(monkeypatch, ">", "<", "0")
    paginate("Menu", items, 5)
    out = capsys.readouterr().out
    assert out.count(f"1. {items[0].name}") == 2
    assert out.count(f"6. {items[5].name}") == 1


@pytest.mark.parametrize("bad", ["abc", "99", "-1", "1_0"])
def test_invalid_choice_reports_and_continues(monkeypatch, run_calls, capsys, bad):
    feed(monkeypatch, bad, "0")
    assert paginate("Menu", all_makanan(), 5) is None
    assert "❌ Pilihan tidak valid" in capsys.readouterr().out


def test_input_is_stripped(monkeypatch, run_calls):
    items = all_makanan()
    feed(monkeypatch, "  2  ")
    assert paginate("Menu", items, 5) == items[1]


def test_per_page_must_be_positive():
    with pytest.raises(ValueError):
        paginate("Menu", all_makanan(), 0)


def test_each_screen_clears_terminal(monkeypatch, run_calls):
    monkeypatch.setattr(sys, "platform", "linux")
    feed(monkeypatch, ">", "0")
    result = paginate("Menu", all_makanan(), 5)
    assert result is None
    assert run_calls == [["clear"], ["clear"]]