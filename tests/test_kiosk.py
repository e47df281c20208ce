import pytest

from subway_kiosk.kiosk import Kiosk, main


class Script:
    """Feeds scripted lines to the kiosk and records what it prints."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.output = []

    def read(self, prompt):
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def write(self, text):
        self.output.append(text)


def test_full_purchase_flow():
    script = Script(
        ["", "1", "1", "西单", "东单", "1", "2", "1", "5", "3", "3"]
    )
    kiosk = Kiosk(script.read, script.write)
    assert kiosk.run() == 0
    assert "票价：2 元" in script.output
    assert "投币不足，请继续投币！" in script.output
    assert "出票成功！找零：3 元" in script.output
    assert script.lines == []


def test_exit_from_menu_stops_reading():
    script = Script(["", "3", "1"])
    kiosk = Kiosk(script.read, script.write)
    assert kiosk.run() == 0
    assert script.lines == ["1"]


def test_closing_welcome_skips_menu():
    script = Script([])
    kiosk = Kiosk(script.read, script.write)
    assert kiosk.run() == 0
    assert script.output == ["欢迎使用地铁自动售票系统"]


def test_pay_before_calculating_warns():
    script = Script(["2", "3"])
    kiosk = Kiosk(script.read, script.write)
    kiosk.buy_ticket()
    assert "请先计算票价！" in script.output
    assert script.lines == []


def test_missing_station_warns():
    script = Script(["1", " ", "东单", "1", "3"])
    kiosk = Kiosk(script.read, script.write)
    kiosk.buy_ticket()
    assert "请输入起点和终点站名！" in script.output
    assert not any(line.startswith("票价") for line in script.output)


@pytest.mark.parametrize("count", ["0", "11", "two"])
def test_bad_ticket_count_is_rejected(count):
    script = Script(["1", "a", "b", count, "3"])
    kiosk = Kiosk(script.read, script.write)
    kiosk.buy_ticket()
    assert not any(line.startswith("票价") for line in script.output)
    assert any("购票张数" in line for line in script.output)


def test_empty_count_means_one_ticket():
    script = Script(["1", "西单", "东单", "", "3"])
    kiosk = Kiosk(script.read, script.write)
    kiosk.buy_ticket()
    assert "票价：2 元" in script.output


def test_pay_returns_change_and_treats_garbage_as_zero():
    script = Script(["abc", "4"])
    kiosk = Kiosk(script.read, script.write)
    change = kiosk.pay(4)
    assert change == 0
    assert "投币不足，请继续投币！" in script.output
    assert "应付金额：4 元" in script.output


def test_pay_closed_returns_none():
    script = Script(["1"])
    kiosk = Kiosk(script.read, script.write)
    assert kiosk.pay(2) is None
    assert script.output[-1] == "投币不足，请继续投币！"


def test_pay_without_price_returns_none():
    script = Script(["10"])
    kiosk = Kiosk(script.read, script.write)
    assert kiosk.pay(0) is None
    assert script.output == ["请先计算票价！"]
    assert script.lines == ["10"]


def test_show_map_prints_title():
    script = Script([""])
    kiosk = Kiosk(script.read, script.write)
    kiosk.show_map()
    assert script.output == ["地铁线路示意图"]
    assert script.lines == []


def test_menu_rejects_unknown_choice():
    script = Script(["9", "3"])
    kiosk = Kiosk(script.read, script.write)
    kiosk.menu()
    assert "无效的选择，请重新输入！" in script.output
    assert script.lines == []


def test_menu_opens_map_then_exits():
    script = Script(["2", "", "3"])
    kiosk = Kiosk(script.read, script.write)
    kiosk.menu()
    assert "地铁线路示意图" in script.output
    assert script.lines == []


def test_main_runs_on_stdin(monkeypatch, capsys):
    lines = iter(["", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    assert main([]) == 0
    assert "欢迎使用地铁自动售票系统" in capsys.readouterr().out