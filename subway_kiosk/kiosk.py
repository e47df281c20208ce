"""Interactive text front end for the subway ticket machine."""

from __future__ import annotations

import argparse
import math
from typing import Callable, Optional

from .fares import (
    MAX_TICKETS,
    MIN_TICKETS,
    NO_PRICE_YET,
    FareError,
    InsufficientPayment,
    make_change,
    quote,
)

WELCOME_TITLE = "欢迎使用地铁自动售票系统"
MENU_TITLE = "地铁自动售票系统 - 主菜单"
BUY_TITLE = "地铁自动售票系统 - 购票"
MAP_TITLE = "地铁线路示意图"
PAY_TITLE = "投币找零"

MENU_OPTIONS = (("1", "购票"), ("2", "地图查询"), ("3", "退出系统"))
BUY_OPTIONS = (("1", "计算票价"), ("2", "投币付款"), ("3", "返回主菜单"))

BAD_COUNT = f"购票张数须为 {MIN_TICKETS} 到 {MAX_TICKETS} 之间的整数！"
BAD_CHOICE = "无效的选择，请重新输入！"


class _Closed(Exception):
    """The input stream ended; the current screen is closed."""


def _format_amount(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(float(value))


def _parse_amount(text: str) -> float:
    try:
        value = float(text.strip())
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


class Kiosk:
    """A ticket machine driven by line input and line output."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ) -> None:
        self._input = input_func
        self._output = output_func

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError as exc:
            raise _Closed from exc

    def _choose(self, title: str, options) -> str:
        self._output(title)
        for key, label in options:
            self._output(f"  {key}. {label}")
        return self._ask("请选择：").strip()

    def run(self) -> int:
        """Show the welcome screen, then the main menu; return an exit status."""
        if self.welcome():
            self.menu()
        return 0

    def welcome(self) -> bool:
        """Show the welcome screen; return True if the user enters the system."""
        self._output(WELCOME_TITLE)
        try:
            self._ask("按回车键进入系统")
        except _Closed:
            return False
        return True

    def menu(self) -> None:
        """Run the main menu until the user exits."""
        actions = {"1": self.buy_ticket, "2": self.show_map}
        while True:
            try:
                choice = self._choose(MENU_TITLE, MENU_OPTIONS)
            except _Closed:
                return
            if choice == "3":
                return
            action = actions.get(choice)
            if action is None:
                self._output(BAD_CHOICE)
            else:
                action()

    def _calculate(self) -> Optional[int]:
        start = self._ask("起点站：")
        end = self._ask("终点站：")
        count_text = self._ask(f"购票张数（{MIN_TICKETS}-{MAX_TICKETS}）：").strip()
        try:
            count = int(count_text) if count_text else MIN_TICKETS
        except ValueError:
            self._output(BAD_COUNT)
            return None
        try:
            result = quote(start, end, count)
        except FareError as exc:
            self._output(BAD_COUNT if start.strip() and end.strip() else str(exc))
            return None
        self._output(f"票价：{_format_amount(result.total)} 元")
        return result.total

    def buy_ticket(self) -> None:
        """Run the ticket purchase screen until the user goes back."""
        price = 0
        while True:
            try:
                choice = self._choose(BUY_TITLE, BUY_OPTIONS)
                if choice == "1":
                    calculated = self._calculate()
                    if calculated is not None:
                        price = calculated
                elif choice == "2":
                    self.pay(price)
                elif choice == "3":
                    return
                else:
                    self._output(BAD_CHOICE)
            except _Closed:
                return

    def show_map(self) -> None:
        """Show the route map screen until the user goes back."""
        self._output(MAP_TITLE)
        try:
            self._ask("按回车键返回主菜单")
        except _Closed:
            return

    def pay(self, total: float) -> Optional[float]:
        """Take coins for ``total``; return the change, or None if not paid."""
        if total <= 0:
            self._output(NO_PRICE_YET)
            return None
        self._output(PAY_TITLE)
        self._output(f"应付金额：{_format_amount(total)} 元")
        while True:
            try:
                text = self._ask("请输入投币金额：")
            except _Closed:
                return None
            try:
                change = make_change(total, _parse_amount(text))
            except InsufficientPayment as exc:
                self._output(str(exc))
                continue
            self._output(f"出票成功！找零：{_format_amount(change)} 元")
            return change


def main(argv=None) -> int:
    """Start the ticket machine on the terminal."""
    parser = argparse.ArgumentParser(
        prog="subway-kiosk", description="Subway automatic ticket machine."
    )
    parser.parse_args(argv)
    try:
        return Kiosk(input, print).run()
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())