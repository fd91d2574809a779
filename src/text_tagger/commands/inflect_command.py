"""단수/복수 변환 확인 커맨드.

중복 제거에 사용되는 변환 규칙이 단어를 어떻게 처리하는지 출력한다.
"""

from __future__ import annotations

import argparse
from typing import Any

from rich.console import Console
from rich.table import Table

from text_tagger.inflection import Inflector
from text_tagger.parser import non_negative_int

from .base import Command


class InflectCommand(Command):
    """단어별 단수형/복수형을 출력하는 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        words: 변환할 단어 목록
        count: 수량 (주어지면 수량에 맞는 형태 열을 추가)
        inclusive: 수량 형태 앞에 수량을 붙일지 여부
    """

    name = "inflect"
    help = "단수/복수 변환 확인"

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        parser.add_argument("words", nargs="+", help="변환할 단어")
        parser.add_argument("--count", type=non_negative_int, default=None, help="수량 (1이면 단수형, 그 외는 복수형)")
        parser.add_argument("--inclusive", action="store_true", help="수량 형태 앞에 수량을 붙입니다 (예: 3 ducks)")

    def __init__(
        self,
        console: Console,
        words: list[str],
        inflector: Inflector | None = None,
        count: int | None = None,
        inclusive: bool = False,
    ):
        self.console = console
        self.words = words
        self.inflector = inflector or Inflector()
        self.count = count
        self.inclusive = inclusive

    def execute(self) -> dict[str, Any]:
        table = Table(title="단수/복수 변환 결과", show_header=True, title_style="bold green")
        table.add_column("입력", style="bold cyan")
        table.add_column("단수형", style="yellow")
        table.add_column("복수형", style="yellow")
        table.add_column("복수 여부", style="dim", justify="center")
        if self.count is not None:
            table.add_column(f"수량 {self.count}", style="magenta")

        for word in self.words:
            row = [
                word,
                self.inflector.singular(word),
                self.inflector.plural(word),
                "✓" if self.inflector.is_plural(word) else "",
            ]
            if self.count is not None:
                row.append(self.inflector.inflect(word, self.count, self.inclusive))
            table.add_row(*row)

        self.console.print()
        self.console.print(table)
        self.console.print()
        return {"words": len(self.words)}
