"""tagger 명령줄 파서.

전역 옵션(로깅, 배너)과 서브커맨드를 등록하고, 숫자 인자 검증기를 제공한다.
파싱 오류는 Rich 패널로 출력한 뒤 종료 코드 2로 끝난다.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn

from rich.console import Console
from rich.panel import Panel

from text_tagger.constants import MIN_PHRASE_TOKENS

if TYPE_CHECKING:
    from text_tagger.commands.base import Command

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliHelpFormatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawTextHelpFormatter):
    """기본값을 함께 보여주고 줄바꿈을 유지하는 도움말 포맷터."""


class CliArgumentParser(argparse.ArgumentParser):
    """파싱 오류를 Rich 패널로 보여주는 파서.

    서브파서도 같은 클래스로 만들어지므로 콘솔은 생성 인자로 받지 않으면
    새 콘솔을 사용한다.
    """

    def __init__(self, console: Console | None = None, **kwargs: Any) -> None:
        self.console = console or Console(stderr=True)
        super().__init__(**kwargs)

    def error(self, message: str) -> NoReturn:
        self.console.print(
            Panel.fit(
                f"[bold red]{message}[/bold red]\n\n[dim]{self.prog} --help 로 사용법을 확인하세요[/dim]",
                title="⚠️  인자 오류",
                border_style="red",
            )
        )
        raise SystemExit(2)


def bounded_int(minimum: int) -> Callable[[str], int]:
    """*minimum* 이상의 정수만 받는 argparse ``type`` 함수를 만든다."""

    def parse(value: str) -> int:
        try:
            parsed = int(value)
        except ValueError as e:
            raise argparse.ArgumentTypeError(f"정수가 아닙니다: {value!r}") from e
        if parsed < minimum:
            raise argparse.ArgumentTypeError(f"{minimum} 이상이어야 합니다: {parsed}")
        return parsed

    parse.__name__ = f"int>={minimum}"
    return parse


non_negative_int = bounded_int(0)
positive_int = bounded_int(1)
_ngram_size = bounded_int(MIN_PHRASE_TOKENS)


def int_list(value: str) -> tuple[int, ...]:
    """쉼표로 구분된 n-gram 크기 목록을 파싱한다 (예: "2,3")."""
    sizes = tuple(_ngram_size(part.strip()) for part in value.split(",") if part.strip())
    if not sizes:
        raise argparse.ArgumentTypeError("n-gram 크기를 하나 이상 입력해야 합니다.")
    return sizes


def setup_parser(console: Console, commands: Iterable[type[Command]]) -> argparse.ArgumentParser:
    """전역 옵션과 *commands* 의 서브커맨드를 등록한 파서를 만든다."""
    parser = CliArgumentParser(
        console,
        prog="tagger",
        description="통계 기반 텍스트 태그 생성 CLI",
        formatter_class=CliHelpFormatter,
    )

    runtime = parser.add_argument_group("실행 환경")
    runtime.add_argument("--log-level", choices=LOG_LEVELS, default="INFO", help="콘솔 로깅 레벨")
    runtime.add_argument("--no-log-file", action="store_true", help="로그 파일을 만들지 않습니다")
    runtime.add_argument("--no-banner", action="store_true", help="시작 배너를 출력하지 않습니다")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="command")
    for command in commands:
        command.configure_parser(subparsers)

    return parser
