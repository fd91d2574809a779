"""tagger CLI 진입점.

인자 파싱 -> 로깅 설정 -> 커맨드 생성/실행 -> 결과 요약 출력 순서로 동작한다.
실패는 예외 종류별로 분류하여 Rich 패널로 보여주고 종료 코드로 돌려준다.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from functools import lru_cache
from time import perf_counter
from typing import Any, NamedTuple

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from text_tagger import __version__
from text_tagger.commands import Command, GenerateCommand, InflectCommand
from text_tagger.models import GeneratorOptions
from text_tagger.parser import setup_parser
from text_tagger.utils.logging_config import get_console, setup_logging

logger = logging.getLogger("text_tagger.cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

CommandFactory = Callable[[Console, argparse.Namespace], Command]


def _create_generate_command(console: Console, args: argparse.Namespace) -> GenerateCommand:
    options = GeneratorOptions(
        max_tags=args.max_tags,
        min_word_length=args.min_word_length,
        min_frequency=args.min_frequency,
        include_ngrams=not args.no_ngrams,
        ngram_sizes=tuple(args.ngram_sizes),
        min_ngram_size=args.min_ngram_size,
        max_ngram_size=args.max_ngram_size,
        case_sensitive=args.case_sensitive,
    )
    return GenerateCommand(
        console,
        options,
        text=args.text,
        inputs=args.input,
        input_dir=args.input_dir,
        text_key=args.text_key,
        encoding=args.encoding,
        output=args.output,
    )


def _create_inflect_command(console: Console, args: argparse.Namespace) -> InflectCommand:
    return InflectCommand(console, args.words, count=args.count, inclusive=args.inclusive)


# 서브커맨드 이름 -> (커맨드 클래스, 팩토리)
COMMANDS: dict[str, tuple[type[Command], CommandFactory]] = {
    GenerateCommand.name: (GenerateCommand, _create_generate_command),
    InflectCommand.name: (InflectCommand, _create_inflect_command),
}


def create_command(console: Console, args: argparse.Namespace) -> Command:
    """파싱된 인자로 커맨드 객체를 만든다.

    Raises:
        NotImplementedError: 등록되지 않은 커맨드인 경우
    """
    entry = COMMANDS.get(args.command)
    if entry is None:
        raise NotImplementedError(f"지원하지 않는 커맨드입니다: {args.command}")
    _, factory = entry
    return factory(console, args)


@lru_cache(maxsize=1)
def _banner_text() -> str:
    from pyfiglet import figlet_format

    return figlet_format("tagger", font="small").rstrip()


def print_banner(console: Console) -> None:
    console.print(Text(_banner_text(), style="bold magenta"))
    console.print(Text(f"text-tagger v{__version__}", style="dim"))


def format_time(elapsed: float) -> str:
    """경과 시간을 ms, 초, 분 단위 중 알맞은 단위로 표시한다."""
    if elapsed < 1:
        return f"{elapsed * 1000:.0f}ms"
    minutes, seconds = divmod(elapsed, 60)
    if not minutes:
        return f"{seconds:.2f}초"
    return f"{int(minutes)}분 {seconds:.1f}초"


def format_value(value: Any, limit: int = 120) -> str:
    """요약 표에 넣을 값을 문자열로 만든다. 컬렉션은 크기만 보여준다."""
    if isinstance(value, (list, tuple, dict, set)):
        text = f"{type(value).__name__}({len(value)})"
    else:
        text = str(value)
    return text if len(text) <= limit else text[: limit - 3] + "..."


def render_summary(command_name: str, elapsed: float, result: dict[str, Any]) -> Panel:
    """커맨드 실행 결과 요약 패널."""
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold cyan", no_wrap=True)
    table.add_column(style="yellow")
    table.add_row("⏱️  실행 시간", format_time(elapsed))
    for key, value in result.items():
        table.add_row(key.replace("_", " "), format_value(value))
    return Panel(table, title=f"[bold green]✅ {command_name}[/bold green]", border_style="green", expand=False)


class ErrorCategory(NamedTuple):
    label: str
    icon: str
    expected: bool


# 앞에서부터 isinstance 로 매칭하므로 구체적인 타입을 먼저 둔다
_ERROR_CATEGORIES: tuple[tuple[type[BaseException], ErrorCategory], ...] = (
    (FileNotFoundError, ErrorCategory("입력 파일 없음", "📁", True)),
    (UnicodeDecodeError, ErrorCategory("인코딩 오류", "🔤", True)),
    (ValueError, ErrorCategory("입력값 오류", "⚠️", True)),
    (NotImplementedError, ErrorCategory("미지원 기능", "🚧", True)),
    (OSError, ErrorCategory("입출력 오류", "💾", True)),
)
_UNEXPECTED = ErrorCategory("예기치 않은 오류", "❌", False)


def categorize_error(error: BaseException) -> ErrorCategory:
    for error_type, category in _ERROR_CATEGORIES:
        if isinstance(error, error_type):
            return category
    return _UNEXPECTED


def handle_error(error: Exception, command: str, elapsed: float, console: Console) -> None:
    """실패 원인을 로그로 남기고 오류 패널을 출력한다.

    예상된 오류는 메시지만, 예기치 않은 오류는 traceback 까지 기록한다.
    """
    category = categorize_error(error)
    if category.expected:
        logger.error("[%s] %s: %s", command, category.label, error)
    else:
        logger.exception("[%s] %s", command, category.label)

    details = Table.grid(padding=(0, 2))
    details.add_column(style="bold red", no_wrap=True)
    details.add_column()
    details.add_row("분류", f"{category.icon} {category.label}")
    details.add_row("예외", type(error).__name__)
    details.add_row("메시지", str(error))
    details.add_row("경과 시간", format_time(elapsed))

    hint = Text.assemble(("💡 ", "yellow"), (f"tagger {command} --help", "cyan"), (" 로 옵션을 확인하세요", "dim"))
    console.print(
        Panel(Group(details, Text(), hint), title=f"[bold red]{command} 실패[/bold red]", border_style="red")
    )


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """CLI 엔트리 포인트.

    Returns:
        종료 코드 (0: 성공, 1: 실행 오류, 2: 인자 오류, 130: 사용자 중단)
    """
    console = console or get_console()
    parser = setup_parser(console, [command_cls for command_cls, _ in COMMANDS.values()])
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return int(exc.code or 0)

    setup_logging(
        logging.getLevelName(args.log_level),
        log_to_file=not args.no_log_file,
        console=console,
    )
    if not args.no_banner:
        print_banner(console)

    start = perf_counter()
    try:
        command = create_command(console, args)
        logger.info("🚀 [%s] 시작", command.get_name())
        result = command.execute()
    except KeyboardInterrupt:
        logger.warning("⛔ 사용자 요청으로 중단되었습니다.")
        return EXIT_INTERRUPTED
    except Exception as e:
        handle_error(e, args.command, perf_counter() - start, console)
        return EXIT_FAILURE

    elapsed = perf_counter() - start
    logger.info("🏁 [%s] 완료 (%s)", command.get_name(), format_time(elapsed))
    console.print(render_summary(command.get_name(), elapsed, result))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
