"""Rich 기반 로깅과 진행바 설정.

콘솔 출력은 ``RichHandler`` 가, 파일 출력은 타임스탬프가 붙은 로그 파일이 담당한다.
라이브러리로 사용할 때는 ``setup_logging()`` 을 호출하지 않으므로 아무 핸들러도
추가되지 않는다.
"""

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from text_tagger.constants import LOGS_DIR

FILE_LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
CONSOLE_TIME_FORMAT = "%H:%M:%S"

_console = Console()


def get_console() -> Console:
    """CLI 전체에서 공유하는 Rich 콘솔."""
    return _console


def create_progress(console: Console | None = None, *, disable: bool = False) -> Progress:
    """문서 단위 진행바. 완료되면 화면에서 지운다."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console or _console,
        transient=True,
        disable=disable,
    )


def _console_handler(console: Console) -> logging.Handler:
    handler = RichHandler(
        console=console,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        log_time_format=CONSOLE_TIME_FORMAT,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _file_handler(log_dir: Path, format_string: str) -> tuple[logging.Handler, Path]:
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"tagger_{datetime.now():%Y%m%d_%H%M%S}.log"
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(format_string))
    return handler, log_file


def setup_logging(
    level: int = logging.INFO,
    *,
    log_to_file: bool = True,
    log_dir: Path | None = None,
    format_string: str = FILE_LOG_FORMAT,
    console: Console | None = None,
) -> Path | None:
    """루트 로거에 콘솔/파일 핸들러를 붙인다.

    루트 로거에 이미 핸들러가 있으면 레벨만 바꾸고 핸들러는 추가하지 않는다.

    Args:
        level: 로깅 레벨
        log_to_file: 로그 파일 생성 여부
        log_dir: 로그 파일 디렉토리 (None이면 ``LOGS_DIR``)
        format_string: 파일 로그 포맷
        console: 콘솔 핸들러가 출력할 Rich 콘솔

    Returns:
        생성된 로그 파일 경로 (파일 로깅을 하지 않으면 None)
    """
    root = logging.getLogger()
    root.setLevel(level)
    if root.handlers:
        return None

    root.addHandler(_console_handler(console or _console))
    if not log_to_file:
        return None

    handler, log_file = _file_handler(log_dir or LOGS_DIR, format_string)
    root.addHandler(handler)
    root.debug("📝 로그 파일: %s", log_file)
    return log_file


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
