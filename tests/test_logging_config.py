"""로깅 설정 테스트."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from rich.console import Console

from text_tagger.utils.logging_config import setup_logging


@contextmanager
def isolated_root_logger() -> Iterator[logging.Logger]:
    """핸들러가 없는 루트 로거로 실행한 뒤 원래 핸들러와 레벨을 복원한다."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def quiet_console() -> Console:
    return Console(file=io.StringIO())


def test_setup_logging_returns_log_file(tmp_path: Path):
    """파일 로깅을 켜면 log_dir 아래 생성된 로그 파일 경로를 돌려준다."""
    with isolated_root_logger() as root:
        log_file = setup_logging(logging.DEBUG, log_dir=tmp_path, console=quiet_console())

        assert log_file is not None
        assert log_file.parent == tmp_path
        assert log_file.name.startswith("tagger_")
        assert log_file.exists()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2


def test_setup_logging_without_file(tmp_path: Path):
    with isolated_root_logger() as root:
        log_file = setup_logging(log_to_file=False, log_dir=tmp_path, console=quiet_console())

        assert log_file is None
        assert len(root.handlers) == 1
    assert not any(tmp_path.iterdir())


def test_setup_logging_only_updates_level_when_configured(tmp_path: Path):
    """이미 핸들러가 있으면 레벨만 바꾸고 파일을 만들지 않는다."""
    with isolated_root_logger() as root:
        existing = logging.NullHandler()
        root.addHandler(existing)

        assert setup_logging(logging.WARNING, log_dir=tmp_path) is None
        assert root.handlers == [existing]
        assert root.level == logging.WARNING
    assert not any(tmp_path.iterdir())
