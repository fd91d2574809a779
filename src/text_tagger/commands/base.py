"""서브커맨드 공통 베이스 클래스.

커맨드는 ``name``/``help`` 를 선언하고 ``add_arguments()`` 에서 자신의 옵션만 등록한다.
서브파서 생성과 도움말 포맷터 지정은 베이스 클래스가 맡는다.
"""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Protocol

from text_tagger.parser import CliHelpFormatter


class SubparsersLike(Protocol):
    """``add_subparsers()`` 반환값과 호환되는 프로토콜."""

    def add_parser(self, name: str, **kwargs: Any) -> argparse.ArgumentParser: ...


class Command(ABC):
    """태거 서브커맨드.

    Attributes:
        name: CLI 서브커맨드 이름
        help: 서브커맨드 한 줄 설명
    """

    name: ClassVar[str]
    help: ClassVar[str]

    @classmethod
    def configure_parser(cls, subparsers: SubparsersLike) -> argparse.ArgumentParser:
        """서브파서를 만들고 커맨드별 인자를 등록한다."""
        parser = subparsers.add_parser(cls.name, help=cls.help, formatter_class=CliHelpFormatter)
        cls.add_arguments(parser)
        return parser

    @staticmethod
    @abstractmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        """커맨드 전용 인자를 등록한다."""

    @abstractmethod
    def execute(self) -> dict[str, Any]:
        """커맨드를 실행하고 결과 요약을 반환한다."""

    def get_name(self) -> str:
        return self.name
