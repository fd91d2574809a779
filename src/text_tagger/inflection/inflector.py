"""규칙 기반 단수/복수 변환기.

변환 우선순위:
    1. 불규칙 사전 (대소문자 무시 완전 일치)
    2. 불가산 단어 집합 -> 원형 그대로 반환
    3. 패턴 규칙 (나중에 등록된 규칙부터 검사, 첫 매치만 적용)

출력은 입력 단어의 대소문자 형태(소문자, 대문자, 첫 글자 대문자)를 따른다.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from text_tagger.inflection.rules import InflectionRuleSet, Rule, build_default_rule_set

_PLACEHOLDER_RE = re.compile(r"\$(\d{1,2})")


def restore_case(word: str, token: str) -> str:
    """*word* 의 대소문자 형태를 *token* 에 적용한다."""
    if word == token:
        return token
    if word == word.lower():
        return token.lower()
    if word == word.upper():
        return token.upper()
    if word[:1] == word[:1].upper():
        return token[:1].upper() + token[1:].lower()
    return token.lower()


def interpolate(template: str, match: re.Match[str]) -> str:
    """``$0``/``$n`` 자리표시자를 매치 결과로 치환한다."""

    def _group(placeholder: re.Match[str]) -> str:
        index = int(placeholder.group(1))
        if index > (match.re.groups or 0):
            return ""
        return match.group(index) or ""

    return _PLACEHOLDER_RE.sub(_group, template)


def apply_rule(word: str, rule: Rule) -> str:
    """규칙의 첫 매치를 치환하고 매치 부분의 대소문자를 복원한다."""
    pattern, template = rule

    def _replace(match: re.Match[str]) -> str:
        result = interpolate(template, match)
        if match.group(0) == "":
            # 빈 매치는 바로 앞 글자의 대소문자를 따른다
            return restore_case(word[match.start() - 1], result)
        return restore_case(match.group(0), result)

    return pattern.sub(_replace, word, count=1)


class Inflector:
    """단수/복수 변환기.

    규칙 집합은 읽기 전용으로만 사용하므로 하나의 인스턴스를
    여러 스레드에서 공유해도 안전하다.

    Attributes:
        rules: 사용할 불변 규칙 집합
    """

    def __init__(self, rules: InflectionRuleSet | None = None) -> None:
        self.rules = rules or build_default_rule_set()

    def inflect(self, word: str, count: int | None = None, inclusive: bool = False) -> str:
        """수량에 맞는 형태를 반환한다.

        *count* 가 1이면 단수형, 그 밖에는(None 포함) 복수형이다.
        *inclusive* 이고 수량이 주어지면 "3 ducks" 처럼 수량을 앞에 붙인다.
        """
        inflected = self.singular(word) if count == 1 else self.plural(word)
        if inclusive and count is not None:
            return f"{count} {inflected}"
        return inflected

    def plural(self, word: str) -> str:
        """단어의 복수형을 반환한다."""
        return self._replace_word(
            word, self.rules.irregular_singles, self.rules.irregular_plurals, self.rules.plural_rules
        )

    def singular(self, word: str) -> str:
        """단어의 단수형을 반환한다."""
        return self._replace_word(
            word, self.rules.irregular_plurals, self.rules.irregular_singles, self.rules.singular_rules
        )

    def is_plural(self, word: str) -> bool:
        return self._check_word(
            word, self.rules.irregular_singles, self.rules.irregular_plurals, self.rules.plural_rules
        )

    def is_singular(self, word: str) -> bool:
        return self._check_word(
            word, self.rules.irregular_plurals, self.rules.irregular_singles, self.rules.singular_rules
        )

    def _replace_word(
        self,
        word: str,
        replace_map: Mapping[str, str],
        keep_map: Mapping[str, str],
        rules: Sequence[Rule],
    ) -> str:
        token = word.lower()

        # 이미 목표 형태인 불규칙 단어
        if token in keep_map:
            return restore_case(word, token)

        if token in replace_map:
            return restore_case(word, replace_map[token])

        return self._sanitize_word(token, word, rules)

    def _check_word(
        self,
        word: str,
        replace_map: Mapping[str, str],
        keep_map: Mapping[str, str],
        rules: Sequence[Rule],
    ) -> bool:
        token = word.lower()
        if token in keep_map:
            return True
        if token in replace_map:
            return False
        return self._sanitize_word(token, token, rules) == token

    def _sanitize_word(self, token: str, word: str, rules: Sequence[Rule]) -> str:
        if not token or token in self.rules.uncountables:
            return word

        for rule in reversed(rules):
            if rule[0].search(word):
                return apply_rule(word, rule)

        return word
