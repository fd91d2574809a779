"""단수/복수 변환 규칙 집합.

규칙 집합은 ``InflectionRuleSetBuilder`` 로 등록 순서대로 구성한 뒤
``build()`` 로 불변 값(``InflectionRuleSet``)으로 고정한다. 고정된 규칙 집합은
프로세스 전역에서 공유되며, 동시 호출에서도 잠금 없이 읽을 수 있다.

패턴 규칙은 나중에 등록된 것부터 검사하므로, 일반 규칙을 먼저 등록하고
예외 규칙을 뒤에 등록한다. 치환 문자열은 ``$0`` (전체 매치), ``$1`` ... (그룹)
자리표시자를 사용하며, 매치되지 않은 그룹은 빈 문자열로 치환된다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Union

Rule = tuple[re.Pattern[str], str]
RuleSpec = Union[str, re.Pattern[str]]


def sanitize_rule(rule: RuleSpec) -> re.Pattern[str]:
    """문자열 규칙은 단어 전체에 대한 대소문자 무시 패턴으로 변환한다."""
    if isinstance(rule, str):
        return re.compile(f"^{rule}$", re.IGNORECASE)
    return rule


@dataclass(frozen=True, slots=True)
class InflectionRuleSet:
    """불변 단수/복수 변환 규칙 집합.

    Attributes:
        irregular_singles: 불규칙 단수 -> 복수
        irregular_plurals: 불규칙 복수 -> 단수
        plural_rules: 복수화 패턴 규칙 (등록 순서)
        singular_rules: 단수화 패턴 규칙 (등록 순서)
        uncountables: 변환하지 않는 불가산 단어 (소문자)
    """

    irregular_singles: Mapping[str, str]
    irregular_plurals: Mapping[str, str]
    plural_rules: tuple[Rule, ...]
    singular_rules: tuple[Rule, ...]
    uncountables: frozenset[str]


class InflectionRuleSetBuilder:
    """규칙을 등록 순서대로 모아 ``InflectionRuleSet`` 을 만든다."""

    def __init__(self) -> None:
        self._plural_rules: list[Rule] = []
        self._singular_rules: list[Rule] = []
        self._uncountables: set[str] = set()
        self._irregular_singles: dict[str, str] = {}
        self._irregular_plurals: dict[str, str] = {}

    def add_plural_rule(self, rule: RuleSpec, replacement: str) -> InflectionRuleSetBuilder:
        self._plural_rules.append((sanitize_rule(rule), replacement))
        return self

    def add_singular_rule(self, rule: RuleSpec, replacement: str) -> InflectionRuleSetBuilder:
        self._singular_rules.append((sanitize_rule(rule), replacement))
        return self

    def add_uncountable_rule(self, word: RuleSpec) -> InflectionRuleSetBuilder:
        """불가산 규칙을 추가한다.

        문자열은 단어 집합에 넣고, 정규식은 양방향 항등(``$0``) 규칙으로 등록한다.
        """
        if isinstance(word, str):
            self._uncountables.add(word.lower())
            return self
        self.add_plural_rule(word, "$0")
        self.add_singular_rule(word, "$0")
        return self

    def add_irregular_rule(self, single: str, plural: str) -> InflectionRuleSetBuilder:
        single = single.lower()
        plural = plural.lower()
        self._irregular_singles[single] = plural
        self._irregular_plurals[plural] = single
        return self

    def build(self) -> InflectionRuleSet:
        return InflectionRuleSet(
            irregular_singles=MappingProxyType(dict(self._irregular_singles)),
            irregular_plurals=MappingProxyType(dict(self._irregular_plurals)),
            plural_rules=tuple(self._plural_rules),
            singular_rules=tuple(self._singular_rules),
            uncountables=frozenset(self._uncountables),
        )


# ---------------------------------------------------------------------------
# 기본 규칙 테이블
# ---------------------------------------------------------------------------

IRREGULAR_RULES: tuple[tuple[str, str], ...] = (
    # 대명사
    ("I", "we"),
    ("me", "us"),
    ("he", "they"),
    ("she", "they"),
    ("them", "them"),
    ("myself", "ourselves"),
    ("yourself", "yourselves"),
    ("itself", "themselves"),
    ("herself", "themselves"),
    ("himself", "themselves"),
    ("themself", "themselves"),
    ("is", "are"),
    ("was", "were"),
    ("has", "have"),
    ("this", "these"),
    ("that", "those"),
    ("my", "our"),
    ("its", "their"),
    ("his", "their"),
    ("her", "their"),
    # 자음 + o 로 끝나는 단어
    ("echo", "echoes"),
    ("dingo", "dingoes"),
    ("volcano", "volcanoes"),
    ("tornado", "tornadoes"),
    ("torpedo", "torpedoes"),
    # -us
    ("genus", "genera"),
    ("viscus", "viscera"),
    # -ma
    ("stigma", "stigmata"),
    ("stoma", "stomata"),
    ("dogma", "dogmata"),
    ("lemma", "lemmata"),
    ("schema", "schemata"),
    ("anathema", "anathemata"),
    # 기타
    ("ox", "oxen"),
    ("axe", "axes"),
    ("die", "dice"),
    ("yes", "yeses"),
    ("foot", "feet"),
    ("eave", "eaves"),
    ("goose", "geese"),
    ("tooth", "teeth"),
    ("quiz", "quizzes"),
    ("human", "humans"),
    ("proof", "proofs"),
    ("carve", "carves"),
    ("valve", "valves"),
    ("looey", "looies"),
    ("thief", "thieves"),
    ("groove", "grooves"),
    ("pickaxe", "pickaxes"),
    ("passerby", "passersby"),
    ("canvas", "canvases"),
)

_I = re.IGNORECASE

PLURALIZATION_RULES: tuple[tuple[RuleSpec, str], ...] = (
    (re.compile(r"s?$", _I), "s"),
    (re.compile(r"[\u0080-\uffff]$", _I), "$0"),
    (re.compile(r"([^aeiou]ese)$", _I), "$1"),
    (re.compile(r"(ax|test)is$", _I), "$1es"),
    (re.compile(r"(alias|[^aou]us|t[lm]as|gas|ris)$", _I), "$1es"),
    (re.compile(r"(e[mn]u)s?$", _I), "$1s"),
    (re.compile(r"([^l]ias|[aeiou]las|[ejzr]as|[iu]am)$", _I), "$1"),
    (
        re.compile(
            r"(alumn|syllab|vir|radi|nucle|fung|cact|stimul|termin|bacill|foc|uter|loc|strat)(?:us|i)$", _I
        ),
        "$1i",
    ),
    (re.compile(r"(alumn|alg|vertebr)(?:a|ae)$", _I), "$1ae"),
    (re.compile(r"(seraph|cherub)(?:im)?$", _I), "$1im"),
    (re.compile(r"(her|at|gr)o$", _I), "$1oes"),
    (
        re.compile(
            r"(agend|addend|millenni|dat|extrem|bacteri|desiderat|strat|candelabr|errat|ov|symposi|curricul"
            r"|automat|quor)(?:a|um)$",
            _I,
        ),
        "$1a",
    ),
    (
        re.compile(
            r"(apheli|hyperbat|periheli|asyndet|noumen|phenomen|criteri|organ|prolegomen|hedr|automat)(?:a|on)$",
            _I,
        ),
        "$1a",
    ),
    (re.compile(r"sis$", _I), "ses"),
    (re.compile(r"(?:(kni|wi|li)fe|(ar|l|ea|eo|oa|hoo)f)$", _I), "$1$2ves"),
    (re.compile(r"([^aeiouy]|qu)y$", _I), "$1ies"),
    (re.compile(r"([^ch][ieo][ln])ey$", _I), "$1ies"),
    (re.compile(r"(x|ch|ss|sh|zz)$", _I), "$1es"),
    (re.compile(r"(matr|cod|mur|sil|vert|ind|append)(?:ix|ex)$", _I), "$1ices"),
    (re.compile(r"\b((?:tit)?m|l)(?:ice|ouse)$", _I), "$1ice"),
    (re.compile(r"(pe)(?:rson|ople)$", _I), "$1ople"),
    (re.compile(r"(child)(?:ren)?$", _I), "$1ren"),
    (re.compile(r"eaux$", _I), "$0"),
    (re.compile(r"m[ae]n$", _I), "men"),
    ("thou", "you"),
)

SINGULARIZATION_RULES: tuple[tuple[RuleSpec, str], ...] = (
    (re.compile(r"s$", _I), ""),
    (re.compile(r"(ss)$", _I), "$1"),
    (re.compile(r"(wi|kni|(?:after|half|high|low|mid|non|night|[^\w]|^)li)ves$", _I), "$1fe"),
    (re.compile(r"(ar|(?:wo|[ae])l|[eo][ao])ves$", _I), "$1f"),
    (re.compile(r"ies$", _I), "y"),
    (re.compile(r"(dg|ss|ois|lk|ok|wn|mb|th|ch|ec|oal|is|ck|ix|sser|ts|wb)ies$", _I), "$1ie"),
    (
        re.compile(
            r"\b(l|(?:neck|cross|hog|aun)?t|coll|faer|food|gen|goon|group|hipp|junk|vegg|(?:pork)?p|charl|calor"
            r"|cut)ies$",
            _I,
        ),
        "$1ie",
    ),
    (re.compile(r"\b(mon|smil)ies$", _I), "$1ey"),
    (re.compile(r"\b((?:tit)?m|l)ice$", _I), "$1ouse"),
    (re.compile(r"(seraph|cherub)im$", _I), "$1"),
    (
        re.compile(
            r"(x|ch|ss|sh|zz|tto|go|cho|alias|[^aou]us|t[lm]as|gas|(?:her|at|gr)o|[aeiou]ris)(?:es)?$", _I
        ),
        "$1",
    ),
    (re.compile(r"(analy|diagno|parenthe|progno|synop|the|empha|cri|ne)(?:sis|ses)$", _I), "$1sis"),
    (re.compile(r"(movie|twelve|abuse|e[mn]u)s$", _I), "$1"),
    (re.compile(r"(test)(?:is|es)$", _I), "$1is"),
    (
        re.compile(
            r"(alumn|syllab|vir|radi|nucle|fung|cact|stimul|termin|bacill|foc|uter|loc|strat)(?:us|i)$", _I
        ),
        "$1us",
    ),
    (
        re.compile(
            r"(agend|addend|millenni|dat|extrem|bacteri|desiderat|strat|candelabr|errat|ov|symposi|curricul"
            r"|quor)a$",
            _I,
        ),
        "$1um",
    ),
    (
        re.compile(
            r"(apheli|hyperbat|periheli|asyndet|noumen|phenomen|criteri|organ|prolegomen|hedr|automat)a$", _I
        ),
        "$1on",
    ),
    (re.compile(r"(alumn|alg|vertebr)ae$", _I), "$1a"),
    (re.compile(r"(cod|mur|sil|vert|ind)ices$", _I), "$1ex"),
    (re.compile(r"(matr|append)ices$", _I), "$1ix"),
    (re.compile(r"(pe)(rson|ople)$", _I), "$1rson"),
    (re.compile(r"(child)ren$", _I), "$1"),
    (re.compile(r"(eau)x?$", _I), "$1"),
    (re.compile(r"men$", _I), "man"),
)

UNCOUNTABLE_WORDS: tuple[str, ...] = (
    "adulthood", "advice", "agenda", "aid", "aircraft", "alcohol", "ammo",
    "analytics", "anime", "athletics", "audio", "bison", "blood", "bream",
    "buffalo", "butter", "carp", "cash", "chassis", "chess", "clothing", "cod",
    "commerce", "cooperation", "corps", "debris", "diabetes", "digestion", "elk",
    "energy", "equipment", "excretion", "expertise", "firmware", "flounder", "fun",
    "gallows", "garbage", "graffiti", "hardware", "headquarters", "health",
    "herpes", "highjinks", "homework", "housework", "information", "jeans",
    "justice", "kudos", "labour", "literature", "machinery", "mackerel", "mail",
    "media", "mews", "moose", "music", "mud", "manga", "news", "only",
    "personnel", "pike", "plankton", "pliers", "police", "pollution", "premises",
    "rain", "research", "rice", "salmon", "scissors", "series", "sewage",
    "shambles", "shrimp", "software", "staff", "swine", "tennis", "traffic",
    "transportation", "trout", "tuna", "wealth", "welfare", "whiting",
    "wildebeest", "wildlife", "you",
)

UNCOUNTABLE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"pok[eé]mon$", _I),
    re.compile(r"[^aeiou]ese$", _I),  # chinese, japanese
    re.compile(r"deer$", _I),  # deer, reindeer
    re.compile(r"fish$", _I),  # fish, blowfish, angelfish
    re.compile(r"measles$", _I),
    re.compile(r"o[iu]s$", _I),  # carnivorous
    re.compile(r"pox$", _I),  # chickpox, smallpox
    re.compile(r"sheep$", _I),
)


@lru_cache(maxsize=1)
def build_default_rule_set() -> InflectionRuleSet:
    """기본 영어 규칙 집합을 한 번만 구성하여 반환한다."""
    builder = InflectionRuleSetBuilder()

    for single, plural in IRREGULAR_RULES:
        builder.add_irregular_rule(single, plural)
    for rule, replacement in PLURALIZATION_RULES:
        builder.add_plural_rule(rule, replacement)
    for rule, replacement in SINGULARIZATION_RULES:
        builder.add_singular_rule(rule, replacement)

    # 불가산 정규식은 기본 규칙 뒤에 등록되어 우선 적용된다
    for word in UNCOUNTABLE_WORDS:
        builder.add_uncountable_rule(word)
    for pattern in UNCOUNTABLE_PATTERNS:
        builder.add_uncountable_rule(pattern)

    return builder.build()
