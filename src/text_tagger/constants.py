"""중앙화된 설정 상수 관리

이 모듈은 태그 생성 엔진과 CLI 전체에서 사용되는 정적 설정을 중앙에서 관리한다.
점수 가중치, 불용어 목록, 기본 옵션, 산출물 경로는 모두 이 모듈의 상수를 참조해야 한다.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# ====================================================================
# ⚖️ 점수 가중치
# ====================================================================


@dataclass(frozen=True, slots=True)
class WordWeights:
    """단어 점수 가중치."""

    term_frequency: float = 0.45
    length_bonus: float = 0.10
    frequency_significance: float = 0.45


@dataclass(frozen=True, slots=True)
class PhraseWeights:
    """구문 점수 가중치."""

    component_score: float = 0.4
    frequency_score: float = 0.3
    cohesion_score: float = 0.2
    length_penalty: float = 0.1


WORD_WEIGHTS = WordWeights()
PHRASE_WEIGHTS = PhraseWeights()

# 상대 빈도 3%에서 빈도 유의성이 최대가 된다
OPTIMAL_RELATIVE_FREQUENCY = 0.03
FREQUENCY_DECAY_FACTOR = 50

# 길이 보너스는 10글자에서 1로 포화된다
LENGTH_BONUS_SCALE = 10

# ====================================================================
# 🚫 불용어
# ====================================================================

STOP_WORDS: frozenset[str] = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "by", "for", "from",
        "has", "he", "in", "is", "it", "its", "of", "on", "that", "the",
        "to", "was", "will", "with", "would", "could", "should", "this",
        "these", "they", "them", "their", "there", "then", "than", "when",
        "where", "who", "which", "what", "how", "why", "but", "or", "so",
        "if", "can", "have", "had", "been", "being", "do", "does", "did", "through",
        "very", "really", "quite", "just", "only", "also", "even", "still",
        # 대명사
        "i", "you", "we", "us", "me", "my", "your", "our", "his", "her", "him", "she",
        # 한정사
        "some", "any", "all", "each", "every", "no", "both", "either", "neither", "such",
        # 전치사
        "about", "above", "across", "after", "against", "along", "among", "around",
        "before", "behind", "below", "beneath", "beside", "between", "beyond",
        "during", "except", "inside", "into", "near", "over", "since", "under",
        "until", "upon", "within", "without",
        # 의미가 약한 동사
        "get", "got", "make", "made", "take", "took", "come", "came", "go", "went",
        "see", "saw", "know", "knew", "think", "thought", "say", "said", "give", "gave",
        # 조동사
        "may", "might", "must", "shall", "ought",
        # 수량사/강조어
        "much", "many", "more", "most", "less", "few", "little", "enough", "too",
        "rather", "pretty", "fairly",
        # 부정어
        "not", "none", "nothing", "nobody", "nowhere",
    }
)

# ====================================================================
# 🏷️ 태그 생성 기본값
# ====================================================================

DEFAULT_MAX_TAGS = 10
DEFAULT_MIN_WORD_LENGTH = 3
DEFAULT_MIN_FREQUENCY = 1
DEFAULT_NGRAM_SIZES: tuple[int, ...] = (2,)

# 구문은 최소 두 개의 토큰으로 구성된다
MIN_PHRASE_TOKENS = 2

# ====================================================================
# 📁 산출물 경로
# ====================================================================

ARTIFACTS_ROOT = Path("artifacts")
TAGS_OUTPUT_DIR = ARTIFACTS_ROOT / "tags"
TAGS_OUTPUT_FILE = TAGS_OUTPUT_DIR / "tags.csv"
LOGS_DIR = ARTIFACTS_ROOT / "logs"
