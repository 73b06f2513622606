"""競技適性スコアと格付け

近交係数と両親の内部IDから競技適性スコアを算出し、
格付け・評価・助言メッセージに変換する。
"""

import math
from dataclasses import dataclass
from enum import Enum

from equinoid.config.breeding import (
    ADVISORY_TABLE,
    BASE_APTITUDE,
    FALLBACK_RATING,
    HIGH_INBREEDING_RATING,
    HIGH_INBREEDING_THRESHOLD,
    INBREEDING_PENALTY_FACTOR,
    MAX_APTITUDE,
    MIN_APTITUDE,
    MODERATE_INBREEDING_THRESHOLD,
    RATING_TABLE,
    VARIATION_AMPLITUDE,
    VARIATION_ID_SCALE,
    get_advisory_message,
)
from equinoid.utils.rounding import round_half_up


class AdvisoryKind(str, Enum):
    """助言メッセージの種類"""

    HIGH_INBREEDING = "high_inbreeding"
    MODERATE_INBREEDING = "moderate_inbreeding"
    EXCEPTIONAL = "exceptional"
    VERY_GOOD = "very_good"
    GOOD = "good"
    BALANCED = "balanced"
    VIABLE = "viable"
    LIMITED = "limited"

    @property
    def message(self) -> str:
        return get_advisory_message(self.value)


@dataclass(frozen=True)
class CrossScore:
    """交配の評価結果（イミュータブル）"""

    aptitude: int
    valuation: str
    rating: str
    message: str


def genetic_variation(sire_id: int, dam_id: int) -> float:
    """両親の内部IDから決定的な変動項を計算する

    同じ組み合わせなら常に同じ値になる（おおよそ -20〜+20）。
    """
    return (
        math.sin(sire_id * VARIATION_ID_SCALE) + math.cos(dam_id * VARIATION_ID_SCALE)
    ) * VARIATION_AMPLITUDE


def calculate_aptitude(sire_id: int, dam_id: int, inbreeding_pct: float) -> int:
    """競技適性スコアを計算する

    Args:
        sire_id: 父の内部ID
        dam_id: 母の内部ID
        inbreeding_pct: 近交係数（%）

    Returns:
        50-100の範囲の整数スコア
    """
    penalty = inbreeding_pct * INBREEDING_PENALTY_FACTOR
    aptitude = BASE_APTITUDE + genetic_variation(sire_id, dam_id) - penalty
    aptitude = max(MIN_APTITUDE, min(MAX_APTITUDE, aptitude))
    return int(round_half_up(aptitude))


def classify_valuation(aptitude: int, inbreeding_pct: float) -> tuple[str, str]:
    """格付けと評価を判定する

    近交係数による判定がスコアによる判定より優先される。

    Returns:
        (格付け, 評価) のタプル
    """
    if inbreeding_pct > HIGH_INBREEDING_THRESHOLD:
        return HIGH_INBREEDING_RATING

    for min_aptitude, rating, valuation in RATING_TABLE:
        if aptitude >= min_aptitude:
            return rating, valuation

    return FALLBACK_RATING


def select_advisory(aptitude: int, inbreeding_pct: float) -> AdvisoryKind:
    """助言の種類を選択する"""
    if inbreeding_pct > HIGH_INBREEDING_THRESHOLD:
        return AdvisoryKind.HIGH_INBREEDING
    if inbreeding_pct > MODERATE_INBREEDING_THRESHOLD:
        return AdvisoryKind.MODERATE_INBREEDING

    for min_aptitude, kind in ADVISORY_TABLE:
        if aptitude >= min_aptitude:
            return AdvisoryKind(kind)

    return AdvisoryKind.LIMITED


def score_cross(sire_id: int, dam_id: int, inbreeding_pct: float) -> CrossScore:
    """交配を評価する

    Args:
        sire_id: 父の内部ID
        dam_id: 母の内部ID
        inbreeding_pct: 近交係数（%）

    Returns:
        CrossScore
    """
    aptitude = calculate_aptitude(sire_id, dam_id, inbreeding_pct)
    rating, valuation = classify_valuation(aptitude, inbreeding_pct)
    advisory = select_advisory(aptitude, inbreeding_pct)

    return CrossScore(
        aptitude=aptitude,
        valuation=valuation,
        rating=rating,
        message=advisory.message,
    )
