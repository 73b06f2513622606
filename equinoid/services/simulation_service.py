"""BreedingSimulationService - 交配シミュレーションを実行するサービス"""

import logging
from dataclasses import asdict, dataclass

from equinoid.breeding.ancestry import (
    AncestryLookup,
    collect_ancestors,
    iter_ancestor_records,
)
from equinoid.breeding.inbreeding import export_inbreeding, inbreeding_percentage
from equinoid.breeding.rating import score_cross
from equinoid.constants import MAX_ANCESTOR_GENERATIONS, SIDE_DAM, SIDE_SIRE
from equinoid.errors import HorseNotFoundError
from equinoid.models import Horse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """交配シミュレーション結果（イミュータブル）"""

    inbreeding: float
    aptitude: int
    valuation: str
    rating: str
    message: str

    def to_dict(self) -> dict:
        """APIレスポンス形式の辞書に変換する"""
        data = asdict(self)
        return {
            "inbreeding": data["inbreeding"],
            "aptidao_esportiva": data["aptitude"],
            "valorizacao_estimada": data["valuation"],
            "rating": data["rating"],
            "mensagem": data["message"],
        }


class BreedingSimulationService:
    """父・母の血統から交配を評価するサービス

    呼び出し間で状態を持たないため、同じ組み合わせ・同じ血統データなら
    常に同じ結果を返す。父と母が同一かどうかの検証は呼び出し側で行う。
    """

    def __init__(
        self,
        lookup: AncestryLookup,
        max_generations: int = MAX_ANCESTOR_GENERATIONS,
    ):
        """初期化

        Args:
            lookup: 血統参照（リポジトリ）
            max_generations: 遡る最大世代数
        """
        self._lookup = lookup
        self._max_generations = max_generations

    def simulate_cross(self, sire_equinoid: str, dam_equinoid: str) -> SimulationResult:
        """交配をシミュレーションする

        Args:
            sire_equinoid: 父のEquinoId
            dam_equinoid: 母のEquinoId

        Returns:
            SimulationResult

        Raises:
            HorseNotFoundError: 父または母が登録されていない場合（sideで区別）
        """
        sire = self._resolve(sire_equinoid, SIDE_SIRE)
        dam = self._resolve(dam_equinoid, SIDE_DAM)

        sire_ancestors = collect_ancestors(self._lookup, sire.id, self._max_generations)
        dam_ancestors = collect_ancestors(self._lookup, dam.id, self._max_generations)
        if logger.isEnabledFor(logging.DEBUG):
            _log_ancestors(SIDE_SIRE, sire_equinoid, sire_ancestors)
            _log_ancestors(SIDE_DAM, dam_equinoid, dam_ancestors)

        # 評価は丸める前の係数で行う
        inbreeding = inbreeding_percentage(sire_ancestors, dam_ancestors)
        score = score_cross(sire.id, dam.id, inbreeding)

        result = SimulationResult(
            inbreeding=export_inbreeding(inbreeding),
            aptitude=score.aptitude,
            valuation=score.valuation,
            rating=score.rating,
            message=score.message,
        )

        logger.info(
            "Cross simulated: sire=%s dam=%s inbreeding=%.2f aptitude=%d",
            sire_equinoid,
            dam_equinoid,
            result.inbreeding,
            result.aptitude,
            extra={
                "sire": sire_equinoid,
                "dam": dam_equinoid,
                "inbreeding": result.inbreeding,
                "aptitude": result.aptitude,
            },
        )
        return result

    def _resolve(self, equinoid: str, side: str) -> Horse:
        horse = self._lookup.resolve(equinoid)
        if horse is None:
            raise HorseNotFoundError(equinoid, side=side)
        return horse


def _log_ancestors(side: str, equinoid: str, ancestors: dict[int, int]) -> None:
    logger.debug("%s %s: %d ancestors", side, equinoid, len(ancestors))
    for record in iter_ancestor_records(ancestors):
        logger.debug(
            "  %s ancestor id=%d generation=%d", side, record.ancestor_id, record.generation
        )
