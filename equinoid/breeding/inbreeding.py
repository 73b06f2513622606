"""近交係数の推定

Wrightの経路計数法により、共通祖先ごとの寄与を合算する。
評価計算には丸める前の値を使い、結果として出力するときだけ小数点以下2桁に丸める。
"""

from equinoid.breeding.ancestry import CommonAncestor, find_common_ancestors
from equinoid.utils.rounding import round_half_up

EXPORT_DECIMALS = 2


def wright_contribution(common_ancestor: CommonAncestor) -> float:
    """共通祖先1頭分の寄与 0.5^(n1 + n2 + 1) を計算する"""
    path_length = (
        common_ancestor.generations_via_sire + common_ancestor.generations_via_dam + 1
    )
    return 0.5**path_length


def inbreeding_percentage(
    sire_ancestors: dict[int, int], dam_ancestors: dict[int, int]
) -> float:
    """父側・母側の祖先辞書から近交係数（%）を計算する（丸めなし）

    Args:
        sire_ancestors: 父側の祖先ID → 最短世代数
        dam_ancestors: 母側の祖先ID → 最短世代数

    Returns:
        近交係数（%）。共通祖先がなければ0.0
    """
    common = find_common_ancestors(sire_ancestors, dam_ancestors)
    if not common:
        return 0.0

    return sum(wright_contribution(ancestor) for ancestor in common) * 100


def export_inbreeding(percentage: float) -> float:
    """出力用に小数点以下2桁へ丸める（0.5は切り上げ）"""
    return round_half_up(percentage, EXPORT_DECIMALS)


def estimate_inbreeding(
    sire_ancestors: dict[int, int], dam_ancestors: dict[int, int]
) -> float:
    """出力用に丸めた近交係数（%）"""
    return export_inbreeding(inbreeding_percentage(sire_ancestors, dam_ancestors))
