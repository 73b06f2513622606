"""交配シミュレーションの計算モジュール"""

from equinoid.breeding.ancestry import (
    AncestorRecord,
    AncestryLookup,
    CommonAncestor,
    collect_ancestors,
    find_common_ancestors,
    iter_ancestor_records,
)
from equinoid.breeding.inbreeding import (
    estimate_inbreeding,
    export_inbreeding,
    inbreeding_percentage,
    wright_contribution,
)
from equinoid.breeding.rating import (
    AdvisoryKind,
    CrossScore,
    calculate_aptitude,
    classify_valuation,
    genetic_variation,
    score_cross,
    select_advisory,
)

__all__ = [
    "AdvisoryKind",
    "AncestorRecord",
    "AncestryLookup",
    "CommonAncestor",
    "CrossScore",
    "calculate_aptitude",
    "classify_valuation",
    "collect_ancestors",
    "estimate_inbreeding",
    "export_inbreeding",
    "find_common_ancestors",
    "genetic_variation",
    "inbreeding_percentage",
    "iter_ancestor_records",
    "score_cross",
    "select_advisory",
    "wright_contribution",
]
