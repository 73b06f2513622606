"""丸め処理ユーティリティ"""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """四捨五入する（0.5は0から遠い方へ丸める）

    組み込みのround()は偶数丸めのため、閾値判定に使う値はこちらで丸める。

    Args:
        value: 丸める値
        ndigits: 小数点以下の桁数

    Returns:
        丸めた値
    """
    factor = 10**ndigits
    scaled = abs(value) * factor
    rounded = math.floor(scaled + 0.5) / factor
    return math.copysign(rounded, value)
