"""交配シミュレーション設定

競技適性スコアの算出式の係数と、格付け・評価・助言メッセージの閾値表を定義する。
閾値表は上から順に評価し、最初に一致した行を採用する。
"""

# 競技適性スコアの基準値
BASE_APTITUDE = 75.0

# 変動項の倍率: (sin(父ID*0.1) + cos(母ID*0.1)) * 10
VARIATION_ID_SCALE = 0.1
VARIATION_AMPLITUDE = 10.0

# 近交係数（%）1ポイントあたりの減点
INBREEDING_PENALTY_FACTOR = 2.0

# 競技適性スコアの範囲
MIN_APTITUDE = 50
MAX_APTITUDE = 100

# この近交係数（%）を超えると格付けをCに固定し、高リスクと判定する
HIGH_INBREEDING_THRESHOLD = 5.0

# この近交係数（%）を超えると中リスクと判定する
MODERATE_INBREEDING_THRESHOLD = 3.0

# 近交係数が高い場合の格付け・評価
HIGH_INBREEDING_RATING = ("C", "Baixa")

# (最低スコア, 格付け, 評価)
RATING_TABLE: tuple[tuple[int, str, str], ...] = (
    (95, "AAA+", "Excepcional"),
    (90, "AAA", "Muito Alta"),
    (85, "AA+", "Alta"),
    (80, "AA", "Alta"),
    (75, "A", "Média-Alta"),
    (70, "BBB", "Média"),
    (60, "BB", "Média-Baixa"),
)

# いずれの行にも一致しない場合の格付け・評価
FALLBACK_RATING = ("C", "Baixa")

MESSAGE_HIGH_INBREEDING = (
    "⚠️ ATENÇÃO: Nível de consanguinidade ALTO detectado. Cruzamento NÃO recomendado. "
    "Alto risco de problemas genéticos e características recessivas."
)
MESSAGE_MODERATE_INBREEDING = (
    "⚠️ Nível de consanguinidade MODERADO. Recomenda-se avaliação veterinária "
    "especializada antes do cruzamento. Monitorar características recessivas."
)
MESSAGE_EXCEPTIONAL = (
    "🏆 EXCELENTE! Combinação genética excepcional com altíssimo potencial esportivo. "
    "Cruzamento altamente recomendado para produção de elite."
)
MESSAGE_VERY_GOOD = (
    "⭐ MUITO BOM! Excelente combinação genética com forte potencial para alta "
    "performance esportiva e valorização significativa."
)
MESSAGE_GOOD = (
    "✅ BOM cruzamento. Combinação equilibrada com bom potencial esportivo e "
    "valorização esperada acima da média."
)
MESSAGE_BALANCED = (
    "✅ Cruzamento equilibrado com potencial esportivo satisfatório e baixo risco "
    "de consanguinidade."
)
MESSAGE_VIABLE = (
    "ℹ️ Cruzamento viável, porém com potencial esportivo moderado. Considerar "
    "outras opções para maior valorização."
)
MESSAGE_LIMITED = (
    "ℹ️ Cruzamento com potencial limitado. Recomenda-se avaliar outras opções de "
    "reprodutores para melhor resultado genético."
)

# (最低スコア, 助言の種類) 近交係数による判定の後に評価する
ADVISORY_TABLE: tuple[tuple[int, str], ...] = (
    (95, "exceptional"),
    (90, "very_good"),
    (85, "good"),
    (75, "balanced"),
    (65, "viable"),
)

ADVISORY_MESSAGES: dict[str, str] = {
    "high_inbreeding": MESSAGE_HIGH_INBREEDING,
    "moderate_inbreeding": MESSAGE_MODERATE_INBREEDING,
    "exceptional": MESSAGE_EXCEPTIONAL,
    "very_good": MESSAGE_VERY_GOOD,
    "good": MESSAGE_GOOD,
    "balanced": MESSAGE_BALANCED,
    "viable": MESSAGE_VIABLE,
    "limited": MESSAGE_LIMITED,
}


def get_advisory_message(kind: str) -> str:
    """助言の種類からメッセージを取得する

    Args:
        kind: 助言の種類

    Returns:
        メッセージ文字列

    Raises:
        KeyError: 未知の種類の場合
    """
    return ADVISORY_MESSAGES[kind]
