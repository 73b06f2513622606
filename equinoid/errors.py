"""例外定義"""


class EquinoidError(Exception):
    """equinoidパッケージの基底例外"""


class HorseNotFoundError(EquinoidError, LookupError):
    """馬が登録されていない場合の例外

    Attributes:
        equinoid: 見つからなかったEquinoId
        side: 交配の親の側（"sire" / "dam"）。交配以外の文脈ではNone
    """

    def __init__(self, equinoid: str, side: str | None = None):
        self.equinoid = equinoid
        self.side = side
        if side is None:
            message = f"Horse not found: {equinoid}"
        else:
            message = f"{side.capitalize()} not found: {equinoid}"
        super().__init__(message)


class AncestryLookupError(EquinoidError):
    """祖先の参照に一時的に失敗した場合の例外

    血統の探索中に発生した場合、その枝だけを打ち切る。
    """
