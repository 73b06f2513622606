"""馬リポジトリ"""

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError

from equinoid.errors import AncestryLookupError
from equinoid.models import Horse


class SQLAlchemyHorseRepository:
    """SQLAlchemyを使用した馬リポジトリ

    交配シミュレーションの血統参照（AncestryLookup）を実装する。
    """

    def __init__(self, session):
        """初期化

        Args:
            session: SQLAlchemyセッション
        """
        self.session = session

    def add(self, horse: Horse) -> Horse:
        """馬を登録する

        Args:
            horse: 登録する馬

        Returns:
            内部IDが採番された馬
        """
        self.session.add(horse)
        self.session.flush()
        return horse

    def find_by_equinoid(self, equinoid: str) -> Horse | None:
        """EquinoIdで馬を取得する

        Args:
            equinoid: EquinoId

        Returns:
            馬（存在しない場合はNone）
        """
        return self.session.execute(
            select(Horse).where(Horse.equinoid == equinoid)
        ).scalar_one_or_none()

    def find_by_id(self, horse_id: int) -> Horse | None:
        """内部IDで馬を取得する"""
        return self.session.get(Horse, horse_id)

    def resolve(self, equinoid: str) -> Horse | None:
        """EquinoIdから馬を解決する"""
        return self.find_by_equinoid(equinoid)

    def get_parents(self, horse_id: int) -> tuple[int | None, int | None] | None:
        """内部IDから (父ID, 母ID) を取得する

        父・母のEquinoIdが記録されていても未登録の場合はNoneを返す。

        Args:
            horse_id: 馬の内部ID

        Returns:
            (父ID, 母ID) のタプル。馬が存在しない場合はNone

        Raises:
            AncestryLookupError: DBアクセスに失敗した場合
        """
        try:
            horse = self.find_by_id(horse_id)
            if horse is None:
                return None
            return (
                self._resolve_id(horse.sire_equinoid),
                self._resolve_id(horse.dam_equinoid),
            )
        except SQLAlchemyError as e:
            raise AncestryLookupError(
                f"Failed to load parents of horse {horse_id}"
            ) from e

    def find_offspring(self, equinoid: str) -> list[Horse]:
        """指定した馬を父または母とする産駒を取得する

        Args:
            equinoid: 親のEquinoId

        Returns:
            産駒のリスト（内部ID順）
        """
        return list(
            self.session.execute(
                select(Horse)
                .where(
                    or_(Horse.sire_equinoid == equinoid, Horse.dam_equinoid == equinoid)
                )
                .order_by(Horse.id)
            ).scalars()
        )

    def _resolve_id(self, equinoid: str | None) -> int | None:
        if not equinoid:
            return None
        return self.session.execute(
            select(Horse.id).where(Horse.equinoid == equinoid)
        ).scalar_one_or_none()
