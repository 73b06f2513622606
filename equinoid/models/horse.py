"""Horseモデル定義"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from equinoid.models.base import Base


class Horse(Base):
    """馬モデル

    Attributes:
        id: 内部ID（サロゲートキー、交配シミュレーションの変動項に使用）
        equinoid: EquinoId（公開ID、一意）
        name: 馬名
        sex: 性別（"macho" / "femea"）
        birth_year: 生年
        breed: 品種
        coat: 毛色
        sire_equinoid: 父のEquinoId
        dam_equinoid: 母のEquinoId
        created_at: 作成日時
        updated_at: 更新日時
    """

    __tablename__ = "horses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    equinoid: Mapped[str] = mapped_column(String(24), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    sex: Mapped[str] = mapped_column(String, nullable=False)
    birth_year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # 基本情報
    breed: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    coat: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # 血統情報
    sire_equinoid: Mapped[Optional[str]] = mapped_column(
        String(24), nullable=True, index=True
    )
    dam_equinoid: Mapped[Optional[str]] = mapped_column(
        String(24), nullable=True, index=True
    )

    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<Horse(id={self.id!r}, equinoid={self.equinoid!r}, name={self.name!r})>"
