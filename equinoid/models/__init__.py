"""データモデルパッケージ"""

from equinoid.models.base import Base
from equinoid.models.horse import Horse

__all__ = [
    "Base",
    "Horse",
]
