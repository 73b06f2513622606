"""HorseRepositoryのテスト"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from equinoid.db import Base
from equinoid.errors import AncestryLookupError
from equinoid.models import Horse
from equinoid.repositories.horse_repository import SQLAlchemyHorseRepository


class TestSQLAlchemyHorseRepository:
    """SQLAlchemyHorseRepositoryのテスト"""

    @pytest.fixture
    def db_session(self, tmp_path):
        """テスト用DBセッション"""
        db_path = tmp_path / "test.db"
        engine = create_engine(f"sqlite:///{db_path}")
        Base.metadata.create_all(engine)
        session = Session(engine)
        yield session
        session.close()

    @pytest.fixture
    def repository(self, db_session):
        """テスト用リポジトリ"""
        return SQLAlchemyHorseRepository(db_session)

    @pytest.fixture
    def sample_data(self, repository):
        """サンプルの血統をDBに追加"""
        sire = repository.add(Horse(equinoid="EQ-SIRE", name="父馬", sex="macho"))
        dam = repository.add(Horse(equinoid="EQ-DAM", name="母馬", sex="femea"))
        foal = repository.add(
            Horse(
                equinoid="EQ-FOAL",
                name="仔馬",
                sex="macho",
                sire_equinoid="EQ-SIRE",
                dam_equinoid="EQ-DAM",
            )
        )
        orphan = repository.add(
            Horse(
                equinoid="EQ-ORPHAN",
                name="未登録の母を持つ馬",
                sex="femea",
                sire_equinoid="EQ-SIRE",
                dam_equinoid="EQ-NOT-REGISTERED",
            )
        )
        return {"sire": sire, "dam": dam, "foal": foal, "orphan": orphan}

    def test_add_assigns_id(self, repository):
        """登録すると内部IDが採番される"""
        horse = repository.add(Horse(equinoid="EQ-1", name="馬", sex="macho"))

        assert horse.id is not None

    def test_find_by_equinoid(self, repository, sample_data):
        """EquinoIdで取得できる"""
        horse = repository.find_by_equinoid("EQ-FOAL")

        assert horse is not None
        assert horse.name == "仔馬"

    def test_find_by_equinoid_not_found(self, repository, sample_data):
        """存在しないEquinoIdはNone"""
        assert repository.find_by_equinoid("EQ-NONE") is None

    def test_resolve_is_find_by_equinoid(self, repository, sample_data):
        """resolveはEquinoIdで馬を解決する"""
        assert repository.resolve("EQ-SIRE").id == sample_data["sire"].id
        assert repository.resolve("EQ-NONE") is None

    def test_find_by_id(self, repository, sample_data):
        """内部IDで取得できる"""
        horse = repository.find_by_id(sample_data["dam"].id)

        assert horse.equinoid == "EQ-DAM"

    def test_get_parents(self, repository, sample_data):
        """父・母の内部IDを返す"""
        parents = repository.get_parents(sample_data["foal"].id)

        assert parents == (sample_data["sire"].id, sample_data["dam"].id)

    def test_get_parents_of_founder(self, repository, sample_data):
        """親が記録されていない馬は (None, None)"""
        assert repository.get_parents(sample_data["sire"].id) == (None, None)

    def test_get_parents_with_unregistered_parent(self, repository, sample_data):
        """未登録の親はNone"""
        parents = repository.get_parents(sample_data["orphan"].id)

        assert parents == (sample_data["sire"].id, None)

    def test_get_parents_of_unknown_horse(self, repository, sample_data):
        """存在しない内部IDはNone"""
        assert repository.get_parents(9999) is None

    def test_get_parents_wraps_database_error(self):
        """DBエラーはAncestryLookupErrorに変換される"""
        session = MagicMock()
        session.get.side_effect = OperationalError("SELECT", {}, Exception("locked"))
        repository = SQLAlchemyHorseRepository(session)

        with pytest.raises(AncestryLookupError):
            repository.get_parents(1)

    def test_find_offspring(self, repository, sample_data):
        """父または母として記録された産駒を返す"""
        sire_offspring = repository.find_offspring("EQ-SIRE")
        dam_offspring = repository.find_offspring("EQ-DAM")

        assert [h.equinoid for h in sire_offspring] == ["EQ-FOAL", "EQ-ORPHAN"]
        assert [h.equinoid for h in dam_offspring] == ["EQ-FOAL"]

    def test_find_offspring_none(self, repository, sample_data):
        """産駒がいなければ空リスト"""
        assert repository.find_offspring("EQ-FOAL") == []
