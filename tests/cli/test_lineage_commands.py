"""pedigree / kinship / offspring コマンドのテスト"""

import json

import pytest
from click.testing import CliRunner

from equinoid.cli import main
from equinoid.db import get_engine, get_session, init_db
from equinoid.models import Horse


@pytest.fixture
def db_path(tmp_path):
    """血統データを登録したDBファイル

    G1 x G2 -> S, G1 -> D, S x D -> F
    """
    path = tmp_path / "equinoid.db"
    engine = get_engine(str(path))
    init_db(engine)
    with get_session(engine) as session:
        session.add_all(
            [
                Horse(equinoid="EQ-G1", name="Guarani", sex="macho"),
                Horse(equinoid="EQ-G2", name="Gaivota", sex="femea"),
                Horse(
                    equinoid="EQ-S",
                    name="Sol",
                    sex="macho",
                    sire_equinoid="EQ-G1",
                    dam_equinoid="EQ-G2",
                ),
                Horse(equinoid="EQ-D", name="Dália", sex="femea", sire_equinoid="EQ-G1"),
                Horse(
                    equinoid="EQ-F",
                    name="Faísca",
                    sex="femea",
                    sire_equinoid="EQ-S",
                    dam_equinoid="EQ-D",
                ),
            ]
        )
    engine.dispose()
    return str(path)


class TestPedigreeCommand:
    """pedigree コマンドのテスト"""

    def test_tree_output(self, db_path):
        """血統樹をインデント付きで表示する"""
        runner = CliRunner()
        result = runner.invoke(
            main, ["pedigree", "--db", db_path, "--generations", "2", "EQ-F"]
        )

        assert result.exit_code == 0
        assert "Faísca (EQ-F) - 2世代" in result.output
        assert "  父: Sol (EQ-S)" in result.output
        assert "    父: Guarani (EQ-G1)" in result.output
        assert "  母: Dália (EQ-D)" in result.output

    def test_json_output(self, db_path):
        """--json でAPI形式のJSONを出力する"""
        runner = CliRunner()
        result = runner.invoke(
            main, ["pedigree", "--db", db_path, "--generations", "1", "--json", "EQ-S"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["geracoes"] == 1
        assert data["ancestrais"]["pai"]["equinoid"] == "EQ-G1"
        assert data["ancestrais"]["mae"]["equinoid"] == "EQ-G2"

    def test_generations_out_of_range(self, db_path):
        """世代数が範囲外ならエラー"""
        runner = CliRunner()
        result = runner.invoke(
            main, ["pedigree", "--db", db_path, "--generations", "11", "EQ-F"]
        )

        assert result.exit_code == 2

    def test_unknown_horse(self, db_path):
        """未登録の馬はエラー"""
        runner = CliRunner()
        result = runner.invoke(main, ["pedigree", "--db", db_path, "EQ-X"])

        assert result.exit_code == 1
        assert "馬が見つかりません: EQ-X" in result.output


class TestKinshipCommand:
    """kinship コマンドのテスト"""

    def test_siblings(self, db_path):
        """兄弟関係を表示する"""
        runner = CliRunner()
        result = runner.invoke(main, ["kinship", "--db", db_path, "EQ-S", "EQ-D"])

        assert result.exit_code == 0
        assert "関係: irmão/irmã" in result.output
        assert "共通祖先: EQ-G1" in result.output
        assert "近交係数: 12.50%" in result.output

    def test_unrelated(self, db_path):
        """無関係の場合"""
        runner = CliRunner()
        result = runner.invoke(main, ["kinship", "--db", db_path, "EQ-G1", "EQ-G2"])

        assert result.exit_code == 0
        assert "血縁関係は見つかりませんでした" in result.output


class TestOffspringCommand:
    """offspring コマンドのテスト"""

    def test_lists_offspring(self, db_path):
        """産駒の一覧を表示する"""
        runner = CliRunner()
        result = runner.invoke(main, ["offspring", "--db", db_path, "EQ-G1"])

        assert result.exit_code == 0
        assert "産駒: 2頭" in result.output
        assert "EQ-S" in result.output
        assert "EQ-D" in result.output

    def test_no_offspring(self, db_path):
        """産駒がいない場合"""
        runner = CliRunner()
        result = runner.invoke(main, ["offspring", "--db", db_path, "EQ-F"])

        assert result.exit_code == 0
        assert "産駒は登録されていません" in result.output
