"""血統関連コマンド"""

import json

import click

from equinoid.cli.utils.table_printer import (
    print_horse_table,
    print_kinship_result,
    print_pedigree_tree,
)
from equinoid.constants import MAX_PEDIGREE_GENERATIONS
from equinoid.db import get_engine, get_session, init_db
from equinoid.errors import HorseNotFoundError
from equinoid.repositories.horse_repository import SQLAlchemyHorseRepository
from equinoid.services.lineage_service import LineageService


@click.command()
@click.option("--db", required=True, type=click.Path(), help="DBファイルパス")
@click.option(
    "--generations",
    type=click.IntRange(0, MAX_PEDIGREE_GENERATIONS),
    default=3,
    help="遡る世代数",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="JSON形式で出力")
@click.argument("equinoid")
def pedigree(db: str, generations: int, as_json: bool, equinoid: str):
    """血統樹を表示する"""
    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        service = LineageService(SQLAlchemyHorseRepository(session))
        try:
            tree = service.get_pedigree_tree(equinoid, generations)
        except HorseNotFoundError as e:
            click.echo(f"エラー: 馬が見つかりません: {e.equinoid}", err=True)
            raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(tree.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_pedigree_tree(tree)


@click.command()
@click.option("--db", required=True, type=click.Path(), help="DBファイルパス")
@click.argument("horse_a")
@click.argument("horse_b")
def kinship(db: str, horse_a: str, horse_b: str):
    """2頭の血縁関係を判定する"""
    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        service = LineageService(SQLAlchemyHorseRepository(session))
        try:
            result = service.validate_kinship(horse_a, horse_b)
        except HorseNotFoundError as e:
            click.echo(f"エラー: 馬が見つかりません: {e.equinoid}", err=True)
            raise SystemExit(1)

    print_kinship_result(result)


@click.command()
@click.option("--db", required=True, type=click.Path(), help="DBファイルパス")
@click.argument("equinoid")
def offspring(db: str, equinoid: str):
    """産駒の一覧を表示する"""
    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        service = LineageService(SQLAlchemyHorseRepository(session))
        try:
            horses = service.get_offspring(equinoid)
        except HorseNotFoundError as e:
            click.echo(f"エラー: 馬が見つかりません: {e.equinoid}", err=True)
            raise SystemExit(1)

        if not horses:
            click.echo("産駒は登録されていません")
            return

        click.echo(f"産駒: {len(horses)}頭")
        print_horse_table(horses)
