"""交配シミュレーションコマンド"""

import json

import click

from equinoid.cli.utils.table_printer import print_simulation_result
from equinoid.db import get_engine, get_session, init_db
from equinoid.errors import HorseNotFoundError
from equinoid.repositories.cache import CachedAncestryLookup
from equinoid.repositories.horse_repository import SQLAlchemyHorseRepository
from equinoid.services.simulation_service import BreedingSimulationService


@click.command()
@click.option("--db", required=True, type=click.Path(), help="DBファイルパス")
@click.option("--json", "as_json", is_flag=True, default=False, help="JSON形式で出力")
@click.argument("sire")
@click.argument("dam")
def simulate(db: str, as_json: bool, sire: str, dam: str):
    """父（SIRE）と母（DAM）のEquinoIdを指定して交配をシミュレーションする"""
    if sire == dam:
        click.echo("エラー: 父と母に同じ馬は指定できません", err=True)
        raise SystemExit(1)

    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        lookup = CachedAncestryLookup(SQLAlchemyHorseRepository(session))
        service = BreedingSimulationService(lookup)

        try:
            result = service.simulate_cross(sire, dam)
        except HorseNotFoundError as e:
            label = "父" if e.side == "sire" else "母"
            click.echo(f"エラー: {label}が見つかりません: {e.equinoid}", err=True)
            raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_simulation_result(sire, dam, result)
