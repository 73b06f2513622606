"""馬の登録コマンド"""

import csv

import click

from equinoid.constants import SEX_CODES
from equinoid.db import get_engine, get_session, init_db
from equinoid.models import Horse
from equinoid.repositories.horse_repository import SQLAlchemyHorseRepository


@click.command("add-horse")
@click.option("--db", required=True, type=click.Path(), help="DBファイルパス")
@click.option("--equinoid", required=True, type=str, help="EquinoId")
@click.option("--name", required=True, type=str, help="馬名")
@click.option("--sex", required=True, type=click.Choice(SEX_CODES), help="性別")
@click.option("--sire", type=str, default=None, help="父のEquinoId")
@click.option("--dam", type=str, default=None, help="母のEquinoId")
@click.option("--birth-year", type=int, default=None, help="生年")
def add_horse(
    db: str,
    equinoid: str,
    name: str,
    sex: str,
    sire: str | None,
    dam: str | None,
    birth_year: int | None,
):
    """馬を1頭登録する"""
    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        repository = SQLAlchemyHorseRepository(session)
        if repository.find_by_equinoid(equinoid) is not None:
            click.echo(f"エラー: すでに登録されています: {equinoid}", err=True)
            raise SystemExit(1)

        horse = repository.add(
            Horse(
                equinoid=equinoid,
                name=name,
                sex=sex,
                sire_equinoid=sire,
                dam_equinoid=dam,
                birth_year=birth_year,
            )
        )
        click.echo(f"登録しました: {horse.name} ({horse.equinoid})")


REQUIRED_COLUMNS = ("equinoid", "name", "sex")


def _validate_row(row: dict) -> str | None:
    """CSVの1行を検証し、問題があればエラー内容を返す"""
    for column in REQUIRED_COLUMNS:
        if not (row.get(column) or "").strip():
            return f"{column} が空です"

    sex = row["sex"].strip()
    if sex not in SEX_CODES:
        return f"性別が不正です: {sex}（{' / '.join(SEX_CODES)}）"

    birth_year = (row.get("birth_year") or "").strip()
    if birth_year and not birth_year.isdigit():
        return f"生年が不正です: {birth_year}"

    return None


@click.command("import-horses")
@click.option("--db", required=True, type=click.Path(), help="DBファイルパス")
@click.argument("csv_path", type=click.Path(exists=True, dir_okay=False))
def import_horses(db: str, csv_path: str):
    """CSVファイルから馬を一括登録する

    列: equinoid,name,sex,sire,dam,birth_year（sire/dam/birth_yearは空欄可）
    登録済みのEquinoIdはスキップする。
    """
    click.echo(f"インポート開始: {csv_path}")
    click.echo(f"データベース: {db}")

    engine = get_engine(db)
    init_db(engine)

    total_added = 0
    total_skipped = 0

    with open(csv_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
        rows = list(reader)

    if missing:
        click.echo(f"エラー: 必須列がありません: {', '.join(missing)}", err=True)
        raise SystemExit(1)

    # ヘッダーが1行目なのでデータは2行目から
    errors = []
    for line_no, row in enumerate(rows, start=2):
        error = _validate_row(row)
        if error is not None:
            errors.append((line_no, error))

    if errors:
        for line_no, error in errors:
            click.echo(f"エラー: {line_no}行目: {error}", err=True)
        raise SystemExit(1)

    with get_session(engine) as session:
        repository = SQLAlchemyHorseRepository(session)

        for row in rows:
            equinoid = row["equinoid"].strip()
            if repository.find_by_equinoid(equinoid) is not None:
                total_skipped += 1
                continue

            birth_year = (row.get("birth_year") or "").strip()
            repository.add(
                Horse(
                    equinoid=equinoid,
                    name=row["name"].strip(),
                    sex=row["sex"].strip(),
                    sire_equinoid=(row.get("sire") or "").strip() or None,
                    dam_equinoid=(row.get("dam") or "").strip() or None,
                    birth_year=int(birth_year) if birth_year else None,
                )
            )
            total_added += 1

    click.echo("")
    click.echo("=" * 50)
    click.echo("完了")
    click.echo(f"  登録: {total_added}頭")
    click.echo(f"  スキップ: {total_skipped}頭")
