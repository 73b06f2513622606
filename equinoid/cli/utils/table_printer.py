"""テーブル表示ユーティリティ"""

import click

from equinoid.models import Horse
from equinoid.services.lineage_service import KinshipResult, PedigreeNode, PedigreeTree
from equinoid.services.simulation_service import SimulationResult


def print_simulation_result(sire: str, dam: str, result: SimulationResult) -> None:
    """交配シミュレーション結果を表示する

    Args:
        sire: 父のEquinoId
        dam: 母のEquinoId
        result: シミュレーション結果
    """
    click.echo(f"父: {sire}")
    click.echo(f"母: {dam}")
    click.echo("-" * 50)
    click.echo(f"近交係数: {result.inbreeding:.2f}%")
    click.echo(f"競技適性: {result.aptitude}")
    click.echo(f"格付け: {result.rating}")
    click.echo(f"評価: {result.valuation}")
    click.echo("")
    click.echo(result.message)


def print_pedigree_tree(tree: PedigreeTree) -> None:
    """血統樹をインデント付きで表示する

    Args:
        tree: 血統樹
    """
    click.echo(f"{tree.name} ({tree.equinoid}) - {tree.generations}世代")
    _print_node("父", tree.sire, 1)
    _print_node("母", tree.dam, 1)


def _print_node(label: str, node: PedigreeNode | None, depth: int) -> None:
    if node is None:
        return
    indent = "  " * depth
    click.echo(f"{indent}{label}: {node.name} ({node.equinoid})")
    _print_node("父", node.sire, depth + 1)
    _print_node("母", node.dam, depth + 1)


def print_kinship_result(result: KinshipResult) -> None:
    """血縁関係の判定結果を表示する"""
    click.echo(f"{result.horse_a} / {result.horse_b}")
    click.echo("-" * 50)
    if not result.are_related:
        click.echo("血縁関係は見つかりませんでした")
    else:
        click.echo(f"関係: {result.relationship}")
    if result.common_ancestors:
        click.echo(f"共通祖先: {', '.join(result.common_ancestors)}")
    click.echo(f"近交係数: {result.inbreeding:.2f}%")


def print_horse_table(horses: list[Horse]) -> None:
    """馬の一覧を表示する"""
    click.echo(f"{'EquinoId':^24} | {'馬名':^20} | {'性別':^6} | {'父':^24} | {'母':^24}")
    click.echo("-" * 110)
    for horse in horses:
        name = horse.name[:20]
        click.echo(
            f"{horse.equinoid:^24} | {name:^20} | {horse.sex:^6} | "
            f"{horse.sire_equinoid or '-':^24} | {horse.dam_equinoid or '-':^24}"
        )
