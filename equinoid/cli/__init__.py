"""Click CLIメインモジュール"""

import logging

import click


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="詳細ログを表示")
def main(verbose: bool):
    """馬の血統管理・交配シミュレーションCLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# コマンドの登録
from equinoid.cli.commands.simulate import simulate
from equinoid.cli.commands.lineage import kinship, offspring, pedigree
from equinoid.cli.commands.register import add_horse, import_horses

main.add_command(simulate)
main.add_command(pedigree)
main.add_command(kinship)
main.add_command(offspring)
main.add_command(add_horse)
main.add_command(import_horses)


__all__ = ["main"]
