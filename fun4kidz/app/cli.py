from __future__ import annotations

import click
from flask import Blueprint

from fun4kidz.registration.catalog import PROGRAM_IDS, PROGRAMS
from fun4kidz.registration.pricing import quote

cli_bp = Blueprint("cli", __name__, cli_group=None)


@cli_bp.cli.command("programs")
def list_programs() -> None:
    """Print the program catalog."""
    for p in PROGRAMS.values():
        click.echo(f"{p.id.value:<15} {p.name:<28} {p.description}")


@cli_bp.cli.command("quote")
@click.option("--program", "programs", multiple=True, type=click.Choice(PROGRAM_IDS), help="Program id (repeatable).")
@click.option("--child", "children", multiple=True, help="Child's full name (repeatable).")
@click.option("--membership-only", is_flag=True, help="Membership and registration fees only.")
def quote_cmd(programs, children, membership_only) -> None:
    """Print the itemized breakdown and total for a selection.

    Example: flask quote --program learn-play --child "Ana" --child "Ben"
    """
    q = quote(list(programs), membership_only, list(children))
    for line in q.breakdown:
        click.echo(f"{line.label:<60} {line.amount:>10.2f}  [{line.kind}]")
    click.echo(f"{'Total':<60} {q.total:>10}")
