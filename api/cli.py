"""Flask CLI commands for database housekeeping."""

from __future__ import annotations

import logging

import click
from flask.cli import with_appcontext

from api.deps import get_storage
from models.refresh_token_ledger import RefreshTokenLedger
from utils.security import utcnow

LOGGER = logging.getLogger(__name__)


@click.command("prune-refresh-tokens")
@with_appcontext
def prune_refresh_tokens() -> None:
    """Delete refresh tokens that are consumed or past their expiry."""
    deleted = RefreshTokenLedger(get_storage()).prune(utcnow())
    click.echo(f"Pruned {deleted} refresh token(s).")


def register_commands(app) -> None:
    app.cli.add_command(prune_refresh_tokens)
