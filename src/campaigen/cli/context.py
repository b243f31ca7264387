#!/usr/bin/env python3
"""
CLI Wiring

Builds session -> store -> service for the running command. One session is
opened per invocation and registered on the root click context, so it is
closed on every exit path including errors.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import click
from sqlalchemy import Engine
from sqlalchemy.orm import Session

from ..core.config import Config, get_config
from ..core.database import open_database, session_scope
from ..influencer import InfluencerService, InfluencerStore
from ..spend import SpendRecordStore, SpendTrackingService

logger = logging.getLogger(__name__)


def _state(ctx: click.Context) -> dict:
    return ctx.find_root().ensure_object(dict)


def get_cli_config(ctx: click.Context) -> Config:
    """Config stored by the root group, or the global config when run standalone."""
    state = _state(ctx)
    if "config" not in state:
        state["config"] = get_config()
    return state["config"]


def get_engine(ctx: click.Context) -> Engine:
    """Engine for the configured database; schema is created if missing."""
    state = _state(ctx)
    if "engine" not in state:
        config = get_cli_config(ctx)
        engine = open_database(config.database.url, echo=config.database.echo)
        ctx.find_root().call_on_close(engine.dispose)
        state["engine"] = engine
    return state["engine"]


def get_session(ctx: click.Context) -> Session:
    """The unit of work for this invocation."""
    state = _state(ctx)
    if "session" not in state:
        engine = get_engine(ctx)
        state["session"] = ctx.find_root().with_resource(session_scope(engine))
    return state["session"]


def build_spend_service(ctx: click.Context) -> SpendTrackingService:
    return SpendTrackingService(SpendRecordStore(get_session(ctx)))


def build_influencer_service(ctx: click.Context) -> InfluencerService:
    return InfluencerService(InfluencerStore(get_session(ctx)))


@contextmanager
def report_errors(action: str) -> Iterator[None]:
    """
    Command boundary: turn any service or store failure into exit code 1.

    The message goes to stderr through click; details are logged at DEBUG.
    """
    try:
        yield
    except (click.ClickException, click.exceptions.Exit, click.Abort):
        raise
    except Exception as e:
        logger.debug(f"Command failed while {action}", exc_info=True)
        raise click.ClickException(f"An error occurred while {action}: {e}") from e
