#!/usr/bin/env python3
"""
Influencer CLI - Influencer Profiles

Command-line interface for adding and listing influencers.
"""

from uuid import UUID

import click

from ..influencer import CreateInfluencerDto
from .context import build_influencer_service, report_errors
from .formatting import format_table

INFLUENCER_HEADERS = ["ID", "Name", "Handle", "Platform", "Niche"]


@click.group()
def influencer() -> None:
    """Manage influencer information."""
    pass


@influencer.command("add")
@click.option(
    "--influencer-name",
    "--name",
    "name",
    required=True,
    help="The name of the influencer.",
)
@click.option("--handle", help="The influencer's social media handle.")
@click.option("--platform", help="The primary platform (e.g., Instagram, TikTok).")
@click.option("--niche", help="The influencer's niche or category.")
@click.pass_context
def add_influencer(
    ctx: click.Context,
    name: str,
    handle: str | None,
    platform: str | None,
    niche: str | None,
) -> None:
    """
    Add a new influencer.

    Example:
      campaigen influencer add --influencer-name "Jane" --handle @jane --platform Instagram
    """
    dto = CreateInfluencerDto(name=name, handle=handle, platform=platform, niche=niche)

    click.echo(
        f"Adding influencer: Name={name}, Handle={handle or ''}, "
        f"Platform={platform or ''}, Niche={niche or ''}"
    )

    with report_errors("adding influencer"):
        service = build_influencer_service(ctx)
        result = service.create_influencer(dto)

    click.echo("Influencer added successfully.")
    click.echo(f"Influencer created with ID: {result.id}")


@influencer.command("list")
@click.pass_context
def list_influencers(ctx: click.Context) -> None:
    """List all influencers."""
    click.echo("Listing all influencers...")

    with report_errors("listing influencers"):
        service = build_influencer_service(ctx)
        influencers = service.list_influencers()

    rows = [[i.id, i.name, i.handle, i.platform, i.niche] for i in influencers]
    for line in format_table(INFLUENCER_HEADERS, rows):
        click.echo(line)

    if not influencers:
        click.echo("No influencers found.")


@influencer.command("show")
@click.argument("influencer_id", type=click.UUID)
@click.pass_context
def show_influencer(ctx: click.Context, influencer_id: UUID) -> None:
    """Show a single influencer by ID."""
    with report_errors("loading influencer"):
        service = build_influencer_service(ctx)
        found = service.get_influencer(influencer_id)

    if found is None:
        click.echo(f"Influencer not found: {influencer_id}", err=True)
        ctx.exit(1)

    click.echo(f"ID:       {found.id}")
    click.echo(f"Name:     {found.name}")
    click.echo(f"Handle:   {found.handle or ''}")
    click.echo(f"Platform: {found.platform or ''}")
    click.echo(f"Niche:    {found.niche or ''}")


@influencer.command("delete")
@click.argument("influencer_id", type=click.UUID)
@click.pass_context
def delete_influencer(ctx: click.Context, influencer_id: UUID) -> None:
    """Delete an influencer by ID. Deleting a missing influencer is not an error."""
    with report_errors("deleting influencer"):
        service = build_influencer_service(ctx)
        removed = service.delete_influencer(influencer_id)

    if removed:
        click.echo(f"Deleted influencer {influencer_id}.")
    else:
        click.echo(f"No influencer with ID {influencer_id}; nothing deleted.")
