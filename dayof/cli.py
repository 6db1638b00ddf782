#!/usr/bin/env python3
"""
cli.py
------
Command-line interface for browsing and exporting the day catalog.

Commands:
    dayof stats [--titles]
    dayof show SLUG
    dayof search QUERY... [--limit N]
    dayof month MONTH YEAR
    dayof upcoming [--limit N]
    dayof today
    dayof related SLUG [--limit N]
    dayof export [OUTPUT] [--by-category]
    dayof split INPUT OUTPUT_DIR

Examples:
    # Category totals
    dayof stats

    # Calendar view for a future year (projected from base-year data)
    dayof month 3 2026

    # Pin "today" for reproducible output
    dayof --today 2025-09-01 upcoming --limit 5

    # Write the enriched catalog
    dayof export exports/days.json
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime
from pathlib import Path
from typing import Optional

# --- Third party imports ---
import click

# --- Local imports ---
from dayof.catalog.catalog import Catalog
from dayof.catalog.categories import get_category
from dayof.catalog.enums import MonthMatch
from dayof.catalog.export import CatalogExporter, split_days_file
from dayof.catalog.loader import load_catalog
from dayof.catalog.models import Day
from dayof.core.cli import setup_logger
from dayof.core.logging_manager import handle_cli_error
from dayof.core.paths import CATEGORIES_DIR, EXPORT_DIR, LOG_DIR
from dayof.utils.dates import format_date, month_name


def _catalog(ctx: click.Context) -> Catalog:
    """Load the catalog once per invocation."""
    if ctx.obj.get("catalog") is None:
        ctx.obj["catalog"] = load_catalog(
            data_dir=ctx.obj["data_dir"],
            today=ctx.obj["today"],
            logger=ctx.obj["logger"],
        )
    return ctx.obj["catalog"]


def _echo_day(day: Day) -> None:
    category = get_category(day.category_id)
    click.echo(f"📅 {day.date}  {day.title} [{category.icon} {category.name}]")


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=str(CATEGORIES_DIR),
    help="Directory with category source files",
)
@click.option("--log-dir", type=click.Path(), default=str(LOG_DIR), help="Directory for log files")
@click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Reference date (YYYY-MM-DD) instead of the system clock",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    data_dir: str,
    log_dir: str,
    today: Optional[datetime],
    verbose: bool,
) -> None:
    """
    Browse the catalog of special days.

    Loads every category file, fills in generated occurrences, FAQs and
    background text, then answers lookups by slug, category, month and
    free text.
    """
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = Path(data_dir)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["today"] = today.date() if today else None
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "dayof", verbose=verbose)
    ctx.obj["catalog"] = None


@cli.command("stats")
@click.option("--titles", is_flag=True, help="List every title under its category")
@click.pass_context
def stats(ctx: click.Context, titles: bool) -> None:
    """Show event totals by category."""
    try:
        catalog = _catalog(ctx)
        click.echo(f"Total events: {len(catalog)}")
        for category in catalog.categories:
            days = catalog.get_days_by_category(category.name)
            click.echo(f"{category.icon} {category.name}: {len(days)}")
            if titles:
                for day in days:
                    click.echo(f"  - {day.title}")
    except Exception as e:
        handle_cli_error(ctx, e, "stats")


@cli.command("show")
@click.argument("slug")
@click.pass_context
def show(ctx: click.Context, slug: str) -> None:
    """Show one day with its generated details."""
    try:
        day = _catalog(ctx).get_day_by_slug(slug)
    except Exception as e:
        handle_cli_error(ctx, e, "show", {"slug": slug})
        return

    if day is None:
        click.echo(f"No day found for slug '{slug}'", err=True)
        ctx.exit(1)

    _echo_day(day)
    click.echo(f"   {format_date(day.date)}")
    if day.description:
        click.echo(f"\n{day.description}")
    if day.tags:
        click.echo(f"\nTags: {', '.join(day.tags)}")
    if day.next_occurrences:
        click.echo(f"Next: {', '.join(day.next_occurrences)}")
    if day.history:
        click.echo(f"\nHistory: {day.history}")
    if day.why_it_matters:
        click.echo(f"\nWhy it matters: {day.why_it_matters}")
    for faq in day.faqs or ():
        click.echo(f"\nQ: {faq.question}\nA: {faq.answer}")


@cli.command("search")
@click.argument("query", nargs=-1, required=True)
@click.option("--limit", type=int, default=None, help="Maximum results")
@click.pass_context
def search(ctx: click.Context, query: tuple, limit: Optional[int]) -> None:
    """Search titles, descriptions and tags (case-insensitive)."""
    try:
        results = _catalog(ctx).search_days(" ".join(query))
    except Exception as e:
        handle_cli_error(ctx, e, "search")
        return

    if not results:
        click.echo("No results found.")
        return

    click.echo(f"Found {len(results)} results:\n")
    for day in results[:limit] if limit is not None else results:
        _echo_day(day)


@cli.command("month")
@click.argument("month", type=int)
@click.argument("year", type=int)
@click.pass_context
def month(ctx: click.Context, month: int, year: int) -> None:
    """List the days of a month, sorted by day of month."""
    try:
        result = _catalog(ctx).lookup_month(month, year)
    except Exception as e:
        handle_cli_error(ctx, e, "month", {"month": month, "year": year})
        return

    if result.kind is MonthMatch.EMPTY:
        click.echo(f"No days found for {month:02d}/{year}.")
        return

    click.echo(f"{month_name(month)} {year}")
    if result.kind is MonthMatch.FALLBACK:
        click.echo(f"(showing {result.from_year} dates)")
    elif result.kind is MonthMatch.PROJECTED:
        click.echo(f"(projected from {result.from_year})")
    for day in sorted(result.days, key=lambda d: d.day_of_month):
        _echo_day(day)


@cli.command("upcoming")
@click.option("--limit", type=int, default=10, show_default=True, help="Maximum results")
@click.pass_context
def upcoming(ctx: click.Context, limit: int) -> None:
    """List days dated today or later."""
    try:
        days = _catalog(ctx).get_upcoming_days(limit, today=ctx.obj["today"])
    except Exception as e:
        handle_cli_error(ctx, e, "upcoming")
        return

    if not days:
        click.echo("No upcoming days.")
        return
    for day in days:
        _echo_day(day)


@cli.command("today")
@click.pass_context
def today(ctx: click.Context) -> None:
    """List days celebrated on today's month and day."""
    try:
        days = _catalog(ctx).get_todays_days(today=ctx.obj["today"])
    except Exception as e:
        handle_cli_error(ctx, e, "today")
        return

    if not days:
        click.echo("Nothing special today.")
        return
    for day in days:
        _echo_day(day)


@cli.command("related")
@click.argument("slug")
@click.option("--limit", type=int, default=5, show_default=True, help="Maximum results")
@click.pass_context
def related(ctx: click.Context, slug: str, limit: int) -> None:
    """List days related to SLUG."""
    try:
        catalog = _catalog(ctx)
        day = catalog.get_day_by_slug(slug)
    except Exception as e:
        handle_cli_error(ctx, e, "related", {"slug": slug})
        return

    if day is None:
        click.echo(f"No day found for slug '{slug}'", err=True)
        ctx.exit(1)

    for other in catalog.get_related_days(day, limit):
        _echo_day(other)


@cli.command("export")
@click.argument("output", type=click.Path(), required=False)
@click.option("--by-category", is_flag=True, help="Write one file per category into OUTPUT")
@click.pass_context
def export(ctx: click.Context, output: Optional[str], by_category: bool) -> None:
    """
    Write the enriched catalog as JSON.

    OUTPUT defaults to exports/days.json, or exports/categories/ with
    --by-category.
    """
    if output is None:
        output = str(EXPORT_DIR / ("categories" if by_category else "days.json"))
    try:
        exporter = CatalogExporter(_catalog(ctx), logger=ctx.obj["logger"])
        if by_category:
            exporter.export_by_category(Path(output))
        else:
            exporter.export_catalog(Path(output))
        click.echo(f"✅ {exporter.stats.summary()}")
    except Exception as e:
        handle_cli_error(ctx, e, "export", {"output": output})


@cli.command("split")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_dir", type=click.Path(file_okay=False))
@click.pass_context
def split(ctx: click.Context, input_file: str, output_dir: str) -> None:
    """Split a combined days file into per-category source files."""
    try:
        counts = split_days_file(Path(input_file), Path(output_dir), logger=ctx.obj["logger"])
    except Exception as e:
        handle_cli_error(ctx, e, "split", {"input": input_file})
        return

    for name, count in counts.items():
        click.echo(f"{name}: {count} days")
    click.echo("✅ Split complete")


if __name__ == "__main__":
    cli()
