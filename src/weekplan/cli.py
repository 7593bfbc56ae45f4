"""weekplan CLI - Weekly time planner."""

import json
import logging
import sys
from dataclasses import asdict

import click

from .adapters.json_store import StoreError
from .config import load_config
from .core.formatting import (
    format_12_hour,
    format_day_breakdown,
    format_days,
    format_minutes,
    format_summary,
)
from .core.plan import Activity, Priority, active_categories, minutes_between, parse_day
from .workflows import compute_day, compute_summary, compute_week, get_store, week_order


@click.group()
@click.version_option()
@click.option("--user", "user_id", default=None, help="User to act as (default: USER_ID from config)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, user_id: str | None, debug: bool):
    """weekplan - see where your week goes."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    config = load_config()
    if user_id:
        config.user_id = user_id
    ctx.obj = config


def _fail(e: StoreError) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def week(config, as_json: bool):
    """Show how each day of the week is allocated."""
    try:
        breakdowns = compute_week(get_store(config), config.user_id)
    except StoreError as e:
        _fail(e)

    ordered = [breakdowns[d] for d in week_order(config.week_start_index())]
    if as_json:
        click.echo(json.dumps([asdict(b) for b in ordered], indent=2))
        return

    click.echo("\n\n".join(format_day_breakdown(b) for b in ordered))


@main.command()
@click.argument("day_arg", metavar="DAY")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def day(config, day_arg: str, as_json: bool):
    """Show one day's breakdown (index 0-6 or name)."""
    try:
        day_index = parse_day(day_arg)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="DAY")

    try:
        breakdown = compute_day(get_store(config), config.user_id, day_index)
    except StoreError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps(asdict(breakdown), indent=2))
        return

    click.echo(format_day_breakdown(breakdown))


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def summary(config, as_json: bool):
    """Show need/want/free totals for the week."""
    try:
        weekly = compute_summary(get_store(config), config.user_id)
    except StoreError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps(asdict(weekly), indent=2))
        return

    click.echo(format_summary(weekly))


@main.command()
@click.option("--all", "show_all", is_flag=True, help="Include archived categories")
@click.pass_obj
def categories(config, show_all: bool):
    """List categories."""
    try:
        cats = get_store(config).list_categories(config.user_id)
    except StoreError as e:
        _fail(e)

    if not show_all:
        cats = active_categories(cats)

    if not cats:
        click.echo("No categories. Run 'weekplan seed' to add the defaults.")
        return

    for c in sorted(cats, key=lambda c: c.name.lower()):
        flags = " (archived)" if c.archived else ""
        click.echo(f"{c.id}  {c.color:<10} {c.name}{flags}")


@main.command("add-category")
@click.argument("name")
@click.option("--color", required=True, help="Display color, e.g. #3b82f6")
@click.pass_obj
def add_category(config, name: str, color: str):
    """Create a category."""
    try:
        category_id = get_store(config).create_category(config.user_id, name, color)
    except StoreError as e:
        _fail(e)
    click.echo(f"Created category {name} ({category_id})")


@main.command("archive-category")
@click.argument("category_id")
@click.pass_obj
def archive_category(config, category_id: str):
    """Archive a category; its activities still count."""
    try:
        get_store(config).update_category(config.user_id, category_id, archived=True)
    except StoreError as e:
        _fail(e)
    click.echo(f"Archived category {category_id}")


@main.command()
@click.pass_obj
def seed(config):
    """Create the default categories."""
    try:
        ids = get_store(config).seed_default_categories(config.user_id)
    except StoreError as e:
        _fail(e)
    click.echo(f"Seeded {len(ids)} categories.")


@main.command()
@click.pass_obj
def activities(config):
    """List activities."""
    store = get_store(config)
    try:
        entries = store.list_activities(config.user_id)
        cats = {c.id: c for c in store.list_categories(config.user_id)}
    except StoreError as e:
        _fail(e)

    if not entries:
        click.echo("No activities yet.")
        return

    for a in entries:
        category = cats.get(a.category_id)
        name = category.name if category else "(missing category)"
        label = f" - {a.label}" if a.label else ""
        times = ""
        if a.start_time_local and a.end_time_local:
            times = f" {format_12_hour(a.start_time_local)}-{format_12_hour(a.end_time_local)}"
        click.echo(
            f"{a.id}  [{a.priority.value}] {name}{label}: "
            f"{format_days(a.days_of_week)} • {format_minutes(a.minutes_per_day)} per day{times}"
        )


def _parse_days(days: str) -> list[int]:
    try:
        return sorted({parse_day(d) for d in days.split(",") if d.strip()})
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--days")


def _times_to_minutes(start: str | None, end: str | None) -> int | None:
    """Minutes per day from --start/--end, or None when neither is given."""
    if not start and not end:
        return None
    if not (start and end):
        raise click.UsageError("--start and --end must be given together")
    try:
        return minutes_between(start, end)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--start/--end")


@main.command()
@click.argument("category_id")
@click.option("--priority", type=click.Choice([p.value for p in Priority]), required=True)
@click.option("--days", required=True, help="Comma-separated days, e.g. 'mon,wed,fri' or '1,3,5'")
@click.option("--minutes", type=click.IntRange(min=0), default=None, help="Minutes per day")
@click.option("--start", default=None, help="Start time HH:mm")
@click.option("--end", default=None, help="End time HH:mm")
@click.option("--label", default=None, help="Optional label")
@click.pass_obj
def add(config, category_id, priority, days, minutes, start, end, label):
    """Add a recurring activity."""
    days_of_week = _parse_days(days)

    timed_minutes = _times_to_minutes(start, end)
    if timed_minutes is not None:
        minutes = timed_minutes
    elif minutes is None:
        raise click.UsageError("Give either --minutes or --start/--end")

    store = get_store(config)
    try:
        if store.get_category(config.user_id, category_id) is None:
            click.echo(f"Warning: category {category_id} does not exist; "
                       "the activity will not be counted until it does.", err=True)
        activity_id = store.create_activity(
            config.user_id,
            Activity(
                id="",
                category_id=category_id,
                priority=Priority(priority),
                days_of_week=days_of_week,
                minutes_per_day=minutes,
                label=label,
                start_time_local=start,
                end_time_local=end,
            ),
        )
    except StoreError as e:
        _fail(e)
    click.echo(f"Added activity {activity_id}: {format_days(days_of_week)}, {format_minutes(minutes)} per day")


@main.command()
@click.argument("activity_id")
@click.option("--category", "category_id", default=None, help="Move to another category")
@click.option("--priority", type=click.Choice([p.value for p in Priority]), default=None)
@click.option("--days", default=None, help="Comma-separated days, e.g. 'mon,wed,fri' or '1,3,5'")
@click.option("--minutes", type=click.IntRange(min=0), default=None,
              help="Minutes per day (clears any start/end times)")
@click.option("--start", default=None, help="Start time HH:mm")
@click.option("--end", default=None, help="End time HH:mm")
@click.option("--label", default=None, help="New label ('' to clear)")
@click.pass_obj
def edit(config, activity_id, category_id, priority, days, minutes, start, end, label):
    """Change fields of an existing activity."""
    updates = {}
    if category_id is not None:
        updates["category_id"] = category_id
    if priority is not None:
        updates["priority"] = Priority(priority)
    if days is not None:
        updates["days_of_week"] = _parse_days(days)
    if label is not None:
        updates["label"] = label or None

    timed_minutes = _times_to_minutes(start, end)
    if timed_minutes is not None:
        if minutes is not None:
            raise click.UsageError("Give either --minutes or --start/--end, not both")
        updates.update(minutes_per_day=timed_minutes, start_time_local=start, end_time_local=end)
    elif minutes is not None:
        updates.update(minutes_per_day=minutes, start_time_local=None, end_time_local=None)

    if not updates:
        raise click.UsageError("Nothing to change")

    try:
        get_store(config).update_activity(config.user_id, activity_id, **updates)
    except StoreError as e:
        _fail(e)
    click.echo(f"Updated activity {activity_id}")


@main.command("delete-category")
@click.argument("category_id")
@click.pass_obj
def delete_category(config, category_id: str):
    """Delete a category; its activities stop counting."""
    store = get_store(config)
    try:
        store.delete_category(config.user_id, category_id)
        orphaned = [a for a in store.list_activities(config.user_id) if a.category_id == category_id]
    except StoreError as e:
        _fail(e)
    click.echo(f"Deleted category {category_id}")
    if orphaned:
        click.echo(f"Warning: {len(orphaned)} activities still reference it and will not be "
                   "counted. Use 'weekplan archive-category' to keep them in your week.", err=True)


@main.command()
@click.argument("activity_id")
@click.pass_obj
def remove(config, activity_id: str):
    """Delete an activity."""
    try:
        get_store(config).delete_activity(config.user_id, activity_id)
    except StoreError as e:
        _fail(e)
    click.echo(f"Removed activity {activity_id}")


if __name__ == "__main__":
    main()
