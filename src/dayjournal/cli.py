"""DayJournal CLI - one entry per day."""

import json
import logging
import sys

import click

from .adapters.drafts import DraftStore
from .config import load_config
from .core.entries import JournalEntry, parse_date
from .core.errors import JournalError, PersistenceError, ValidationError
from .core.history import format_entry_date, preview
from .core.policy import DayState
from .journal import DailyJournal, get_journal

logger = logging.getLogger(__name__)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _local(entry: JournalEntry, journal: DailyJournal):
    """Entry timestamp in the same zone the journal derives today from."""
    return entry.timestamp.astimezone(journal.clock.now().tzinfo)


def _show_entry(entry: JournalEntry, journal: DailyJournal) -> None:
    if entry.date == journal.today():
        header = "Today's Entry"
    else:
        header = f"Entry from {format_entry_date(entry.date)}"
    written = _local(entry, journal)
    click.echo(header)
    click.echo(f"Written on {written.strftime('%Y-%m-%d')} at {written.strftime('%H:%M:%S')}\n")
    click.echo(entry.content)


def _compose(initial: str = "") -> str | None:
    """Open the user's editor. Returns None if the buffer was not saved."""
    return click.edit(initial, extension=".md")


@click.group()
@click.version_option(package_name="dayjournal")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """DayJournal - write one entry per day."""
    config = load_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else config.log_level,
    )
    if ctx.obj is None:
        ctx.obj = {
            "config": config,
            "journal": get_journal(config),
            "drafts": DraftStore(config.draft_path),
        }


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def status(obj, as_json: bool):
    """Show whether today's entry is written."""
    journal: DailyJournal = obj["journal"]
    today = journal.today()
    try:
        state = journal.state_for(today)
        entry = journal.entry_for(today)
    except JournalError as e:
        _fail(f"Unable to determine if you can write today ({e})")

    if as_json:
        click.echo(
            json.dumps(
                {
                    "date": today.isoformat(),
                    "state": state.value,
                    "entry": entry.to_dict() if entry else None,
                },
                indent=2,
            )
        )
        return

    click.echo(f"{format_entry_date(today)}\n")
    if state == DayState.CAN_WRITE:
        click.echo("Ready to Write - you can write your daily entry today!")
        click.echo("Run 'dayjournal write' to start.")
    else:
        click.echo("Entry Complete - you've already written your entry for today!\n")
        if entry:
            _show_entry(entry, journal)


def _keep_draft(drafts: DraftStore, text: str) -> str:
    """Save unsent text as a draft. Returns a note for the error message."""
    try:
        drafts.save(text)
    except PersistenceError as e:
        return f"Your text could not be kept as a draft either ({e})."
    return "Your text was kept as a draft."


@main.command()
@click.option("--message", "-m", default=None, help="Entry text (opens $EDITOR when omitted)")
@click.pass_obj
def write(obj, message: str | None):
    """Write today's entry."""
    journal: DailyJournal = obj["journal"]
    drafts: DraftStore = obj["drafts"]

    try:
        state = journal.state_for(journal.today())
    except JournalError as e:
        _fail(f"Unable to determine if you can write today ({e})")
    if state != DayState.CAN_WRITE:
        _fail("You've already written today's entry. Use 'dayjournal edit' to change it.")

    if message is None:
        try:
            draft = drafts.load()
        except PersistenceError as e:
            logger.warning(f"Ignoring unreadable draft: {e}")
            draft = None
        message = _compose(draft or "")
        if message is None:
            click.echo("Entry not saved.")
            return

    try:
        entry = journal.write_today(message)
    except ValidationError:
        _fail("Please write something before saving!")
    except PersistenceError as e:
        _fail(f"Failed to save entry ({e}). {_keep_draft(drafts, message)}")
    except JournalError as e:
        _fail(str(e))

    try:
        drafts.clear()
    except PersistenceError as e:
        logger.warning(f"Entry saved but the old draft remains: {e}")
    click.echo(f"✓ Entry saved for {entry.date.isoformat()}")


@main.command()
@click.option("--message", "-m", default=None, help="New entry text (opens $EDITOR when omitted)")
@click.pass_obj
def edit(obj, message: str | None):
    """Edit today's entry. Past entries are view-only."""
    journal: DailyJournal = obj["journal"]
    drafts: DraftStore = obj["drafts"]

    try:
        current = journal.entry_for(journal.today())
    except JournalError as e:
        _fail(f"Failed to load today's entry ({e})")
    if current is None:
        _fail("No entry for today yet. Use 'dayjournal write' first.")

    if message is None:
        message = _compose(current.content)
        if message is None:
            click.echo("Entry not changed.")
            return

    try:
        entry = journal.edit_today(message)
    except ValidationError:
        _fail("Please write something before saving!")
    except PersistenceError as e:
        _fail(f"Failed to update entry ({e}). {_keep_draft(drafts, message)}")
    except JournalError as e:
        _fail(f"Failed to update entry ({e})")

    click.echo(f"✓ Entry updated for {entry.date.isoformat()}")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date to view (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def show(obj, target_date: str | None, as_json: bool):
    """Show the entry for a date."""
    journal: DailyJournal = obj["journal"]
    try:
        target = parse_date(target_date) if target_date else journal.today()
        entry = journal.entry_for(target)
    except ValidationError as e:
        _fail(str(e))
    except JournalError as e:
        _fail(f"Failed to load entry ({e})")

    if as_json:
        click.echo(json.dumps(entry.to_dict() if entry else None, indent=2))
        return

    if entry is None:
        click.echo(f"No journal entry for {format_entry_date(target)}.")
        return

    _show_entry(entry, journal)
    if target != journal.today():
        click.echo("\n(view only)")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--limit", "-n", type=click.IntRange(min=0), default=None,
              help="Show at most N entries")
@click.pass_obj
def history(obj, as_json: bool, limit: int | None):
    """List past entries, newest first."""
    journal: DailyJournal = obj["journal"]
    config = obj["config"]
    try:
        entries = journal.history()
    except JournalError as e:
        _fail(f"Failed to load journal entries ({e})")

    if limit is not None:
        entries = entries[:limit]

    if as_json:
        click.echo(json.dumps([e.to_dict() for e in entries], indent=2))
        return

    if not entries:
        click.echo("No entries yet. Start writing your first entry!")
        return

    for entry in entries:
        written = _local(entry, journal)
        click.echo(f"### {format_entry_date(entry.date)}  ({written.strftime('%H:%M')})")
        flat = " ".join(entry.content.split())
        click.echo(f"  {preview(flat, config.preview_length)}")
        click.echo()


if __name__ == "__main__":
    main()
