"""
Record Manager - Command handlers for DNS record operations

Each command in the tree carries one handler. Handlers check their argument
count, obtain the API client and active zone from the session, call the
provider and print the result.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from ..parsers.command_line import join_args
from ..providers.base_provider import AUTOMATIC_TTL
from ..utils.validators import normalize_record_type, validate_record_fields
from .command_tree import Command, CommandGroup, CommandTree
from .exceptions import (
    AmbiguousCommandError,
    CommandLookupError,
    CommandNotFoundError,
    ProviderError,
    UsageError,
)
from .help import render_command_help, render_group_help
from .session import Session

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """What the dispatcher should do after a command ran."""

    CONTINUE = "continue"
    QUIT = "quit"


def report_lookup_error(session: Session, error: CommandLookupError):
    """Print the short message for a failed command lookup."""
    if isinstance(error, CommandNotFoundError):
        session.print("Command not found.")
    elif isinstance(error, AmbiguousCommandError):
        session.print("Command ambiguous.")
    else:
        session.print(f"Error: {error}")


class CommandHandler(ABC):
    """Base class for command handlers."""

    min_args = 0
    max_args: Optional[int] = 0

    def check_args(self, args: List[str]):
        """Raise UsageError when the argument count is out of range."""
        if len(args) < self.min_args:
            raise UsageError(f"expected at least {self.min_args} argument(s)")
        if self.max_args is not None and len(args) > self.max_args:
            raise UsageError(f"expected at most {self.max_args} argument(s)")

    def __call__(self, command: Command, args: List[str], session: Session) -> Outcome:
        self.check_args(args)
        return self.execute(command, args, session) or Outcome.CONTINUE

    @abstractmethod
    def execute(
        self, command: Command, args: List[str], session: Session
    ) -> Optional[Outcome]:
        """Run the command with already validated arguments."""
        pass


class HelpHandler(CommandHandler):
    """Show the command list, or the help of one command."""

    max_args = None

    def execute(self, command, args, session):
        group = command.parent
        if not args:
            session.print(render_group_help(group))
            return

        try:
            selection = CommandTree(group.root).lookup(join_args(args))
        except CommandLookupError as e:
            report_lookup_error(session, e)
            return

        if isinstance(selection.node, CommandGroup):
            session.print(render_group_help(selection.node))
        elif selection.node is not None:
            session.print(render_command_help(selection.node))


class ListRecordsHandler(CommandHandler):
    """Print the records of the active zone, optionally filtered by type."""

    max_args = 1

    def execute(self, command, args, session):
        zone_id = session.get_zone()
        api = session.get_api()

        record_type = normalize_record_type(args[0]) if args else ""
        records = api.list_records(zone_id, record_type=record_type)

        width_type = max((len(r.type) for r in records), default=0)
        width_name = max((len(r.name) for r in records), default=0)

        for r in records:
            session.print(f"{r.type:<{width_type}} {r.name:<{width_name}} {r.content}")


class UpsertRecordHandler(CommandHandler):
    """Add a record of a fixed type, or update the content of an existing one.

    When the zone already holds several records with the same type and name,
    the first one returned by the provider is the one that gets updated; the
    others are left alone.
    """

    min_args = 2
    max_args = 2

    def __init__(self, record_type: str):
        self.record_type = record_type

    def execute(self, command, args, session):
        name, content = args
        if not validate_record_fields(self.record_type, name, content):
            raise UsageError("record name and content are required")

        api = session.get_api()
        zone_id = session.get_zone()

        existing = api.list_records(zone_id, record_type=self.record_type, name=name)
        if existing:
            record = existing[0]
            if record.content == content:
                logger.info(f"No change needed: {name} -> {content}")
                session.print("DNS record unchanged.")
                return
            api.update_record(
                zone_id,
                record.id,
                record.type,
                name,
                content,
                ttl=record.ttl,
                proxied=record.proxied,
            )
        else:
            api.create_record(
                zone_id,
                self.record_type,
                name,
                content,
                ttl=AUTOMATIC_TTL,
                proxied=False,
            )

        session.print("DNS record updated.", style="green")


class AddRecordHandler(CommandHandler):
    """Always create a new record, even when one with the same name exists."""

    min_args = 3
    max_args = 3

    def execute(self, command, args, session):
        record_type, name, content = args
        if not validate_record_fields(record_type, name, content):
            raise UsageError("record type, name and content are required")

        api = session.get_api()
        zone_id = session.get_zone()

        api.create_record(
            zone_id,
            normalize_record_type(record_type),
            name,
            content,
            ttl=AUTOMATIC_TTL,
            proxied=False,
        )
        session.print("DNS record added.", style="green")


class DeleteRecordsHandler(CommandHandler):
    """Delete every record matching a type and name."""

    min_args = 2
    max_args = 2

    def execute(self, command, args, session):
        record_type, name = args
        if not validate_record_fields(record_type, name):
            session.print("Must provide valid DNS record type and name.")
            return

        api = session.get_api()
        zone_id = session.get_zone()

        records = api.list_records(
            zone_id, record_type=normalize_record_type(record_type), name=name
        )
        if not records:
            session.print("No matching record(s) found.")
            return

        deleted = 0
        for r in records:
            try:
                api.delete_record(zone_id, r.id)
            except ProviderError as e:
                logger.error(f"Failed to delete record {r.name}: {e}")
                session.print(f"Error deleting {r.name}: {e}", style="red")
                continue
            deleted += 1
            session.print(f"Deleted {r.type} record {r.name}.")

        session.print(f"Deleted {deleted} of {len(records)} record(s).")


class SetZoneHandler(CommandHandler):
    """Make a zone the active zone for the following commands."""

    min_args = 1
    max_args = 1

    def execute(self, command, args, session):
        session.set_zone(args[0])
        session.print(f"Active zone set to {args[0]}.")


class QuitHandler(CommandHandler):
    def execute(self, command, args, session):
        return Outcome.QUIT
