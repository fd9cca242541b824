"""
DNS Manager - Command registry and dispatcher for the cf tool

This module builds the command tree once and runs typed command lines
against it, reporting errors without ending the session.
"""

import logging

from .command_tree import Command, CommandGroup, CommandTree
from .exceptions import (
    CommandLookupError,
    ConfigError,
    CredentialError,
    ProviderError,
    UsageError,
)
from .help import render_group_help, render_usage
from .record_manager import (
    AddRecordHandler,
    DeleteRecordsHandler,
    HelpHandler,
    ListRecordsHandler,
    Outcome,
    QuitHandler,
    SetZoneHandler,
    UpsertRecordHandler,
    report_lookup_error,
)
from .session import Session

logger = logging.getLogger(__name__)


def build_command_tree() -> CommandTree:
    """Build the complete command registry."""
    root = CommandGroup("primary", title="Primary")

    root.add_command(
        Command(
            name="help",
            description="Display help for a command.",
            usage="help [<command>]",
            handler=HelpHandler(),
        )
    )
    root.add_command(
        Command(
            name="list",
            brief="List all DNS records",
            description="List all DNS records in the currently active zone.",
            usage="list [<type>]",
            handler=ListRecordsHandler(),
        )
    )
    root.add_command(
        Command(
            name="ip4",
            brief="Add or modify an IPv4 Address (type A) record",
            description="Add or modify an IPv4 address (type A) DNS record "
            "in the currently active zone.",
            usage="ip4 <name> <address>",
            handler=UpsertRecordHandler("A"),
        )
    )
    root.add_command(
        Command(
            name="ip6",
            brief="Add or modify an IPv6 Address (type AAAA) record",
            description="Add or modify an IPv6 address (type AAAA) DNS record "
            "in the currently active zone.",
            usage="ip6 <name> <address>",
            handler=UpsertRecordHandler("AAAA"),
        )
    )
    root.add_command(
        Command(
            name="cname",
            brief="Add or modify a CNAME record",
            description="Add or modify a CNAME DNS record "
            "in the currently active zone.",
            usage="cname <name> <address>",
            handler=UpsertRecordHandler("CNAME"),
        )
    )
    root.add_command(
        Command(
            name="txt",
            brief="Add or modify a text (type TXT) record",
            description="Add or modify a text (type TXT) DNS record "
            "in the currently active zone.",
            usage="txt <name> <content>",
            handler=UpsertRecordHandler("TXT"),
        )
    )
    root.add_command(
        Command(
            name="add",
            brief="Add a DNS record",
            description="Add a DNS record of the requested type "
            "in the currently active zone. The type must be one of the "
            "allowed DNS record types (A, AAAA, CNAME, etc.). If the "
            "content string has spaces, it must be enclosed in quotes. "
            "This command always adds a new record if it succeeds, even if "
            "there is already another record with the same name and type.",
            usage='add <type> <name> "<content>"',
            handler=AddRecordHandler(),
        )
    )
    root.add_command(
        Command(
            name="delete",
            brief="Delete DNS record(s)",
            description="Delete all DNS records matching the requested type "
            "and name in the currently active zone. The type must be one "
            "of the allowed DNS record types (A, AAAA, CNAME, etc.).",
            usage="delete <type> <name>",
            handler=DeleteRecordsHandler(),
        )
    )
    root.add_command(
        Command(
            name="zone",
            brief="Set active zone",
            description="Set the active zone used by all future commands.",
            usage="zone <name>",
            handler=SetZoneHandler(),
        )
    )
    root.add_command(
        Command(
            name="quit",
            brief="Quit the application",
            usage="quit",
            handler=QuitHandler(),
        )
    )

    root.add_shortcut("?", "help")
    root.add_shortcut("l", "list")
    root.add_shortcut("ip", "ip4")

    return CommandTree(root)


class DNSManager:
    """Runs command lines against the command tree within one session."""

    def __init__(self, session: Session, tree: CommandTree = None):
        """Initialize the manager with a session and the command tree."""
        self.session = session
        self.tree = tree or build_command_tree()

    def process_line(self, line: str) -> Outcome:
        """
        Resolve and run one command line.

        Args:
            line: Command line as typed

        Returns:
            Outcome.QUIT when the session should end, Outcome.CONTINUE otherwise
        """
        try:
            selection = self.tree.lookup(line)
        except CommandLookupError as e:
            logger.debug(f"Lookup failed for '{line}': {e}")
            report_lookup_error(self.session, e)
            return Outcome.CONTINUE

        if selection.is_empty:
            return Outcome.CONTINUE

        node = selection.node
        if isinstance(node, CommandGroup):
            self.session.print(render_group_help(node))
            return Outcome.CONTINUE

        logger.info(f"Running command '{node.name}' with args {selection.args}")
        try:
            return node.handler(node, selection.args, self.session)
        except UsageError as e:
            logger.debug(f"Usage error in '{node.name}': {e}")
            self.session.print(render_usage(node))
        except CredentialError as e:
            self.session.print(str(e), style="red")
        except (ConfigError, ProviderError) as e:
            logger.error(f"Command '{node.name}' failed: {e}")
            self.session.print(f"Error: {e}", style="red")
        return Outcome.CONTINUE
