"""
Command Tree - Registry and lookup for interactive commands

This module holds the static tree of command groups and commands, and
resolves typed command lines against it using unambiguous prefix matching
and shortcut aliases.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from ..parsers.command_line import CommandLineParser
from .exceptions import (
    AmbiguousCommandError,
    CommandNotFoundError,
    CommandRegistrationError,
)

logger = logging.getLogger(__name__)


@dataclass
class Command:
    """A leaf command: name, help text and the handler that runs it."""

    name: str
    usage: str
    handler: "CommandHandler"
    brief: str = ""
    description: str = ""
    shortcuts: List[str] = field(default_factory=list)
    parent: Optional["CommandGroup"] = field(default=None, repr=False, compare=False)


class CommandGroup:
    """A named group of commands and subgroups."""

    def __init__(self, name: str, title: str = "", brief: str = ""):
        self.name = name
        self.title = title or name
        self.brief = brief
        self.parent: Optional["CommandGroup"] = None
        self.children: List["CommandNode"] = []
        self.shortcuts: Dict[str, "CommandNode"] = {}

    def __repr__(self):
        return f"CommandGroup(name={self.name!r}, children={len(self.children)})"

    @property
    def root(self) -> "CommandGroup":
        group = self
        while group.parent is not None:
            group = group.parent
        return group

    def add_command(self, command: Command) -> Command:
        """Register a leaf command in this group, along with its shortcuts."""
        shortcuts = list(command.shortcuts)
        for i, shortcut in enumerate(shortcuts):
            if not shortcut:
                raise CommandRegistrationError("Shortcut must not be empty")
            if shortcut in shortcuts[:i]:
                raise CommandRegistrationError(f"Duplicate shortcut '{shortcut}'")
            self._check_shortcut_free(shortcut)
            if shortcut == command.name or self.child(shortcut) is not None:
                raise CommandRegistrationError(
                    f"Shortcut '{shortcut}' shadows command '{shortcut}' "
                    f"in '{self.name}'"
                )

        self._add_child(command)
        command.shortcuts = []
        for shortcut in shortcuts:
            self.add_shortcut(shortcut, command.name)
        return command

    def add_group(self, group: "CommandGroup") -> "CommandGroup":
        """Register a subgroup in this group."""
        for shortcut in _collect_shortcuts(group):
            self._check_shortcut_free(shortcut)
        self._add_child(group)
        return group

    def add_shortcut(self, shortcut: str, target: str):
        """Register ``shortcut`` as an alias for the child named ``target``."""
        node = self.child(target)
        if node is None:
            raise CommandRegistrationError(
                f"Shortcut '{shortcut}' refers to unknown command '{target}'"
            )
        if not shortcut:
            raise CommandRegistrationError("Shortcut must not be empty")
        self._check_shortcut_free(shortcut)
        if self.child(shortcut) is not None:
            raise CommandRegistrationError(
                f"Shortcut '{shortcut}' shadows command '{shortcut}' in '{self.name}'"
            )

        self.shortcuts[shortcut] = node
        if isinstance(node, Command):
            node.shortcuts.append(shortcut)
        logger.debug(f"Registered shortcut '{shortcut}' -> '{target}'")

    def child(self, name: str) -> Optional["CommandNode"]:
        """Return the direct child named ``name``, if any."""
        return next((node for node in self.children if node.name == name), None)

    def _add_child(self, node: "CommandNode"):
        if not node.name:
            raise CommandRegistrationError("Command name must not be empty")
        if self.child(node.name) is not None:
            raise CommandRegistrationError(
                f"Duplicate command '{node.name}' in '{self.name}'"
            )
        if node.name in self.shortcuts:
            raise CommandRegistrationError(
                f"Command '{node.name}' collides with a shortcut in '{self.name}'"
            )
        node.parent = self
        self.children.append(node)

    def _check_shortcut_free(self, shortcut: str):
        if shortcut in _collect_shortcuts(self.root):
            raise CommandRegistrationError(f"Duplicate shortcut '{shortcut}'")

    def match(self, token: str) -> "CommandNode":
        """Resolve one token against this group's names and shortcuts."""
        if not token:
            raise CommandNotFoundError("Empty command name")

        exact = self.child(token) or self.shortcuts.get(token)
        if exact is not None:
            return exact

        candidates = []
        keys = [(node.name, node) for node in self.children]
        keys.extend(self.shortcuts.items())
        for key, node in keys:
            if key.startswith(token) and all(node is not c for c in candidates):
                candidates.append(node)

        if not candidates:
            raise CommandNotFoundError(f"Command '{token}' not found")
        if len(candidates) > 1:
            names = ", ".join(node.name for node in candidates)
            raise AmbiguousCommandError(f"Command '{token}' is ambiguous ({names})")
        return candidates[0]


CommandNode = Union[Command, CommandGroup]


def _collect_shortcuts(group: CommandGroup) -> List[str]:
    shortcuts = list(group.shortcuts)
    for node in group.children:
        if isinstance(node, CommandGroup):
            shortcuts.extend(_collect_shortcuts(node))
    return shortcuts


@dataclass
class ParsedSelection:
    """Result of resolving a command line."""

    node: Optional[CommandNode] = None
    args: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.node is None


class CommandTree:
    """The complete command registry, rooted at a single group."""

    def __init__(self, root: CommandGroup):
        self.root = root

    def lookup(self, line: str) -> ParsedSelection:
        """
        Resolve a typed command line to a command and its arguments.

        Args:
            line: Raw command line

        Returns:
            The selected node and the remaining argument tokens; an empty
            selection for a blank line

        Raises:
            CommandNotFoundError: No child matches a token
            AmbiguousCommandError: A token is a prefix of several children
            MalformedQuotingError: The line has an unterminated quote
        """
        tokens = CommandLineParser(line).parse()
        if not tokens:
            return ParsedSelection()

        node: CommandNode = self.root
        while isinstance(node, CommandGroup) and tokens:
            node = node.match(tokens.pop(0))

        logger.debug(f"Resolved '{line}' to '{node.name}' with args {tokens}")
        return ParsedSelection(node=node, args=tokens)
