"""
Help text rendering for command groups and commands.
"""

from typing import List

from .command_tree import Command, CommandGroup

LINE_WIDTH = 80
INDENT = "    "
NAME_WIDTH = 10


def wrap_text(text: str, width: int) -> List[str]:
    """
    Greedily pack whitespace-delimited words into lines.

    A word moves to a new line when appending it to the current line would
    make the line length meet or exceed ``width``.
    """
    lines = []
    line = ""
    for word in text.split():
        if not line:
            line = word
        elif len(line) + 1 + len(word) >= width:
            lines.append(line)
            line = word
        else:
            line = f"{line} {word}"
    if line:
        lines.append(line)
    return lines


def render_usage(command: Command) -> str:
    return f"Usage: {command.usage}"


def render_group_help(group: CommandGroup) -> str:
    """List every direct child of ``group`` that has a brief description."""
    lines = [f"{group.title} commands:"]
    for node in group.children:
        if node.brief:
            lines.append(f"{INDENT}{node.name:<{NAME_WIDTH}}  {node.brief}")
    return "\n".join(lines)


def render_command_help(command: Command) -> str:
    """Render usage, wrapped description and shortcuts for one command."""
    lines = [render_usage(command)]

    description = command.description or command.brief
    if description:
        lines.append("")
        lines.append("Description:")
        for line in wrap_text(description, LINE_WIDTH - len(INDENT)):
            lines.append(f"{INDENT}{line}")

    if command.shortcuts:
        label = "Shortcuts" if len(command.shortcuts) > 1 else "Shortcut"
        lines.append("")
        lines.append(f"{label}: {', '.join(command.shortcuts)}")

    return "\n".join(lines)
