"""
Core help system components.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class HelpContent:
    """
    A single help item: a command template and what it does.
    """
    id: str                          # Unique identifier like "cmd.show"
    command: str                     # Command template like "show [<context>]"
    description: str                 # What the command does
    priority: int = 50               # Lower = listed first

    def get_command(self, prog: str = 'app') -> str:
        """Render the command with {prog} substituted."""
        return self.command.replace('{prog}', prog)

    def format_as_example(self, prog: str = 'app', comment_column: int = 31,
                          indent: str = '  ') -> str:
        """
        Format as a usage line with an aligned comment.

        Returns:
            Line like: "  show [<context>]             # show logging context(s)"
        """
        cmd = indent + self.get_command(prog)
        comment = f"# {self.description}"

        padding_needed = comment_column - len(cmd)
        if padding_needed > 0:
            return f"{cmd}{' ' * padding_needed}{comment}"
        # Command is too long, just use 2 spaces
        return f"{cmd}  {comment}"


class HelpSection:
    """
    A titled group of help content items.
    """

    def __init__(self, id: str, title: str):
        self.id = id
        self.title = title
        self.items: List[HelpContent] = []

    def add_items(self, *items: HelpContent):
        """Add multiple help content items."""
        self.items.extend(items)

    def format_section(self, prog: str = 'app', comment_column: int = 31,
                       show_title: bool = True) -> str:
        """
        Format every item as an aligned usage line, ordered by priority.

        Args:
            prog: Program name substituted for {prog}
            comment_column: Column where the '#' comments start
            show_title: Prefix the block with "<title>:"

        Returns:
            Formatted block (no trailing newline)
        """
        lines = []
        if show_title:
            lines.append(f"{self.title}:")
        # sorted() is stable, so equal priorities keep insertion order
        for item in sorted(self.items, key=lambda i: i.priority):
            lines.append(item.format_as_example(prog, comment_column))
        return "\n".join(lines)
