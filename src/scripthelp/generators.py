"""Output generators for extracted function documentation."""

from __future__ import annotations

from typing import Iterable

from .models import FunctionRecord


def format_record(record: FunctionRecord) -> str:
    """Render one function for help output.

    The name is indented two spaces. A non-empty comment block follows at
    four spaces and is closed by a blank line; a function without comments
    is a single line.
    """
    if record.comment:
        return f"  {record.name}\n    {record.comment}\n\n"
    return f"  {record.name}\n"


def generate_usage(script_name: str, commands: Iterable[tuple[str, str]]) -> str:
    """Generate the usage text shown when no command is given.

    Args:
        script_name: Name the script was invoked as
        commands: (command, one-line description) pairs

    Returns:
        Usage text, newline terminated
    """
    lines = [
        "USAGE:",
        f"  {script_name} <command> [options] [arguments]",
        "",
        "Print the functions of a shell script together with the comment",
        "block written above each of them.",
        "",
        "Commands:",
    ]

    commands = list(commands)
    width = max((len(name) for name, _ in commands), default=0)
    for name, brief in commands:
        lines.append(f"  {name.ljust(width)}  {brief}")

    lines.extend(
        [
            "",
            "Options:",
            "  --help            Show help for a command and exit.",
            "  --verbose         Log scanner decisions to stderr.",
            "  --file=<script>   Script to scan when none is given as argument.",
            "  --prefix=<p>      Only functions named <p>*, shown without <p>.",
            "",
            "Examples:",
            f"  {script_name} extract deploy.sh",
            "    Lists every function in deploy.sh with its comments.",
            "",
            f"  {script_name} extract deploy.sh build --prefix=cmd_",
            "    Shows the comments of the function cmd_build only.",
            "",
        ]
    )
    return "\n".join(lines)
