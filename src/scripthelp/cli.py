"""Command line entry point for scripthelp.

Commands:
    extract <script> [function]  - Functions with their comment blocks
    list <script>                - Function names only
    help [command]               - Usage, or the help of one command
"""

from __future__ import annotations

import inspect
import logging
import sys
from pathlib import Path
from typing import Callable

from .base import ScriptHelpError, UnknownCommandError
from .context import ScriptContext
from .generators import generate_usage
from .options import CliOptions, parse_cli_options
from .scanner import extract_all_comments, list_functions

log = logging.getLogger(__name__)

Handler = Callable[[CliOptions, list[str], ScriptContext], None]


def _script_and_rest(options: CliOptions, args: list[str]) -> tuple[Path, list[str]]:
    """Take the script path from --file or the first argument."""
    if options.file is not None:
        return options.file, args
    if not args:
        raise ScriptHelpError("No script given (pass a path or --file=<script>)")
    return Path(args[0]), args[1:]


def cmd_extract(options: CliOptions, args: list[str], ctx: ScriptContext) -> None:
    """Print every function of a script with the comment block above it.

    Usage: extract <script> [function]

    With a function name only that function is printed. The name is given
    without the --prefix, which is added before matching.
    """
    script, rest = _script_and_rest(options, args)
    target = f"{options.prefix}{rest[0]}" if rest else None
    extract_all_comments(script, target, prefix=options.prefix)


def cmd_list(options: CliOptions, args: list[str], ctx: ScriptContext) -> None:
    """Print the names of the functions declared in a script.

    Usage: list <script>
    """
    script, _ = _script_and_rest(options, args)
    for name in list_functions(script, prefix=options.prefix):
        print(name)


def cmd_help(options: CliOptions, args: list[str], ctx: ScriptContext) -> None:
    """Show the usage text, or the help of a single command.

    Usage: help [command]
    """
    if not args:
        sys.stdout.write(usage(ctx))
        return
    handler = lookup_command(args[0])
    print(inspect.cleandoc(handler.__doc__ or ""))


COMMANDS: dict[str, Handler] = {
    "extract": cmd_extract,
    "list": cmd_list,
    "help": cmd_help,
}


def lookup_command(name: str) -> Handler:
    """Return the handler for a command name."""
    try:
        return COMMANDS[name]
    except KeyError:
        raise UnknownCommandError(name) from None


def usage(ctx: ScriptContext) -> str:
    """Usage text listing every command with its one-line summary."""
    briefs = [
        (name, inspect.getdoc(handler).splitlines()[0])
        for name, handler in COMMANDS.items()
    ]
    return generate_usage(ctx.name, briefs)


def main(argv: list[str] | None = None) -> int:
    """Run scripthelp and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    ctx = ScriptContext.from_path(sys.argv[0] or "scripthelp")

    try:
        options, positional = parse_cli_options(argv)
    except ScriptHelpError as e:
        print(e, file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if options.help:
        name, args = "help", positional[:1]
    elif not positional:
        sys.stderr.write(usage(ctx))
        return 1
    else:
        name, args = positional[0], positional[1:]

    try:
        handler = lookup_command(name)
        log.debug("Running %s with %s", name, args)
        handler(options, args, ctx)
    except ScriptHelpError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
