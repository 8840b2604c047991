"""Line-level extractors: classification, comment collection, header names."""

from __future__ import annotations

import re

from .models import LineKind

# "function" keyword followed by at least the start of a name
_FUNCTION_KEYWORD = re.compile(r"^function\s+(\S+)")

# Body brace on the header line: "name() {", "function name {", "name(){ :; }"
_INLINE_BRACE = re.compile(r"\(\)\s*\{|^function\s+[^\s(){]+\s*\{")

# Leading indentation, the "#" marker and at most one following blank
_COMMENT_MARKER = re.compile(r"^\s*#[ \t]?")

# Decorative rules such as "# -----", "# =====" or a line of "#"
_SEPARATOR = re.compile(r"([#=-])\1*")

# Function name part of a header token; drops "()" and a glued "{"
_NAME_TOKEN = re.compile(r"[^(){]*")

COMMENT_INDENT = "    "


def is_comment_line(line: str) -> bool:
    """Check if a line is a comment (indented or not)."""
    return line.lstrip().startswith("#")


def is_func_start_line(line: str) -> bool:
    """Check if a line starts a function definition (with or without '{')."""
    stripped = line.lstrip()
    return bool(_FUNCTION_KEYWORD.match(stripped)) or "()" in stripped


def is_open_brace_line(line: str) -> bool:
    """Check if a line contains only '{' (with or without indentation)."""
    return line.strip() == "{"


def classify_line(line: str) -> LineKind:
    """Categorize a single line of script source.

    Categories are checked in priority order: comment, function start
    (inline or bare), lone opening brace, and anything else.

    Args:
        line: One source line without its line terminator

    Returns:
        The LineKind of the line
    """
    if is_comment_line(line):
        return LineKind.COMMENT
    if is_func_start_line(line):
        stripped = line.strip()
        if stripped.endswith("{") or _INLINE_BRACE.search(stripped):
            return LineKind.INLINE_START
        return LineKind.BARE_START
    if is_open_brace_line(line):
        return LineKind.OPEN_BRACE
    return LineKind.OTHER


def extract_func_name(line: str) -> str:
    """Extract the function name from a function definition line.

    Recognized forms, checked in order:
        function name() ...
        function name ...
        name() ...

    Args:
        line: Header line of either start variety

    Returns:
        Function name, or "" if the line matches no form
    """
    stripped = line.lstrip()

    keyword = _FUNCTION_KEYWORD.match(stripped)
    if keyword:
        token = keyword.group(1)
    elif "()" in stripped:
        token = stripped.split()[0]
    else:
        return ""

    name = _NAME_TOKEN.match(token).group(0)
    return "".join(name.split())


def collect_comment(existing_block: str, comment_line: str) -> str:
    """Append a comment line to an existing comment block.

    Separator lines (repeated '#', '-' or '=') and blank comment lines
    contribute nothing. Continuation lines are indented so the block can be
    printed beneath a function name as-is.

    Args:
        existing_block: Block collected so far ("" when empty)
        comment_line: Raw comment line, marker included

    Returns:
        Combined comment block
    """
    fragment = _COMMENT_MARKER.sub("", comment_line, count=1)

    content = fragment.strip()
    if not content or _SEPARATOR.fullmatch(content):
        return existing_block

    if not existing_block:
        return fragment
    return f"{existing_block}\n{COMMENT_INDENT}{fragment}"
