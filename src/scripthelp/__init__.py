from scripthelp.base import (
    InvalidOptionError,
    ScriptHelpError,
    UnknownCommandError,
    UnreadableSourceError,
)
from scripthelp.models import FilterCriterion, FunctionRecord, LineKind
from scripthelp.scanner import (
    CommentScanner,
    extract_all_comments,
    list_functions,
    scan_lines,
)

__all__ = [
    "CommentScanner",
    "FilterCriterion",
    "FunctionRecord",
    "InvalidOptionError",
    "LineKind",
    "ScriptHelpError",
    "UnknownCommandError",
    "UnreadableSourceError",
    "extract_all_comments",
    "list_functions",
    "scan_lines",
]
