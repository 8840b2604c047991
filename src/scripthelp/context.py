"""Location of the invoked script."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ScriptContext:
    """Where the running script lives and what it is called."""

    name: str  # "deploy.sh"
    directory: Path
    file: Path
    base: str  # name without ".sh"

    @classmethod
    def from_path(cls, path: str | Path) -> ScriptContext:
        """Resolve the context of a script from the path it was invoked by."""
        path = Path(path)
        directory = path.resolve().parent
        name = path.name
        base = name[: -len(".sh")] if name.endswith(".sh") and name != ".sh" else name
        return cls(name=name, directory=directory, file=directory / name, base=base)
