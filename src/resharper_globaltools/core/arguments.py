"""ArgumentList — ordered command-line tokens with a quoted rendering.

Each token knows two spellings:

* ``render()`` — the human/log form, values quoted the way the ReSharper docs
  show them (``--output="/work/report.xml"``).  Golden tests assert on this.
* ``to_argv()`` — the vector handed to ``subprocess`` (``--output=/work/report.xml``);
  the OS layer does its own quoting.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Union

PathLike = Union[str, Path]


def make_absolute(path: PathLike, working_directory: PathLike) -> str:
    """Resolve *path* against *working_directory* without touching the disk.

    The result is normalized, so ``"caches/"`` becomes ``"<wd>/caches"``.
    """
    joined = os.path.join(os.fspath(working_directory), os.fspath(path))
    return os.path.normpath(joined)


@dataclass(frozen=True, slots=True)
class Argument:
    prefix: str
    value: str = ""
    quoted: bool = False

    def render(self) -> str:
        if self.quoted:
            return f'{self.prefix}"{self.value}"'
        return f"{self.prefix}{self.value}"

    def to_argv(self) -> str:
        return f"{self.prefix}{self.value}"


class ArgumentList:
    """Append-only sequence of :class:`Argument` tokens."""

    def __init__(self, arguments: Iterable[Argument] = ()) -> None:
        self._arguments: list[Argument] = list(arguments)

    def __iter__(self) -> Iterator[Argument]:
        return iter(self._arguments)

    def __len__(self) -> int:
        return len(self._arguments)

    def __repr__(self) -> str:
        return f"ArgumentList({self.render()!r})"

    # ── builders ────────────────────────────────────────────────────

    def append(self, switch: str) -> ArgumentList:
        """Bare switch, e.g. ``--debug``."""
        self._arguments.append(Argument(switch))
        return self

    def append_quoted(self, value: str) -> ArgumentList:
        """Quoted positional, e.g. the solution path."""
        self._arguments.append(Argument("", value, quoted=True))
        return self

    def append_switch(self, name: str, value: str, *, separator: str = "=") -> ArgumentList:
        """Unquoted valued switch, e.g. ``--verbosity=ERROR``."""
        self._arguments.append(Argument(f"{name}{separator}", value))
        return self

    def append_switch_quoted(
        self, name: str, value: str, *, separator: str = "="
    ) -> ArgumentList:
        """Quoted valued switch, e.g. ``--project="Test.*"``."""
        self._arguments.append(Argument(f"{name}{separator}", value, quoted=True))
        return self

    # ── output ──────────────────────────────────────────────────────

    def render(self) -> str:
        return " ".join(a.render() for a in self._arguments)

    def to_argv(self) -> list[str]:
        return [a.to_argv() for a in self._arguments]
