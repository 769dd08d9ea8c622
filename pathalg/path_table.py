"""A two-way dictionary between paths and their integer ids."""

from __future__ import annotations

from typing import Iterator

from pathalg.path import Path


class PathTable:
    """Assigns ids to paths; id 0 is always the zero path."""

    def __init__(self) -> None:
        zero = Path.zero()
        self._paths: list[Path] = [zero]
        self._ids: dict[Path, int] = {zero: 0}

    def add(self, path: Path) -> int:
        """Store ``path`` under a fresh id and return that id."""
        new_id = len(self._paths)
        stored = path.with_id(new_id)
        self._paths.append(stored)
        self._ids.setdefault(stored, new_id)
        return new_id

    def find_or_add(self, path: Path) -> int:
        """Return the id of ``path``, adding it if it is not yet known."""
        found = self._ids.get(path)
        if found is None:
            return self.add(path)
        return found

    def __getitem__(self, path_id: int) -> Path:
        return self._paths[path_id]

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._paths)