"""File primitives used by snapshot and archive operations.

Thin wrappers over pathlib/shutil. Operations receive a FileOps instance so
tests (or another host) can substitute individual primitives.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Iterator


class FileOps:
    """Local filesystem primitives. Mutating calls raise OSError on failure."""

    def dir_exists(self, path: Path) -> bool:
        return Path(path).is_dir()

    def file_exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def create_directory(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def copy_file(self, source: Path, dest: Path) -> None:
        shutil.copy2(source, dest)

    def copy_tree(self, source: Path, dest: Path) -> None:
        shutil.copytree(source, dest, symlinks=True)

    def delete_tree(self, path: Path) -> None:
        shutil.rmtree(path)

    def iter_files(self, root: Path, *, skip_dirs: tuple[Path, ...] = ()) -> Iterator[tuple[Path, Path]]:
        """Yield (full_path, relative_path) for every file under root.

        Directories listed in skip_dirs are not descended into.
        """
        root = Path(root)
        skip = {Path(p) for p in skip_dirs}
        for dirpath, dirnames, filenames in os.walk(root):
            current = Path(dirpath)
            dirnames[:] = sorted(d for d in dirnames if current / d not in skip)
            for name in sorted(filenames):
                full = current / name
                yield full, full.relative_to(root)

    def count_files(self, root: Path, *, skip_dirs: tuple[Path, ...] = ()) -> int:
        if not self.dir_exists(root):
            return 0
        return sum(1 for _ in self.iter_files(root, skip_dirs=skip_dirs))


default_file_ops = FileOps()
