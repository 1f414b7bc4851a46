"""
Project path configuration.

Locates the PMDO data project on disk. The project root is taken from the
PMDO_PROJECT_ROOT environment variable when set, otherwise discovered by
walking up from the working directory.
"""

import os
from dataclasses import dataclass
from pathlib import Path

ROOT_ENV_VAR = "PMDO_PROJECT_ROOT"

# Any of these marks a directory as the project root
ROOT_MARKERS = ("PMDOData.sln", "DataGenerator")


def _is_project_root(path: Path) -> bool:
    return any((path / marker).exists() for marker in ROOT_MARKERS)


def find_project_root(start: Path | None = None) -> Path:
    """Find the PMDO project root.

    Args:
        start: Explicit starting directory (optional)

    Returns:
        First candidate containing a root marker, or the working directory
    """
    candidates: list[Path] = []
    if start is not None:
        candidates.append(Path(start))

    env_root = os.getenv(ROOT_ENV_VAR)
    if env_root:
        candidates.append(Path(env_root))

    cwd = Path.cwd()
    candidates.append(cwd)
    candidates.extend(cwd.parents)

    for candidate in candidates:
        if _is_project_root(candidate):
            return candidate.resolve()

    return cwd.resolve()


@dataclass(frozen=True)
class ProjectPaths:
    """Read-only locations of the generator sources and snapshot dumps."""

    root: Path

    @property
    def data_gen_dir(self) -> Path:
        return self.root / "DataGenerator" / "Data"

    @property
    def dump_asset_dir(self) -> Path:
        return self.root / "DumpAsset" / "Data"

    @classmethod
    def from_env(cls, start: Path | None = None) -> "ProjectPaths":
        """Build paths for the discovered project root."""
        return cls(root=find_project_root(start))

    def relative_to_root(self, path: Path | str) -> str:
        """Render a path relative to the project root where possible."""
        path = Path(path)
        try:
            return path.resolve().relative_to(self.root.resolve()).as_posix()
        except ValueError:
            return str(path)
