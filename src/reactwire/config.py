"""Compiler configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

PROJECT_MARKERS = ("pyproject.toml", "package.json", ".git")
SRC_DIR_CANDIDATES = ("templates", "src/templates")


def find_project_root(start: Path) -> Path:
    """Nearest ancestor of ``start`` holding a project marker, else ``start``."""
    start = start.resolve()
    for candidate in (start, *start.parents):
        if any((candidate / marker).exists() for marker in PROJECT_MARKERS):
            return candidate
    return start


def discover_src_dir(project_root: Path) -> Path:
    """``templates/``, then ``src/templates/``, then the project root itself."""
    for candidate in SRC_DIR_CANDIDATES:
        path = project_root / candidate
        if path.is_dir():
            return path
    return project_root


@dataclass
class CompilerConfig:
    """Settings shared by the build pipeline, the CLI and the module generator.

    ``src_dir`` is auto-discovered from the current working directory when
    left unset. ``out_dir`` of ``None`` writes each ``.jsx`` file next to its
    template.
    """

    src_dir: Optional[Union[str, Path]] = None
    out_dir: Optional[Union[str, Path]] = None
    source_suffix: str = ".jsx.html"
    target_suffix: str = ".jsx"
    react_import: bool = True

    def __post_init__(self) -> None:
        if self.src_dir is None:
            self.src_dir = discover_src_dir(find_project_root(self._get_cwd()))
        self.src_dir = Path(self.src_dir).resolve()
        if self.out_dir is not None:
            self.out_dir = Path(self.out_dir).resolve()

    @staticmethod
    def _get_cwd() -> Path:
        return Path.cwd()

    @property
    def templates_dir(self) -> Path:
        return Path(self.src_dir or ".")

    def target_name(self, source: Path) -> str:
        """``card.jsx.html`` -> ``card.jsx``."""
        name = source.name
        if name.endswith(self.source_suffix):
            name = name[: -len(self.source_suffix)]
        else:
            name = source.stem
        return name + self.target_suffix
