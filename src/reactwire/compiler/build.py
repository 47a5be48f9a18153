"""Build entry point used by the CLI."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from reactwire.config import CompilerConfig

if TYPE_CHECKING:
    from reactwire.compiler.build_artifacts import BuildSummary


def build_project(
    src_dir: Optional[Path] = None,
    out_dir: Optional[Path] = None,
    react_import: bool = True,
) -> BuildSummary:
    """Compile every template under ``src_dir``."""
    from reactwire.compiler.build_artifacts import build_artifacts

    config = CompilerConfig(src_dir=src_dir, out_dir=out_dir, react_import=react_import)
    return build_artifacts(config)
