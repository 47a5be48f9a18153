"""Build system for compiled JSX artifacts."""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from reactwire.compiler.codegen.generator import CodeGenerator
from reactwire.compiler.parser import TemplateParser
from reactwire.config import CompilerConfig

logger = logging.getLogger(__name__)

MANIFEST_NAME = "manifest.json"


@dataclass
class BuildSummary:
    templates: int
    components: int
    out_dir: Path
    outputs: List[Path]


class ArtifactBuilder:
    def __init__(self, config: CompilerConfig) -> None:
        self.config = config
        self.src_dir = config.templates_dir
        self.out_dir = Path(config.out_dir) if config.out_dir else None
        self.parser = TemplateParser()
        self.codegen = CodeGenerator(config)
        self.entries: Dict[str, dict] = {}
        self._outputs: List[Path] = []
        self._template_count = 0
        self._component_count = 0

    def build(self) -> BuildSummary:
        if not self.src_dir.is_dir():
            raise FileNotFoundError(f"Template directory not found: {self.src_dir}")

        self._scan_directory(self.src_dir)

        out_dir = self.out_dir or self.src_dir
        if self.out_dir is not None:
            out_dir.mkdir(parents=True, exist_ok=True)
            manifest = {
                "version": 1,
                "src_dir": str(self.src_dir),
                "entries": self.entries,
            }
            manifest_path = out_dir / MANIFEST_NAME
            manifest_path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")

        logger.info(
            "Compiled %d template file(s), %d component(s)",
            self._template_count,
            self._component_count,
        )
        return BuildSummary(
            templates=self._template_count,
            components=self._component_count,
            out_dir=out_dir,
            outputs=list(self._outputs),
        )

    def _scan_directory(self, dir_path: Path) -> None:
        try:
            entries = sorted(list(dir_path.iterdir()))
        except FileNotFoundError:
            return

        for entry in entries:
            if entry.name.startswith("_") or entry.name.startswith("."):
                continue

            if entry.is_dir():
                if self.out_dir is not None and entry.resolve() == self.out_dir:
                    continue
                self._scan_directory(entry)
                continue

            if not entry.is_file() or not entry.name.endswith(
                self.config.source_suffix
            ):
                continue

            self._compile_file(entry)

    def target_path(self, file_path: Path) -> Path:
        target_name = self.config.target_name(file_path)
        if self.out_dir is None:
            return file_path.with_name(target_name)
        relative = file_path.resolve().parent.relative_to(self.src_dir)
        return self.out_dir / relative / target_name

    def _compile_file(self, file_path: Path) -> None:
        source = file_path.read_text(encoding="utf-8")
        parsed = self.parser.parse(source, str(file_path))
        module = self.codegen.generate(parsed)

        target = self.target_path(file_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(module, encoding="utf-8")
        logger.info("Compiled %s -> %s", file_path, target)

        self._template_count += 1
        self._component_count += 1 + len(parsed.named_templates)
        self._outputs.append(target)

        key = str(file_path.resolve().relative_to(self.src_dir))
        self.entries[key] = {
            "artifact": str(target),
            "source_hash": hashlib.sha256(source.encode("utf-8")).hexdigest(),
            "components": 1 + len(parsed.named_templates),
        }


def build_artifacts(config: CompilerConfig) -> BuildSummary:
    return ArtifactBuilder(config).build()


def compile_file(file_path: Path, config: Optional[CompilerConfig] = None) -> str:
    """Compile a single template file and return the module source."""
    parsed = TemplateParser().parse_file(file_path)
    return CodeGenerator(config).generate(parsed)
