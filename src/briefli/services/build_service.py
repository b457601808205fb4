from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from briefli.config import Settings
from briefli.core.letter import compiled_counterpart, is_template
from briefli.services.compiler import Compiler, CompileResult, TypstCompiler

log = logging.getLogger("briefli.build")


class BuildReport(BaseModel):
    """
    Description: Counters of one `briefli build` run.
    Layer: L2
    Input: BuildService.build_all()
    Output: compiled/skipped counts plus per-file failures
    """

    model_config = ConfigDict(extra="forbid")

    compiled: int = 0
    skipped: int = 0
    failed: List[CompileResult] = Field(default_factory=list)
    error: Optional[str] = None


class BuildService:
    """
    Description: `briefli build` - compile every letter that has no PDF yet.
    Layer: L2
    Input: working directory + a Compiler
    Output: BuildReport; one compiler run per letter, in name order
    """

    def __init__(self, settings: Settings, *, compiler: Optional[Compiler] = None, root: Optional[Path] = None) -> None:
        self.s = settings
        self.compiler = compiler or TypstCompiler(settings.compiler)
        self.root = root or Path(".")

    def _compile(self, path: Path) -> CompileResult:
        print(f"Compiling {path}... ", end="", flush=True)
        result = self.compiler.compile(path)
        if result.ok:
            print("✓")
        elif result.launch_error is not None:
            print("✗")
            print(f"  Failed to run {self.compiler.name}: {result.launch_error}", file=sys.stderr)
            print(f"  Make sure {self.compiler.name} is installed and in your PATH", file=sys.stderr)
        else:
            print("✗")
            if result.returncode is not None:
                print(f"  {self.compiler.name} exited with code {result.returncode}", file=sys.stderr)
        return result

    def build_all(self) -> BuildReport:
        report = BuildReport()
        try:
            entries = sorted(self.root.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            print(f"Error reading directory: {exc}", file=sys.stderr)
            report.error = str(exc)
            return report

        for path in entries:
            if path.suffix != self.s.source_suffix or not path.is_file():
                continue
            if is_template(path, self.s):
                continue
            if compiled_counterpart(path, self.s).exists():
                report.skipped += 1
                continue

            result = self._compile(path)
            report.compiled += 1
            if not result.ok:
                report.failed.append(result)

        log.info("Build done: compiled=%d skipped=%d failed=%d", report.compiled, report.skipped, len(report.failed))

        suffix = self.s.source_suffix
        if report.compiled == 0 and report.skipped == 0:
            print(f"No {suffix} files to compile")
        elif report.compiled == 0:
            print(f"Nothing to build ({report.skipped} already have PDFs)")
        else:
            print(f"\nCompiled {report.compiled} letter(s), {report.skipped} skipped")
        return report
