from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from briefli.config import Settings
from briefli.core.templates import DEFAULTS_CONTENT, TEMPLATE_CONTENT

log = logging.getLogger("briefli.scaffold")


class ScaffoldReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    created: List[str] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)


class ScaffoldService:
    """
    Description: `briefli init` - write the template and defaults.toml if missing.
    Layer: L1
    Input: working directory
    Output: ScaffoldReport; existing files are never overwritten
    """

    def __init__(self, settings: Settings, *, root: Optional[Path] = None) -> None:
        self.s = settings
        self.root = root or Path(".")

    def _write_if_missing(self, name: str, content: str, report: ScaffoldReport) -> None:
        path = self.root / name
        if path.exists():
            print(f"{name} already exists, skipping")
            report.skipped.append(name)
            return

        # OSError propagates: a failed write aborts init.
        path.write_text(content, encoding="utf-8")
        log.info("Wrote %s (%d bytes)", path, len(content))
        print(f"Created: {name}")
        report.created.append(name)

    def init(self) -> ScaffoldReport:
        report = ScaffoldReport()
        self._write_if_missing(self.s.template_file, TEMPLATE_CONTENT, report)
        self._write_if_missing(self.s.defaults_file, DEFAULTS_CONTENT, report)

        print(
            f'\n✓ Initialized! Edit {self.s.defaults_file} with your details, '
            'then run: briefli new "Subject"'
        )
        return report
