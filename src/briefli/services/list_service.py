from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from briefli.config import Settings
from briefli.core.letter import compiled_counterpart, is_letter_source

log = logging.getLogger("briefli.list")


class LetterEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    built: bool


class ListService:
    """
    Description: `briefli list` - show letters and whether their PDF exists.
    Layer: L2
    Input: working directory
    Output: LetterEntry list sorted by file name
    """

    def __init__(self, settings: Settings, *, root: Optional[Path] = None) -> None:
        self.s = settings
        self.root = root or Path(".")

    def letters(self) -> List[LetterEntry]:
        try:
            paths = [p for p in self.root.iterdir() if p.is_file() and is_letter_source(p, self.s)]
        except OSError as exc:
            # Unreadable directory lists as empty.
            log.warning("Could not read %s: %s", self.root, exc)
            paths = []
        return [
            LetterEntry(name=p.name, built=compiled_counterpart(p, self.s).exists())
            for p in sorted(paths, key=lambda p: p.name)
        ]

    def list_letters(self) -> List[LetterEntry]:
        letters = self.letters()
        if not letters:
            print("No letters found")
            return letters

        print("Letters:\n")
        for entry in letters:
            mark = "✓" if entry.built else "○"
            print(f"  {mark} {Path(entry.name).stem}")
        print("\n  ✓ = PDF exists  ○ = needs build")
        return letters
