from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional, Protocol

from pydantic import BaseModel, ConfigDict

log = logging.getLogger("briefli.compiler")


class CompileResult(BaseModel):
    """
    Description: Outcome of compiling one letter.
    Layer: L2
    Input: compiler exit status or launch error
    Output: ok flag + return code / error text
    """

    model_config = ConfigDict(extra="forbid")

    path: str
    ok: bool
    returncode: Optional[int] = None
    launch_error: Optional[str] = None


class Compiler(Protocol):
    name: str

    def compile(self, path: Path) -> CompileResult: ...


class TypstCompiler:
    """
    Description: Runs `typst compile <path>` and waits for it to finish.
    Layer: L2
    Input: path to a .typ file
    Output: CompileResult (the compiler's own output goes straight to the terminal)
    """

    def __init__(self, binary: str = "typst") -> None:
        self.name = binary

    def compile(self, path: Path) -> CompileResult:
        cmd = [self.name, "compile", str(path)]
        log.debug("Running: %s", cmd)
        try:
            r = subprocess.run(cmd, check=False)
        except OSError as exc:
            log.warning("Could not launch %s: %s", self.name, exc)
            return CompileResult(path=str(path), ok=False, launch_error=str(exc))

        return CompileResult(path=str(path), ok=r.returncode == 0, returncode=r.returncode)
