"""
Per-directory letter defaults (``defaults.toml``).

The file is optional. A missing, unreadable, malformed or invalid file yields
an all-empty ``Defaults`` so that ``briefli new`` still works; each of those
branches is logged at DEBUG level only.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

log = logging.getLogger("briefli.defaults")

Profile = Literal["private", "work"]


class Sender(BaseModel):
    """
    Description: One sender identity from defaults.toml.
    Layer: L0
    Input: [sender.private] or [sender.work] table
    Output: Optional name/address/extra lines and a location override
    """

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    address: Optional[str] = None
    extra: Optional[str] = None
    location: Optional[str] = None


class SenderProfiles(BaseModel):
    model_config = ConfigDict(extra="ignore")

    private: Optional[Sender] = None
    work: Optional[Sender] = None


class Defaults(BaseModel):
    """
    Description: Parsed defaults.toml.
    Layer: L0
    Input: TOML document
    Output: Global location/lang and the two sender profiles
    """

    model_config = ConfigDict(extra="ignore")

    sender: Optional[SenderProfiles] = None
    location: Optional[str] = None
    lang: Optional[str] = None


def load_defaults(path: Path) -> Defaults:
    """
    Description: Read defaults.toml, falling back to empty defaults.
    Layer: L0
    Input: Path to the defaults file
    Output: Defaults (never raises for a bad or missing file)
    """
    if not path.is_file():
        log.debug("No defaults file at %s, using empty defaults", path)
        return Defaults()

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.debug("Could not read %s (%s), using empty defaults", path, exc)
        return Defaults()

    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        log.debug("Could not parse %s (%s), using empty defaults", path, exc)
        return Defaults()

    try:
        return Defaults.model_validate(data)
    except ValidationError as exc:
        log.debug("Invalid values in %s (%d errors), using empty defaults", path, exc.error_count())
        return Defaults()


def get_sender(defaults: Defaults, profile: Profile) -> Optional[Sender]:
    """Return the identity configured for ``profile``, if any."""
    if defaults.sender is None:
        return None
    if profile == "work":
        return defaults.sender.work
    return defaults.sender.private
