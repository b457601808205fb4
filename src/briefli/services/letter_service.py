from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from briefli.config import Settings
from briefli.core.defaults import Profile, get_sender, load_defaults
from briefli.core.errors import LetterExistsError, TemplateMissingError
from briefli.core.letter import letter_filename, render_letter, resolve_lang, resolve_location

log = logging.getLogger("briefli.letter")

WORK_FLAGS = ("-w", "--work")
PRIVATE_FLAGS = ("-p", "--private")


class LetterCreated(BaseModel):
    """
    Description: A freshly written letter source.
    Layer: L1
    Input: LetterService.create()
    Output: path + the values resolved for it
    """

    model_config = ConfigDict(extra="forbid")

    path: str
    profile: Profile
    lang: str
    location: str


def parse_new_args(args: Sequence[str]) -> Tuple[Profile, str]:
    """
    Description: Split `briefli new` arguments into profile and subject.
    Layer: L1
    Input: tokens after "new"
    Output: (profile, subject); the last profile flag wins, other tokens are joined by spaces
    """
    profile: Profile = "private"
    subject_parts = []
    for arg in args:
        if arg in WORK_FLAGS:
            profile = "work"
        elif arg in PRIVATE_FLAGS:
            profile = "private"
        else:
            subject_parts.append(arg)
    return profile, " ".join(subject_parts)


class LetterService:
    """
    Description: `briefli new` - create a dated letter from the template.
    Layer: L1
    Input: subject + sender profile, defaults.toml in the working directory
    Output: One new .typ file; never overwrites
    """

    def __init__(self, settings: Settings, *, root: Optional[Path] = None) -> None:
        self.s = settings
        self.root = root or Path(".")

    def create(self, subject: str, profile: Profile = "private", *, today: Optional[date] = None) -> LetterCreated:
        if not (self.root / self.s.template_file).exists():
            raise TemplateMissingError(self.s.template_file)

        defaults = load_defaults(self.root / self.s.defaults_file)
        day = today or date.today()

        filename = letter_filename(day, subject, self.s.source_suffix)
        target = self.root / filename
        if target.exists():
            raise LetterExistsError(filename)

        lang = resolve_lang(defaults, self.s)
        sender = get_sender(defaults, profile)
        location = resolve_location(sender, defaults, self.s)
        if sender is None:
            log.debug("No [sender.%s] in %s", profile, self.s.defaults_file)

        content = render_letter(
            template_file=self.s.template_file,
            lang=lang,
            sender=sender,
            location=location,
            day=day,
            subject=subject,
        )

        target.write_text(content, encoding="utf-8")
        print(f"Created: {filename} ({profile})")
        return LetterCreated(path=str(target), profile=profile, lang=lang, location=location)
