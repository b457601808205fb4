from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import List, Optional

from briefli.config import Settings
from briefli.core.defaults import Defaults, Sender
from briefli.core.templates import LETTER_SKELETON, SALUTATIONS

SORTABLE_DATE = "%Y-%m-%d"
DISPLAY_DATE = "%d.%m.%Y"


def letter_filename(day: date, subject: str, suffix: str = ".typ") -> str:
    """
    Description: File name of a new letter.
    Layer: L1
    Input: creation date + subject
    Output: "YYYY-MM-DD <subject><suffix>"
    """
    return f"{day.strftime(SORTABLE_DATE)} {subject}{suffix}"


def is_template(path: Path, settings: Settings) -> bool:
    """The configured template file, or any "*-template.typ"."""
    if path.name == settings.template_file:
        return True
    return path.name.endswith(settings.template_marker + settings.source_suffix)


def is_letter_source(path: Path, settings: Settings) -> bool:
    """True for letter sources: the right suffix and not a template."""
    return path.suffix == settings.source_suffix and not is_template(path, settings)


def compiled_counterpart(path: Path, settings: Settings) -> Path:
    return path.with_suffix(settings.output_suffix)


def resolve_lang(defaults: Defaults, settings: Settings) -> str:
    return defaults.lang or settings.default_lang


def resolve_location(sender: Optional[Sender], defaults: Defaults, settings: Settings) -> str:
    """
    Description: Effective location for the date line.
    Layer: L1
    Input: chosen sender identity + defaults + settings
    Output: sender.location, else defaults.location, else the fallback location
    """
    if sender is not None and sender.location:
        return sender.location
    if defaults.location:
        return defaults.location
    return settings.fallback_location


def typst_string(value: str) -> str:
    """Escape a value for use inside a Typst string literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


# Characters with meaning anywhere in Typst markup.
MARKUP_SPECIALS = set("\\#*_`$<>@[]~")
# Characters that only start a heading, list or term at the beginning of a line.
LINE_START_SPECIALS = set("=-+/")


def typst_markup(value: str) -> str:
    """Escape a value so it renders as plain text in Typst markup."""
    out = "".join("\\" + ch if ch in MARKUP_SPECIALS else ch for ch in value)
    if out[:1] in LINE_START_SPECIALS:
        out = "\\" + out
    return out


def render_sender_block(sender: Optional[Sender]) -> str:
    """
    Description: The `sender: (...)` argument for ch-letter.with().
    Layer: L1
    Input: Sender or None
    Output: Lines for present fields only; "" when nothing is set
    """
    if sender is None:
        return ""

    parts: List[str] = []
    if sender.name:
        parts.append(f'    name: "{typst_string(sender.name)}",')
    if sender.address:
        parts.append(f'    address: "{typst_string(sender.address)}",')
    if sender.extra:
        parts.append(f'    extra: "{typst_string(sender.extra)}",')

    if not parts:
        return ""
    return "  sender: (\n" + "\n".join(parts) + "\n  ),\n"


def render_letter(
    *,
    template_file: str,
    lang: str,
    sender: Optional[Sender],
    location: str,
    day: date,
    subject: str,
) -> str:
    """
    Description: Compose the Typst source of a new letter.
    Layer: L1
    Input: resolved language, sender, location, date, subject
    Output: Document text importing the template by file name
    """
    greeting, closing = SALUTATIONS.get(lang, SALUTATIONS["de"])
    signature = typst_markup((sender.name if sender is not None else None) or "")

    return LETTER_SKELETON.format(
        template_file=template_file,
        lang=typst_string(lang),
        sender_block=render_sender_block(sender),
        location=typst_string(location),
        date=day.strftime(DISPLAY_DATE),
        subject=typst_string(subject),
        greeting=greeting,
        closing=closing,
        signature=signature,
    )
