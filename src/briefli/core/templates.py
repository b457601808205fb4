"""Built-in file contents written by ``briefli init`` and ``briefli new``."""

from __future__ import annotations

from typing import Dict, Tuple

# Swiss letter layout (SN 010130), recipient in the right-hand window of a
# C5/DL envelope. Letters import it by file name.
TEMPLATE_CONTENT = """\
// ch-letter: Swiss letter layout for a right-hand window envelope (SN 010130)
//
// Usage:
//   #import "ch-letter-template.typ": ch-letter
//   #show: ch-letter.with(sender: (name: "..."), recipient: "...", ...)

#let ch-letter(
  sender: (:),
  recipient: "",
  location: "",
  date: "",
  subject: "",
  body,
) = {
  set page(
    paper: "a4",
    margin: (top: 2cm, bottom: 2.5cm, left: 2.5cm, right: 2cm),
  )
  set text(size: 11pt)
  set par(leading: 0.65em)

  let name = sender.at("name", default: none)
  let address = sender.at("address", default: none)
  let extra = sender.at("extra", default: none)

  // Sender, top left
  block(height: 2.5cm, {
    set text(size: 9pt)
    if name != none [*#name* \\ ]
    if address != none [#address \\ ]
    if extra != none [#extra]
  })

  // Recipient window: 45 mm from the top edge, 118 mm from the left edge
  place(top + left, dx: 9.3cm, dy: 2.5cm, block(width: 8.5cm, height: 4.5cm, {
    if name != none and address != none {
      text(size: 7pt, underline[#name, #address])
      v(0.4em)
    }
    recipient
  }))

  v(5.5cm)

  if location != "" [#location, #date] else [#date]

  v(1cm)
  text(weight: "bold", subject)
  v(0.6cm)

  body
}
"""

DEFAULTS_CONTENT = """\
# Default values for new letters
# Edit these to match your details

# Default location for the date line
location = "Zürich"

# Default language (de, fr, it, en)
lang = "de"

[sender.private]
name = "Your Name"
address = "Street 123, 8000 Zürich"
# extra = "+41 79 123 45 67"  # Optional: phone, email, etc.
# location = "Zürich"  # Optional: override global location

[sender.work]
name = "Your Name"
address = "Company AG, Street 456, 8001 Zürich"
# extra = "your.email@company.ch"
# location = "Zürich"  # Optional: override global location
"""

LETTER_SKELETON = """\
#import "{template_file}": ch-letter

#set text(lang: "{lang}")

#show: ch-letter.with(
{sender_block}  recipient: "",

  location: "{location}",
  date: "{date}",
  subject: "{subject}",
)

{greeting}



{closing}

#v(1.5cm)
{signature}
"""

# lang -> (greeting, closing)
SALUTATIONS: Dict[str, Tuple[str, str]] = {
    "de": ("Sehr geehrte Damen und Herren", "Freundliche Grüsse"),
    "fr": ("Madame, Monsieur,", "Meilleures salutations"),
    "it": ("Gentili Signore e Signori,", "Cordiali saluti"),
    "en": ("Dear Sir or Madam,", "Kind regards"),
}
