from __future__ import annotations


class BriefliError(Exception):
    """Precondition failure reported to the user with a non-zero exit status."""

    hint: str = ""

    def __init__(self, message: str, *, hint: str = "") -> None:
        super().__init__(message)
        if hint:
            self.hint = hint


class TemplateMissingError(BriefliError):
    hint = "Run 'briefli init' to create it"

    def __init__(self, template_file: str) -> None:
        super().__init__(f"{template_file} not found")
        self.template_file = template_file


class LetterExistsError(BriefliError):
    def __init__(self, filename: str) -> None:
        super().__init__(f"{filename} already exists")
        self.filename = filename
