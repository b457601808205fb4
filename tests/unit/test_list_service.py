from pathlib import Path

from briefli.config import Settings
from briefli.services.list_service import ListService


def _touch(root: Path, *names: str) -> None:
    for n in names:
        (root / n).write_text("", encoding="utf-8")


def test_letters_sorted_and_marked(tmp_path, capsys) -> None:
    _touch(
        tmp_path,
        "2024-05-01 Zahnarzt.typ",
        "2024-01-01 Test.typ",
        "2024-01-01 Test.pdf",
        "ch-letter-template.typ",
        "2024-03-01 Anfrage.typ",
        "readme.md",
    )
    entries = ListService(Settings(), root=tmp_path).list_letters()

    assert [(e.name, e.built) for e in entries] == [
        ("2024-01-01 Test.typ", True),
        ("2024-03-01 Anfrage.typ", False),
        ("2024-05-01 Zahnarzt.typ", False),
    ]
    assert capsys.readouterr().out == (
        "Letters:\n\n"
        "  ✓ 2024-01-01 Test\n"
        "  ○ 2024-03-01 Anfrage\n"
        "  ○ 2024-05-01 Zahnarzt\n"
        "\n  ✓ = PDF exists  ○ = needs build\n"
    )


def test_no_letters(tmp_path, capsys) -> None:
    _touch(tmp_path, "ch-letter-template.typ", "orphan.pdf")
    assert ListService(Settings(), root=tmp_path).list_letters() == []
    assert capsys.readouterr().out == "No letters found\n"


def test_configured_template_file_is_not_listed(tmp_path) -> None:
    s = Settings(template_file="swiss-layout.typ")
    _touch(tmp_path, "swiss-layout.typ", "2024-01-01 Test.typ")
    entries = ListService(s, root=tmp_path).letters()
    assert [e.name for e in entries] == ["2024-01-01 Test.typ"]
