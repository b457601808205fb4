import tomllib

from briefli.config import Settings
from briefli.core.defaults import load_defaults
from briefli.core.templates import TEMPLATE_CONTENT
from briefli.services.scaffold_service import ScaffoldService


def test_init_creates_template_and_defaults(tmp_path, capsys) -> None:
    report = ScaffoldService(Settings(), root=tmp_path).init()

    assert report.created == ["ch-letter-template.typ", "defaults.toml"]
    assert report.skipped == []
    assert (tmp_path / "ch-letter-template.typ").read_text(encoding="utf-8") == TEMPLATE_CONTENT

    out = capsys.readouterr().out
    assert "Created: ch-letter-template.typ" in out
    assert "Created: defaults.toml" in out
    assert "Initialized! Edit defaults.toml" in out


def test_default_configuration_is_valid_toml_with_placeholders(tmp_path) -> None:
    ScaffoldService(Settings(), root=tmp_path).init()
    raw = (tmp_path / "defaults.toml").read_text(encoding="utf-8")
    tomllib.loads(raw)

    d = load_defaults(tmp_path / "defaults.toml")
    assert d.location == "Zürich"
    assert d.lang == "de"
    assert d.sender is not None
    assert d.sender.private is not None and d.sender.private.name == "Your Name"
    assert d.sender.work is not None and d.sender.work.extra is None


def test_init_twice_skips_and_never_overwrites(tmp_path, capsys) -> None:
    svc = ScaffoldService(Settings(), root=tmp_path)
    svc.init()
    (tmp_path / "defaults.toml").write_text('location = "Bern"\n', encoding="utf-8")
    (tmp_path / "ch-letter-template.typ").write_text("// my layout\n", encoding="utf-8")
    capsys.readouterr()

    report = svc.init()

    assert report.created == []
    assert report.skipped == ["ch-letter-template.typ", "defaults.toml"]
    assert (tmp_path / "defaults.toml").read_text(encoding="utf-8") == 'location = "Bern"\n'
    assert (tmp_path / "ch-letter-template.typ").read_text(encoding="utf-8") == "// my layout\n"

    out = capsys.readouterr().out
    assert "ch-letter-template.typ already exists, skipping" in out
    assert "defaults.toml already exists, skipping" in out


def test_init_only_fills_in_the_missing_file(tmp_path) -> None:
    (tmp_path / "defaults.toml").write_text("", encoding="utf-8")
    report = ScaffoldService(Settings(), root=tmp_path).init()
    assert report.created == ["ch-letter-template.typ"]
    assert report.skipped == ["defaults.toml"]
    assert (tmp_path / "defaults.toml").read_text(encoding="utf-8") == ""
