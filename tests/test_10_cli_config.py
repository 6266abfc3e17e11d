"""Tests for the render_json command-line script and environment settings."""
from __future__ import annotations

import json

from mfmhtml.core.config import Settings, get_settings
from scripts.render_json import main
from tests.conftest import container, leaf, text


# ── Settings ──────────────────────────────────────────────────────────────────

def test_settings_defaults():
    cfg = Settings().render_config()
    assert cfg.url is None
    assert cfg.animate is False
    assert cfg.root_tag_name == "p"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("MFM_INSTANCE_URL", "https://social.example/")
    monkeypatch.setenv("MFM_ANIMATE", "true")
    monkeypatch.setenv("MFM_CODE_TAG_AS_DIV", "1")
    cfg = get_settings().render_config()
    assert cfg.url == "social.example"
    assert cfg.animate is True
    assert cfg.code_tag_as_div is True


# ── CLI ───────────────────────────────────────────────────────────────────────

def _write(tmp_path, nodes) -> str:
    path = tmp_path / "nodes.json"
    path.write_text(json.dumps(nodes), encoding="utf-8")
    return str(path)


def test_cli_renders_file(tmp_path, capsys):
    path = _write(tmp_path, [container("big", text("hi")), leaf("emojiCode", name="smile")])
    assert main([path, "--url", "example.com", "--animate", "--root-tag", "div"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith('<div data-mfm="root">')
    assert 'class="animated tada"' in out
    assert "https://example.com/emoji/smile.webp" in out


def test_cli_unsupported_kind_exits_1(tmp_path, capsys):
    path = _write(tmp_path, [{"type": "marquee"}])
    assert main([path]) == 1
    assert "unsupported node kind" in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 1
    assert "file not found" in capsys.readouterr().err


def test_cli_rejects_non_array(tmp_path, capsys):
    path = _write(tmp_path, {"type": "text"})
    assert main([path]) == 1
    assert "JSON array" in capsys.readouterr().err


def test_cli_rejects_bad_root_tag(tmp_path, capsys):
    path = _write(tmp_path, [text("x")])
    assert main([path, "--root-tag", "<bad>"]) == 1
    err = capsys.readouterr().err
    assert "invalid options" in err
    assert "Traceback" not in err
