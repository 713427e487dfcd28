"""Preview CLI tests."""

import io
import json

import pytest

import preview


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Leave global logging configuration untouched."""
    monkeypatch.setattr(preview, "configure_logging", lambda *args, **kwargs: None)


@pytest.fixture
def description_file(tmp_path, sample_ui_description):
    path = tmp_path / "ui.json"
    path.write_text(json.dumps(sample_ui_description), encoding="utf-8")
    return path


@pytest.mark.integration
def test_preview_renders(description_file, capsys):
    assert preview.main([str(description_file)]) == 0
    out = capsys.readouterr().out
    assert "Shipping" in out
    assert "city: Oslo" in out


@pytest.mark.integration
def test_preview_json(description_file, capsys):
    assert preview.main([str(description_file), "--json"]) == 0
    tree = json.loads(capsys.readouterr().out)
    assert tree["tag"] == "div"
    assert tree["attrs"]["data-component"] == "Card"


@pytest.mark.integration
def test_preview_invalid_description(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text('{"props": {}}', encoding="utf-8")
    assert preview.main([str(path)]) == 1
    assert "Invalid UI description" in capsys.readouterr().err


@pytest.mark.integration
def test_preview_missing_file(tmp_path):
    assert preview.main([str(tmp_path / "missing.json")]) == 1


@pytest.mark.integration
def test_preview_invoke_with_values(description_file, capsys):
    """Test filled fields reach the dispatched payload."""
    code = preview.main([
        str(description_file),
        "--invoke", "submit",
        "--set", "city=Bergen",
        "--set", "country=no",
        "--set", "express=yes",
    ])
    assert code == 0
    out = capsys.readouterr().out
    payload = json.loads(out[out.index('{\n  "action"'):])
    assert payload == {"action": "submit", "data": {"city": "Bergen", "country": "no", "express": True}}


@pytest.mark.integration
def test_preview_unknown_action(description_file, capsys):
    assert preview.main([str(description_file), "--invoke", "nope"]) == 2
    assert "Action not found" in capsys.readouterr().err


@pytest.mark.integration
def test_preview_disabled_action(description_file, capsys):
    assert preview.main([str(description_file), "--disabled", "--invoke", "submit"]) == 0
    captured = capsys.readouterr()
    assert "Action is disabled" in captured.err
    assert '"action"' not in captured.out


@pytest.mark.integration
def test_preview_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('```json\n{"type": "Badge", "props": {"text": "piped"}}\n```'))
    assert preview.main(["-"]) == 0
    assert "piped" in capsys.readouterr().out


@pytest.mark.unit
def test_apply_values_reports_missing(renderer, sample_ui_description):
    root = renderer.render(sample_ui_description)
    assert preview.apply_values(root, ["city=Paris", "nothere=1"]) == ["nothere"]
    assert root.find("input", name="city").attrs["value"] == "Paris"
