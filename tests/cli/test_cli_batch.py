from __future__ import annotations

import json

from tailmigrate.cli.main import main
from tailmigrate.observability.log_store import read_logs


def _write_props(tmp_path, payload) -> str:
    path = tmp_path / "props.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path.as_posix()


def test_batch_plain_output(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("TAILMIGRATE_SKIP_UNKNOWN", raising=False)
    path = _write_props(
        tmp_path,
        [
            {"name": "mb", "defaultValue": '"24px"'},
            {"name": "direction", "defaultValue": '"column"'},
            {"name": "px", "value": [2, 4]},
        ],
    )
    code = main(["batch", path])
    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out == [
        "- mb: mb-6",
        "- px: px-2 sm:px-4",
        "! direction: Unknown spacing property 'direction'.",
        "className: mb-6 px-2 sm:px-4",
    ]


def test_batch_json_output(tmp_path, capsys):
    path = _write_props(tmp_path, {"m": 4, "gap": "1rem"})
    code = main(["batch", path, "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["class_name"] == "m-4 gap-4"
    assert payload["rejected"] == []


def test_batch_strict_config_fails_on_unknown(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("TAILMIGRATE_SKIP_UNKNOWN", raising=False)
    (tmp_path / "tailmigrate.toml").write_text("[convert]\nskip_unknown = false\n", encoding="utf-8")
    path = _write_props(tmp_path, {"m": 4, "color": "red"})
    code = main(["batch", path])
    assert code == 1
    assert "Unknown spacing property 'color'." in capsys.readouterr().err


def test_batch_persists_logs_when_configured(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("TAILMIGRATE_LOG_LEVEL", raising=False)
    monkeypatch.setenv("TAILMIGRATE_PERSIST_LOGS", "1")
    path = _write_props(tmp_path, {"m": "15px"})
    assert main(["batch", path, "--root", tmp_path.as_posix()]) == 0
    capsys.readouterr()
    logs = read_logs(tmp_path)
    assert [event["message"] for event in logs] == ["Converted spacing prop"]


def test_batch_invalid_json_shows_location(tmp_path, capsys):
    path = tmp_path / "props.json"
    path.write_text('{"m": 4,,}', encoding="utf-8")
    code = main(["batch", path.as_posix()])
    err = capsys.readouterr().err
    assert code == 1
    assert "props.json' is not valid JSON." in err
    assert err.splitlines()[-2] == '{"m": 4,,}'


def test_batch_missing_file(tmp_path, capsys):
    code = main(["batch", (tmp_path / "missing.json").as_posix()])
    assert code == 1
    assert "was not found" in capsys.readouterr().err
