import json

from gathio.cli import main


def test_check_reports_ok(write_config, capsys):
    service = write_config('[general]\nsite_name = "CLI"\n')

    assert main(["--config", str(service.config_path), "check"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload == {"ok": True, "config_path": str(service.config_path)}


def test_check_reports_missing_file(tmp_path, capsys):
    missing = tmp_path / "config" / "config.toml"

    assert main(["--config", str(missing), "check"]) == 1

    payload = json.loads(capsys.readouterr().err)
    assert payload["ok"] is False
    assert payload["error"]["code"] == "CONFIG_UNAVAILABLE"
    assert str(missing) in payload["error"]["message"]
    assert payload["error"]["details"]["reason"] == "missing"


def test_frontend_prints_camel_case(write_config, capsys, monkeypatch):
    monkeypatch.delenv("GATHIO_VERSION", raising=False)
    service = write_config('[general]\nsite_name = "CLI"\nshow_kofi = true\n')

    assert main(["--config", str(service.config_path), "frontend"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["siteName"] == "CLI"
    assert payload["showKofi"] is True
    assert payload["version"] == "unknown"


def test_rules_prints_four_entries(write_config, capsys):
    service = write_config("")

    assert main(["--config", str(service.config_path), "rules"]) == 0

    rules = json.loads(capsys.readouterr().out)
    assert len(rules) == 4
    assert set(rules[0]) == {"icon", "text"}
