import json

import pytest

from customer_health.score import main


def test_cli_prints_success_envelope(tmp_path, capsys, warning_record):
    record_path = tmp_path / "customer.json"
    record_path.write_text(json.dumps(warning_record), encoding="utf-8")

    exit_code = main([str(record_path)])

    assert exit_code == 0
    envelope = json.loads(capsys.readouterr().out)
    assert envelope["status"] == "success"
    assert envelope["result"]["overall_score"] == 53
    assert envelope["result"]["risk_level"] == "warning"


def test_cli_returns_one_for_invalid_record(tmp_path, capsys, warning_record):
    warning_record["contract"]["auto_renewal_enabled"] = "sometimes"
    record_path = tmp_path / "customer.json"
    record_path.write_text(json.dumps(warning_record), encoding="utf-8")

    exit_code = main([str(record_path)])

    assert exit_code == 1
    envelope = json.loads(capsys.readouterr().out)
    assert envelope["error"]["field"] == "auto_renewal_enabled"


def test_cli_exits_cleanly_on_non_utf8_file(tmp_path, capsys):
    record_path = tmp_path / "customer.json"
    record_path.write_bytes(b'{"payment": "\xff\xfe"}')

    with pytest.raises(SystemExit) as exc_info:
        main([str(record_path)])

    assert exc_info.value.code == 1
    assert "Could not read customer record" in capsys.readouterr().err


def test_cli_exits_cleanly_on_malformed_json(tmp_path, capsys):
    record_path = tmp_path / "customer.json"
    record_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main([str(record_path)])

    assert exc_info.value.code == 1
    assert "Could not read customer record" in capsys.readouterr().err
