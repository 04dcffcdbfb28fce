import json
import os
import re

import pytest
import yaml

from gha_core.cli import main


def test_set_output(channel_files):
    assert main(["set-output", "result", "ok then"]) == 0
    content = channel_files["OUTPUT"].read_text(encoding="utf-8")
    assert re.fullmatch(r'result<<(ghadelimiter_[0-9a-f-]+)\n"ok then"\n\1\n', content)


def test_export_variable(channel_files, monkeypatch):
    monkeypatch.setenv("CLI_VAR", "unset")
    main(["export-variable", "CLI_VAR", "42"])
    assert os.environ["CLI_VAR"] == "42"
    assert "CLI_VAR<<ghadelimiter_" in channel_files["ENV"].read_text(encoding="utf-8")


def test_add_path(channel_files, monkeypatch):
    monkeypatch.setenv("PATH", "/usr/bin")
    main(["add-path", "/opt/bin"])
    assert channel_files["PATH"].read_text(encoding="utf-8") == "/opt/bin\n"


def test_annotation(capsys):
    main(["warning", "Deprecated call", "--file", "app.py", "--line", "3", "--end-column", "8"])
    assert capsys.readouterr().out == "::warning file=app.py,line=3,endColumn=8::Deprecated call\n"


def test_groups_and_secret(capsys):
    main(["start-group", "Build"])
    main(["set-secret", "s3cr3t"])
    main(["end-group"])
    main(["set-command-echo", "off"])
    assert capsys.readouterr().out.splitlines() == ["::group::Build", "::add-mask::s3cr3t", "::endgroup::", "::echo::off"]


def test_get_input(monkeypatch, capsys):
    monkeypatch.setenv("INPUT_NAME", "  value ")
    main(["get-input", "name"])
    assert capsys.readouterr().out == "value"


def test_get_multiline_input(monkeypatch, capsys):
    monkeypatch.setenv("INPUT_FILES", "a.txt\n\nb.txt")
    main(["get-input", "files", "--multiline"])
    assert capsys.readouterr().out == "a.txt\nb.txt\n"


def test_get_boolean_input_exit_status(monkeypatch, capsys):
    monkeypatch.setenv("INPUT_DRY_RUN", "false")
    assert main(["get-input", "dry run", "--boolean"]) == 1
    assert capsys.readouterr().out == "false\n"


def test_required_input_fails_the_step(monkeypatch, capsys):
    monkeypatch.delenv("INPUT_TOKEN", raising=False)
    with pytest.raises(SystemExit) as excinfo:
        main(["get-input", "token", "--required"])
    assert excinfo.value.code == 1
    assert capsys.readouterr().out == "::error title=RequiredInputMissing::Input required and not supplied: token\n"


def test_missing_channel_fails_the_step(capsys):
    with pytest.raises(SystemExit):
        main(["save-state", "pid", "1"])
    captured = capsys.readouterr()
    assert captured.out == '::error title=MissingChannelVariable::Unable to find environment variable "GITHUB_STATE"\n'


def test_set_failed(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["set-failed", "Invalid 'repo' input.", "Check 'repo' format: '%s'", "x/y"])
    assert excinfo.value.code == 1
    assert capsys.readouterr().out == "::error title=Invalid 'repo' input.::Check 'repo' format: 'x/y'\n"


def test_summary_elements(summary_file):
    main(["summary", "heading", "Report", "--level", "2"])
    main(["summary", "list", "a", "b", "--ordered"])
    main(["summary", "table", "Value1 Value2", "--headers", "Header1", "Header2"])
    main(["summary", "image", "chart.png", "Chart", "--width", "100"])
    assert summary_file.read_text(encoding="utf-8") == (
        "<h2>Report</h2>\n"
        "<ol><li>a</li><li>b</li></ol>\n"
        "<table>\n<thead><tr><th>Header1</th><th>Header2</th></tr></thead>\n<tbody>\n"
        "<tr><td>Value1</td><td>Value2</td></tr>\n</tbody></table>\n"
        '<img src="chart.png" alt="Chart" width="100">\n'
    )


def test_summary_overwrite_and_clear(summary_file):
    summary_file.write_text("old\n", encoding="utf-8")
    main(["summary", "--overwrite", "separator"])
    assert summary_file.read_text(encoding="utf-8") == "<hr>\n"
    main(["summary", "clear"])
    assert summary_file.read_text(encoding="utf-8") == ""


def test_summary_without_target(capsys):
    with pytest.raises(SystemExit):
        main(["summary", "break"])
    assert capsys.readouterr().out.startswith("::error title=MissingSummaryTarget::")


def test_context_yaml(monkeypatch, capsys):
    monkeypatch.setenv("GITHUB_EVENT_NAME", "pull_request")
    monkeypatch.setenv("GITHUB_RUN_NUMBER", "7")
    main(["context"])
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["event_name"] == "pull_request"
    assert data["run_number"] == 7
    assert list(data)[0] == "event_name"


def test_context_payload_json(tmp_path, monkeypatch, capsys):
    event = tmp_path / "event.json"
    event.write_text(json.dumps({"number": 12}), encoding="utf-8")
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(event))
    main(["context", "--payload", "--format", "json"])
    assert json.loads(capsys.readouterr().out) == {"number": 12}
