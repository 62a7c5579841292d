import json

import pytest

from printspec.cli.main import main
from tests.helpers._csv_helpers import read_frame
from tests.helpers._record_builders import make_record_xml


def test_validate_prints_report_and_exits_zero_when_all_pass(tmp_path, capsys) -> None:
    (tmp_path / "one.xml").write_bytes(make_record_xml())

    exit_code = main(["validate", str(tmp_path)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "CUP XML VALIDATION ERROR REPORT" in out
    assert "Status: PASSED" in out


def test_validate_exits_one_and_writes_outputs_when_any_fail(tmp_path, capsys) -> None:
    good = tmp_path / "good.xml"
    bad = tmp_path / "bad.xml"
    good.write_bytes(make_record_xml())
    bad.write_bytes(make_record_xml(paper="Unknown"))
    report_path = tmp_path / "report.txt"
    csv_path = tmp_path / "results.csv"

    exit_code = main(["validate", str(good), str(bad), "--report", str(report_path), "--csv", str(csv_path)])

    assert exit_code == 1
    assert report_path.read_text(encoding="utf-8") == capsys.readouterr().out
    frame = read_frame(csv_path.read_text(encoding="utf-8"))
    assert frame.loc[frame["check"] == "Paper Type", "passed"].tolist() == ["true", "false"]


def test_validate_json_output(tmp_path, capsys) -> None:
    (tmp_path / "a.xml").write_bytes(make_record_xml(colour="Mono"))
    (tmp_path / "b.xml").write_bytes(b"<record")

    exit_code = main(["validate", str(tmp_path), "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 1
    assert payload["summary"] == {"total": 2, "passed": 0, "failed": 2}
    assert payload["outcomes"][1]["checks"][0]["name"] == "XML Format"


def test_validate_strict_mode_aborts_on_malformed_file(tmp_path, capsys) -> None:
    (tmp_path / "b.xml").write_bytes(b"<record")

    with pytest.raises(SystemExit) as excinfo:
        main(["validate", str(tmp_path), "--strict"])

    assert excinfo.value.code == 2
    assert "Invalid XML format" in capsys.readouterr().err


def test_validate_empty_directory_is_an_error(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["validate", str(tmp_path)])

    assert excinfo.value.code == 2
    assert "No XML files found." in capsys.readouterr().err


def test_catalog_command_prints_json(capsys) -> None:
    assert main(["catalog"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert "Clairjet 90 gsm" in payload["valid_papers"]
