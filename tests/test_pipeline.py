import json
import random

import pytest

from conftest import YEAR

from releasecheck.cli import main
from releasecheck.pipeline.pipeline import scan_file, scan_job_description

JD = "Looking for a LangChain expert with 10+ years of experience. React 5 years is a plus."


def test_scan_report_shape(catalog) -> None:
    report = scan_job_description(JD, catalog, current_year=YEAR, rng=random.Random(0))

    assert report["engine"] == "ReleaseCheck"
    assert report["current_year"] == YEAR
    assert report["summary"] == {
        "requirements_found": 2,
        "invalid_requirements": 1,
        "corrections_made": 1,
    }
    assert [r["technology"] for r in report["requirements"]] == ["React", "LangChain"]
    assert all(r["commentary"] for r in report["requirements"])
    assert report["corrected_text"].startswith("Looking for a LangChain expert with 2+ years")
    assert report["changelog"] == [{"technology": "LangChain", "original": 10, "corrected": 2, "position": 14}]
    json.dumps(report)


def test_scan_without_matches_passes_text_through(catalog) -> None:
    report = scan_job_description("We value teamwork.", catalog, current_year=YEAR)

    assert report["requirements"] == []
    assert report["changelog"] == []
    assert report["corrected_text"] == "We value teamwork."


def test_scan_file_with_bundled_catalog(tmp_path, bundled_catalog_path) -> None:
    job = tmp_path / "ai_engineer.txt"
    job.write_text(JD, encoding="utf-8")

    report = scan_file(str(job), catalog_path=str(bundled_catalog_path), current_year=YEAR)

    assert report["job_file"] == "ai_engineer.txt"
    assert report["summary"]["corrections_made"] == 1


def test_scan_file_requires_a_catalog(tmp_path) -> None:
    job = tmp_path / "jd.txt"
    job.write_text(JD, encoding="utf-8")

    with pytest.raises(ValueError):
        scan_file(str(job))


def test_scan_file_rejects_unsupported_type(tmp_path, catalog) -> None:
    job = tmp_path / "jd.rtf"
    job.write_text(JD, encoding="utf-8")

    with pytest.raises(ValueError):
        scan_file(str(job), catalog=catalog)


def test_cli_writes_report(tmp_path, bundled_catalog_path, capsys) -> None:
    job = tmp_path / "jd.txt"
    job.write_text(JD, encoding="utf-8")
    out = tmp_path / "report.json"

    code = main(["--job", str(job), "--catalog", str(bundled_catalog_path), "--year", str(YEAR),
                 "--results-dir", str(tmp_path), "--out", str(out)])

    assert code == 0
    saved = json.loads(out.read_text(encoding="utf-8"))
    assert saved["changelog"][0]["technology"] == "LangChain"
    assert json.loads(capsys.readouterr().out)["summary"]["corrections_made"] == 1


def test_cli_corrected_only(tmp_path, bundled_catalog_path, capsys) -> None:
    job = tmp_path / "jd.txt"
    job.write_text(JD, encoding="utf-8")

    code = main([
        "--job", str(job), "--catalog", str(bundled_catalog_path), "--year", str(YEAR),
        "--results-dir", str(tmp_path / "results"), "--corrected-only",
    ])

    assert code == 0
    assert capsys.readouterr().out.startswith("Looking for a LangChain expert with 2+ years")
    assert len(list((tmp_path / "results").glob("jd_*.json"))) == 1


def test_cli_missing_catalog(tmp_path, capsys) -> None:
    job = tmp_path / "jd.txt"
    job.write_text(JD, encoding="utf-8")

    code = main(["--job", str(job), "--catalog", str(tmp_path / "none.yaml")])

    assert code == 2
    assert "catalog not found" in capsys.readouterr().err
