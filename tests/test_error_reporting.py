from __future__ import annotations

import json
from pathlib import Path


def test_write_error_report_creates_file_with_context(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("SERIALIZATION_BENCHMARK_ERROR_DIR", str(tmp_path))

    from serialization_benchmark.shared.error_reporting import write_error_report

    try:
        raise ValueError("boom")
    except ValueError as exc:
        report = write_error_report(exc, where="test", context={"family": "log"})

    assert report.path.exists()
    assert report.path.parent == tmp_path
    text = report.path.read_text(encoding="utf-8", errors="replace")

    assert "boom" in text
    assert "Traceback" in text

    header = json.loads(text.split("\n\n", 1)[1].split("\n\nTraceback", 1)[0])
    assert header["context"] == {"family": "log"}
    assert header["error_type"] == "ValueError"
    assert "msgspec" in header["codec_versions"]


def test_codec_versions_reports_missing_as_none(monkeypatch):
    from serialization_benchmark.shared import error_reporting

    monkeypatch.setattr(error_reporting, "_CODEC_DISTRIBUTIONS", ("definitely-not-installed-xyz",))

    assert error_reporting.codec_versions() == {"definitely-not-installed-xyz": None}
