import json
from pathlib import Path
from typing import Any

import pytest

from scripts.analyze import main


@pytest.fixture
def records_file(tmp_path: Path, sample_records: list[Any]) -> Path:
    path = tmp_path / "books.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")
    return path


def test_main_prints_report(records_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(
        in_file=str(records_file),
        seed=3,
        filter_tags=[],
        focus_tag=None,
        node_id="neuromancer",
    )

    report = json.loads(capsys.readouterr().out)
    assert len(report["graph"]["nodes"]) == 5
    assert report["breakdown"]["nodeId"] == "neuromancer"
    assert "genreProfile" in report["metrics"]


def test_main_writes_out_file(records_file: Path, tmp_path: Path) -> None:
    """Test that filters and focus flow through to the written report."""
    out_file = tmp_path / "report.json"

    main(
        in_file=str(records_file),
        seed=3,
        filter_tags=["Cyberpunk"],
        focus_tag="Cyberpunk",
        node_id=None,
        out_file=str(out_file),
    )

    report = json.loads(out_file.read_text(encoding="utf-8"))
    assert len(report["edges"]) == 2
    assert report["breakdown"] is None
