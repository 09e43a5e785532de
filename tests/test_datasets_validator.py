import io
import pytest
from pathlib import Path
from termhack.datasets import (
    validate_candidates, pretty_summary, read_candidates, read_candidates_stream,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_candidates_happy_path(tmp_path: Path):
    f = tmp_path / "dump.txt"
    _write(f, ["TRIED", "TIRES", "TRIES"])

    rep = validate_candidates(str(f))
    assert rep["passed"] is True
    assert rep["length"] == 5
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "L=5" in s and "candidates=3" in s and s.endswith("OK")


def test_validate_candidates_flags_errors(tmp_path: Path):
    # wrong length, inner whitespace, a duplicate and a blank line
    f = tmp_path / "dump.txt"
    f.write_text("TRIED\nTIRE\nTRI ES\nTRIED\n\nTRIES\n", encoding="utf-8")

    rep = validate_candidates(str(f))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 2
    assert rep["blank_lines"] == 1
    assert rep["count"] == 3 and rep["unique_count"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_candidates_missing_file(tmp_path: Path):
    rep = validate_candidates(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False
    assert rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_read_candidates_keeps_case(tmp_path: Path):
    p = tmp_path / "dump.txt"
    p.write_text("  Tried\n\nTIRES \r\n", encoding="utf-8")
    assert read_candidates(p) == ["Tried", "TIRES"]
    assert read_candidates(str(p)) == ["Tried", "TIRES"]


def test_read_candidates_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_candidates(tmp_path / "nope.txt")


def test_read_candidates_stream_stops_at_blank_line():
    stream = io.StringIO("\n\nTRIED\nTIRES\n\nview\n")
    assert read_candidates_stream(stream) == ["TRIED", "TIRES"]
    assert stream.readline() == "view\n"


def test_read_candidates_stream_prompts_each_line():
    stream = io.StringIO("TRIED\nTIRES\n\n")
    err = io.StringIO()
    assert read_candidates_stream(stream, "> ", err) == ["TRIED", "TIRES"]
    assert err.getvalue() == "> > > "
