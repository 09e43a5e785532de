import csv
import json
from pathlib import Path

import pytest
from termhack.solvers import create_strategy
from termhack.harness import (
    run_case, run_batch, write_csv, write_manifest, summarize_results,
)
from termhack.harness.io import csv_fields

TERMINAL = ["CODEX", "CODER", "WATER", "TOWER"]
DUMP = ["TRIED", "TIRES", "TRIES", "TRIBE", "SPIES", "SIDES", "TIDES", "RIDES"]


def _always_zero(guess, answer):
    return len(answer) if guess == answer else 0


def test_run_case_smoke():
    strategy = create_strategy("expected_left")
    r = run_case(strategy, "TOWER", candidates=TERMINAL)
    assert r["success"] is True
    assert r["contradiction"] is False
    assert r["guesses"] == 2
    assert r["candidates"] == 4
    # (guess, likeness, pool size after the guess)
    assert r["history"] == [("CODEX", 2, 1), ("TOWER", 5, 1)]


def test_run_case_out_of_attempts():
    strategy = create_strategy("expected_left")
    r = run_case(strategy, "TOWER", candidates=TERMINAL, max_turns=1)
    assert r["success"] is False
    assert r["guesses"] == 1
    assert r["history"] == [("CODEX", 2, 1)]


def test_run_case_flags_contradiction_from_misread_feedback():
    # CODEX scores 4/1/2 against the others, so likeness 0 rules out everything
    strategy = create_strategy("expected_left")
    r = run_case(strategy, "TOWER", candidates=TERMINAL, feedback=_always_zero)
    assert r["success"] is False
    assert r["contradiction"] is True
    assert r["history"] == [("CODEX", 0, 0)]


def test_run_case_guards():
    strategy = create_strategy("minimax")
    with pytest.raises(ValueError):
        run_case(strategy, "ZZZZZ", candidates=TERMINAL)
    with pytest.raises(ValueError):
        run_case(strategy, "TOWER", candidates=TERMINAL, max_turns=0)


@pytest.mark.parametrize("sid", ["expected_left", "minimax", "entropy"])
def test_run_batch_solves_every_password(sid):
    results = run_batch(create_strategy(sid), DUMP, max_turns=len(DUMP))
    assert [r["answer"] for r in results] == DUMP
    assert all(r["success"] for r in results)
    assert all(r["strategy_id"] == sid for r in results)
    # pool never grows along a game
    for r in results:
        sizes = [r["candidates"]] + [step[2] for step in r["history"]]
        assert sizes == sorted(sizes, reverse=True)


def test_summarize_results():
    results = run_batch(create_strategy("expected_left"), TERMINAL)
    s = summarize_results(results)
    assert s["num_cases"] == 4
    assert s["success_rate"] == 1.0
    assert s["mean_guesses"] == pytest.approx(1.75)
    assert s["contradictions"] == 0
    assert s["mean_after_first"] == 1


def test_write_csv_has_remaining_columns(tmp_path: Path):
    results = run_batch(create_strategy("expected_left"), TERMINAL)
    results.append(dict(
        run_case(create_strategy("expected_left"), "TOWER", candidates=TERMINAL,
                 feedback=_always_zero),
        strategy_id="expected_left",
    ))
    p = write_csv(results, str(tmp_path / "r" / "run.csv"), max_turns=4, length=5)
    with open(p, encoding="utf-8") as fh:
        reader = csv.DictReader(fh)
        assert reader.fieldnames == csv_fields(4)
        rows = list(reader)

    tower = rows[3]
    assert tower["answer"] == "TOWER" and tower["candidates"] == "4"
    assert (tower["guess_1"], tower["likeness_1"], tower["remaining_1"]) == ("CODEX", "2", "1")
    assert (tower["guess_2"], tower["likeness_2"], tower["remaining_2"]) == ("TOWER", "5", "1")
    assert tower["guess_3"] == tower["remaining_3"] == ""
    assert tower["contradiction"] == "False"
    assert rows[0]["strategy"] == "expected_left"

    misread = rows[4]
    assert misread["contradiction"] == "True" and misread["success"] == "False"
    assert misread["remaining_1"] == "0"


def test_write_manifest(tmp_path: Path):
    m = write_manifest({"num_cases": 4}, str(tmp_path / "out" / "m.json"))
    assert json.loads(Path(m).read_text(encoding="utf-8")) == {"num_cases": 4}
