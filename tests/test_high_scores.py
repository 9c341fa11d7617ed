import json
import logging
from pathlib import Path

from ttt_arcade.high_scores import HighScoreStore, ScoreRecord, format_table, sort_records


def test_missing_file_is_created_empty(tmp_path: Path):
    path = tmp_path / "scores" / "high-scores.json"
    store = HighScoreStore(path)
    assert store.load() == []
    assert json.loads(path.read_text()) == {"scores": []}


def test_corrupt_file_is_recovered(tmp_path: Path):
    path = tmp_path / "high-scores.json"
    path.write_text("not json at all")
    assert HighScoreStore(path).sorted_records() == []
    assert json.loads(path.read_text()) == {"scores": []}


def test_bad_entries_are_skipped_and_good_ones_kept(tmp_path: Path):
    path = tmp_path / "high-scores.json"
    scores = [
        {"name": "AAA", "score": 5000},
        {"name": "BBB", "score": "n/a"},
        {"name": "CCC"},
        "junk",
    ]
    path.write_text(json.dumps({"scores": scores}))
    store = HighScoreStore(path)
    assert store.load() == [ScoreRecord("AAA", 5000)]
    # file left as it was
    assert json.loads(path.read_text())["scores"] == scores

    store.append(ScoreRecord("DDD", 10))
    assert store.sorted_records() == [ScoreRecord("AAA", 5000), ScoreRecord("DDD", 10)]


def test_non_list_scores_is_recovered(tmp_path: Path):
    path = tmp_path / "high-scores.json"
    path.write_text(json.dumps({"scores": 7}))
    assert HighScoreStore(path).load() == []
    assert json.loads(path.read_text()) == {"scores": []}


def test_unwritable_store_is_logged_not_raised(tmp_path: Path, caplog):
    path = tmp_path / "high-scores.json"
    path.mkdir()
    store = HighScoreStore(path)
    with caplog.at_level(logging.WARNING):
        assert store.load() == []
        assert store.append(ScoreRecord("AAA", 100)) is False
    assert "Could not save score" in caplog.text
    assert path.is_dir()


def test_append_and_sort(tmp_path: Path):
    path = tmp_path / "high-scores.json"
    store = HighScoreStore(path)
    store.append(ScoreRecord("BOB", 100))
    store.append(ScoreRecord("AAA", 200))
    store.append(ScoreRecord("ABE", 100))
    assert store.sorted_records() == [
        ScoreRecord("AAA", 200),
        ScoreRecord("ABE", 100),
        ScoreRecord("BOB", 100),
    ]
    # appended in arrival order on disk
    names = [r["name"] for r in json.loads(path.read_text())["scores"]]
    assert names == ["BOB", "AAA", "ABE"]


def test_store_path_from_env(tmp_path: Path, monkeypatch):
    target = tmp_path / "elsewhere.json"
    monkeypatch.setenv("TTT_HIGH_SCORES", str(target))
    assert HighScoreStore().path == target


def test_sort_records_ties_by_name():
    recs = [ScoreRecord("ZED", 5), ScoreRecord("AMY", 5), ScoreRecord("MAX", 9)]
    assert [r.name for r in sort_records(recs)] == ["MAX", "AMY", "ZED"]


def test_format_table_empty_has_header_only():
    assert format_table([]) == "SCORE      NAME"
