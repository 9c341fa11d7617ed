from pathlib import Path

from ttt_arcade.paths import base_dir, high_scores_file


def test_base_dir_prefers_cwd_when_no_env(tmp_path: Path, monkeypatch):
    # Ensure no env overrides
    monkeypatch.delenv("TTT_REPO_ROOT", raising=False)
    monkeypatch.delenv("TTT_HIGH_SCORES", raising=False)

    monkeypatch.chdir(tmp_path)

    assert base_dir() == tmp_path
    assert high_scores_file() == tmp_path / "high-scores.json"


def test_repo_root_env_moves_score_file(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("TTT_HIGH_SCORES", raising=False)
    monkeypatch.setenv("TTT_REPO_ROOT", str(tmp_path / "root"))
    assert high_scores_file() == tmp_path / "root" / "high-scores.json"


def test_explicit_override_wins(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("TTT_HIGH_SCORES", str(tmp_path / "env.json"))
    assert high_scores_file(tmp_path / "cli.json") == tmp_path / "cli.json"
