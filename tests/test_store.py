"""Tests for the analysis store and configuration."""

import json

from critiqueboard.config import load_config
from critiqueboard.models import AnalysisRecord
from critiqueboard.storage.analyses import AnalysisStore


def test_save_and_load(tmp_path):
    store = AnalysisStore(str(tmp_path / "analyses"))
    record = AnalysisRecord(decisions=["Use a wizard"], full=["Too many steps"], timestamp="2026-01-01T10:00:00+00:00")

    path = store.save(record)

    assert path.exists()
    assert path.name.startswith("20260101T100000-")
    loaded = store.load_all()
    assert loaded == [record]


def test_save_same_record_twice_keeps_both(tmp_path):
    store = AnalysisStore(str(tmp_path))
    record = AnalysisRecord(decisions=["d"], full=["p"], timestamp="2026-01-01T10:00:00+00:00")
    assert store.save(record) != store.save(record)
    assert len(store.load_all()) == 2


def test_load_missing_directory(tmp_path):
    assert AnalysisStore(str(tmp_path / "missing")).load_all() == []


def test_load_skips_unreadable_files(tmp_path):
    store = AnalysisStore(str(tmp_path))
    store.save(AnalysisRecord(decisions=["d"], timestamp="2026-01-01T10:00:00+00:00"))
    (tmp_path / "garbage.json").write_text("{not json")
    assert len(store.load_all()) == 1


def test_load_nested_analysis_format(tmp_path):
    (tmp_path / "legacy.json").write_text(json.dumps({
        "decisions": ["d"],
        "analysis": {"full": ["a point"], "simplified": ["short"]},
        "designChallenge": "Onboarding",
    }))
    record = AnalysisStore(str(tmp_path)).load_all()[0]
    assert record.full == ["a point"]
    assert record.simplified == ["short"]
    assert record.design_challenge == "Onboarding"


def test_synthesized_points(tmp_path):
    store = AnalysisStore(str(tmp_path))
    store.save(AnalysisRecord(
        decisions=["d1"],
        full=["1. the ui is slow", "- onboarding needs work"],
        timestamp="2026-01-01T10:00:00+00:00",
    ))
    store.save(AnalysisRecord(
        decisions=["d2"],
        simplified=["the ui is slow"],
        timestamp="2026-01-02T10:00:00+00:00",
    ))

    assert store.synthesized_points() == ["The ui is slow", "Onboarding needs work"]


def test_synthesized_points_empty(tmp_path):
    assert AnalysisStore(str(tmp_path)).synthesized_points() == []


def test_load_config_merges_file(tmp_path, monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    config_file = tmp_path / "config.yaml"
    config_file.write_text(f"analyses_path: {tmp_path / 'a'}\nmerge:\n  weighted_threshold: 0.5\n")

    cfg = load_config(config_file)

    assert cfg["merge"]["weighted_threshold"] == 0.5
    assert cfg["merge"]["jaccard_threshold"] == 0.7
    assert cfg["analyses_path"] == str((tmp_path / "a").resolve())
    assert "claude_api_key" not in cfg


def test_load_config_env_key(tmp_path, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    config_file = tmp_path / "config.yaml"
    config_file.write_text("claude_model: test-model\n")
    cfg = load_config(config_file)
    assert cfg["claude_api_key"] == "sk-test"
    assert cfg["claude_model"] == "test-model"
