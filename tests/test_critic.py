"""Tests for the Claude-backed critic, using a mocked client."""

import copy
import json
from unittest.mock import Mock

import pytest

from critiqueboard.config import DEFAULT_CONFIG
from critiqueboard.critique.critic import Critic, extract_json
from critiqueboard.errors import ThemeGenerationInProgress


def _client(text):
    client = Mock()
    client.messages.create.return_value = Mock(content=[Mock(text=text)])
    return client


def _config(**overrides):
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    cfg.update(overrides)
    return cfg


def test_requires_api_key():
    with pytest.raises(ValueError):
        Critic(_config())


def test_generate_analysis_pads_to_point_count():
    client = _client("1. Too many steps ** ** 2. Contrast is low")
    critic = Critic(_config(analysis={"point_count": 3, "max_tokens": 500}), client=client)

    points = critic.generate_analysis(["Use a wizard", "Dark theme"], design_challenge="Onboarding")

    assert points == ["Too many steps", "Contrast is low", "Contrast is low"]
    kwargs = client.messages.create.call_args.kwargs
    assert kwargs["max_tokens"] == 500
    assert "Onboarding" in kwargs["system"]
    assert kwargs["messages"][0]["content"] == "- Use a wizard\n- Dark theme"


def test_generate_analysis_lists_consensus_points():
    client = _client("Only point")
    critic = Critic(_config(), client=client)

    points = critic.generate_analysis(["Decision"], consensus_points=["Keep the dark theme"])

    assert len(points) == 10
    assert "1. Keep the dark theme" in client.messages.create.call_args.kwargs["system"]


def test_simplify_points_keeps_count():
    critic = Critic(_config(), client=_client("Short one ** Short two"))
    assert critic.simplify_points(["A long point", "Another long point"]) == ["Short one", "Short two"]
    assert critic.simplify_points([]) == []


def test_generate_themes_pads_and_colors():
    client = _client('```json\n[{"name": "Access"}, {"name": "Flow"}]\n```')
    critic = Critic(_config(), client=client)

    themes = critic.generate_themes(["Add captions"], ["Is the flow too long?"])

    assert [t.name for t in themes] == ["Access", "Flow", "Theme 3", "Theme 4"]
    assert [t.color for t in themes] == ["light_green", "light_blue", "light_yellow", "light_pink"]


def test_generate_themes_truncates():
    names = [{"name": f"T{i}"} for i in range(6)]
    critic = Critic(_config(), client=_client(json.dumps(names)))
    assert len(critic.generate_themes(["p"], [])) == 4


def test_generate_themes_rejects_empty_input():
    critic = Critic(_config(), client=_client("[]"))
    with pytest.raises(ValueError):
        critic.generate_themes([], [])


def test_generate_themes_rejects_unparseable_response():
    critic = Critic(_config(), client=_client("I could not find any themes."))
    with pytest.raises(ValueError):
        critic.generate_themes(["p"], [])
    assert not critic.theme_guard.busy


def test_overlapping_theme_generation_is_rejected():
    critic = Critic(_config(), client=_client('[{"name": "A"}]'))
    with critic.theme_guard.hold():
        with pytest.raises(ThemeGenerationInProgress):
            critic.generate_themes(["p"], [])
    assert len(critic.generate_themes(["p"], [])) == 4


def test_guards_are_per_critic():
    first = Critic(_config(), client=_client('[{"name": "A"}]'))
    second = Critic(_config(), client=_client('[{"name": "B"}]'))
    with first.theme_guard.hold():
        assert second.generate_themes(["p"], [])[0].name == "B"


def test_extract_json_variants():
    assert extract_json('{"name": "A"}') == {"name": "A"}
    assert extract_json('Here you go: [{"name": "A"}] thanks') == [{"name": "A"}]
    assert extract_json('```\n[1, 2]\n```') == [1, 2]
    with pytest.raises(ValueError):
        extract_json("not json")
