import json

import pytest

from sixfive.scenario import Scenario, ScenarioError
from sixfive.scenario_filter import ScenarioFilter, ScenarioLoader

SCENARIO_A = {
    "name": "e9 c4 08",
    "initial": {"pc": 132, "s": 38, "a": 156, "x": 114, "y": 204, "p": 109,
                "ram": [[132, 233], [133, 196], [134, 8]]},
    "final": {"pc": 134, "s": 38, "a": 120, "x": 114, "y": 204, "p": 172,
              "ram": [[132, 233], [133, 196], [134, 8]]},
    "cycles": [[132, 233, "read"], [133, 196, "read"]],
}
SCENARIO_B = {
    "name": "e9 cc bc",
    "initial": {"pc": 17267, "s": 167, "a": 80, "x": 48, "y": 153, "p": 234,
                "ram": [[17267, 233], [17268, 204], [17269, 188]]},
    "final": {"pc": 17269, "s": 167, "a": 45, "x": 48, "y": 153, "p": 232,
              "ram": [[17267, 233], [17268, 204], [17269, 188]]},
    "cycles": [[17267, 233, "read"], [17268, 204, "read"]],
}


@pytest.fixture
def loader(tmp_path):
    json_dir = tmp_path / "json"
    json_dir.mkdir()
    return ScenarioLoader(json_dir=json_dir, archive_dir=tmp_path / "archive")


def _scenarios():
    return [Scenario.from_dict(SCENARIO_A), Scenario.from_dict(SCENARIO_B)]


def test_no_filter_lists_sorted_json_files(loader):
    for name in ("b1.json", "0a.json", "readme.txt"):
        (loader.json_dir / name).write_text("[]")
    result = ScenarioFilter.from_filter(loader, None)
    assert result.paths == [loader.json_dir / "0a.json", loader.json_dir / "b1.json"]
    assert result.scenario_name is None


def test_opcode_filter_selects_lowercase_file(loader):
    result = ScenarioFilter.from_filter(loader, "E9")
    assert result.paths == [loader.json_dir / "e9.json"]
    assert result.scenario_name is None


def test_name_filter_keeps_full_name(loader):
    result = ScenarioFilter.from_filter(loader, "e9 cc bc")
    assert result.paths == [loader.json_dir / "e9.json"]
    assert result.scenario_name == "e9 cc bc"
    assert result.skipped_scenario_names == []


@pytest.mark.parametrize("text", ["zz", "1ff", "", "g1 00 00"])
def test_invalid_opcode(loader, text):
    with pytest.raises(ScenarioError):
        ScenarioFilter.from_filter(loader, text)


def test_filter_by_name(loader):
    selected = ScenarioFilter.from_filter(loader, "e9 cc bc").filter(_scenarios())
    assert [s.name for s in selected] == ["e9 cc bc"]


def test_filter_without_name_keeps_all(loader):
    scenarios = _scenarios()
    assert ScenarioFilter.from_filter(loader, "e9").filter(scenarios) == scenarios


def test_filter_skips_named(loader):
    flt = ScenarioFilter(paths=[], skipped_scenario_names=["e9 c4 08"])
    assert [s.name for s in flt.filter(_scenarios())] == ["e9 cc bc"]


def test_read_scenarios_round_trip_through_archive(loader):
    json_path = loader.json_dir / "e9.json"
    json_path.write_text(json.dumps([SCENARIO_A, SCENARIO_B]))

    first = loader.read_scenarios(json_path)
    assert first == _scenarios()
    assert len(list(loader.archive_dir.iterdir())) == 1

    json_path.unlink()
    second = loader.read_scenarios(json_path)
    assert second == first


def test_read_scenarios_rejects_bad_json(loader):
    json_path = loader.json_dir / "e9.json"
    json_path.write_text("{ broken")
    with pytest.raises(ScenarioError):
        loader.read_scenarios(json_path)


def test_read_scenarios_rejects_non_list(loader):
    json_path = loader.json_dir / "e9.json"
    json_path.write_text(json.dumps(SCENARIO_A))
    with pytest.raises(ScenarioError):
        loader.read_scenarios(json_path)