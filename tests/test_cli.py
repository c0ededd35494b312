import json

from shortest_time_planner.cli import main, print_usage

ACTIONS = [
    {"action": "a1", "state_start": "A", "state_end": "B", "time": 1},
    {"action": "a2", "state_start": "B", "state_end": "D", "time": 1},
    {"action": "a3", "state_start": "A", "state_end": "D", "time": 5},
]


def write_problem(tmp_path, init="A", goal="D"):
    problem = tmp_path / "problem.json"
    states = tmp_path / "states.json"
    actions = tmp_path / "actions.json"
    problem.write_text(json.dumps({"init": init, "goal": goal}))
    states.write_text(json.dumps({"states": ["A", "B", "D"]}))
    actions.write_text(json.dumps({"actions": ACTIONS}))
    return [str(problem), str(states), str(actions)]


def test_print_usage(capsys):
    print_usage()
    out = capsys.readouterr().out
    assert out.startswith(" Usage: ./plan_short_time <problem JSON file>")
    assert out.endswith("<actions JSON file> \n")


def test_help_prints_usage(capsys):
    assert main(["--help"]) == 0
    assert "Usage" in capsys.readouterr().out


def test_too_few_arguments(capsys):
    assert main(["only_one.json"]) == 0
    captured = capsys.readouterr()
    assert "No JSON files provided" in captured.err
    assert "Usage" in captured.out


def test_full_run_writes_output_next_to_problem(tmp_path, capsys):
    assert main(write_problem(tmp_path)) == 0
    data = json.loads((tmp_path / "optimal_actions.json").read_text())
    assert data["actions"] == ["a1", "a2"]
    times = {a["action"]: a["time"] for a in ACTIONS}
    assert data["cost"] == sum(times[name] for name in data["actions"])
    assert "Total time of shortest path" in capsys.readouterr().out


def test_missing_file_reports_load_failure(tmp_path, capsys):
    args = write_problem(tmp_path)
    args[1] = str(tmp_path / "missing.json")
    assert main(args) == 0
    assert "Failed to load JSON data" in capsys.readouterr().err
    assert not (tmp_path / "optimal_actions.json").exists()


def test_inconsistent_problem_reported(tmp_path, capsys):
    assert main(write_problem(tmp_path, goal="Z")) == 0
    assert "Problem data is inconsistent" in capsys.readouterr().err
    assert not (tmp_path / "optimal_actions.json").exists()


def test_unreachable_goal_reported(tmp_path, capsys):
    assert main(write_problem(tmp_path, init="D", goal="A")) == 0
    assert "Failed to calculate shortest time path" in capsys.readouterr().err
    assert not (tmp_path / "optimal_actions.json").exists()