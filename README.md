# shortest_time_planner

Plans the fastest way from a start state to a goal state. States, actions and
the problem are read from three JSON files. Each action moves from one state to
another and takes a known amount of time, and the planner finds the sequence of
actions with the lowest total time using Dijkstra's algorithm.

## Installation

```
pip install .
```

## Input files

Problem file, with the start (`init`) and goal (`goal`) states:

```json
{"init": "home", "goal": "office"}
```

States file:

```json
{"states": ["home", "station", "office"]}
```

Actions file. Only its first top-level entry is read (for an object, the entry
whose key sorts first; for an array, its first element). That entry holds the
list of actions:

```json
{
  "actions": [
    {"action": "walk_to_station", "state_start": "home", "state_end": "station", "time": 5},
    {"action": "train", "state_start": "station", "state_end": "office", "time": 20},
    {"action": "drive", "state_start": "home", "state_end": "office", "time": 40}
  ]
}
```

Every `time` must be a non-negative integer that fits in 32 bits, and every
action must start from and lead to a state named in the states file.

## Command line

```
plan-shortest-time data/problem.json data/states.json data/actions.json
```

The command prints the states and actions it loaded, the cost of reaching each
state, the shortest path and the total time. It writes the optimal actions to
`optimal_actions.json` in the directory named in the problem file's path
(here `data/optimal_actions.json`):

```json
{"actions":["walk_to_station","train"],"cost":25}
```

Give the problem file with a directory part (for example `./problem.json`);
the output location is taken from the text before the last `/` in that path.

Errors are reported on standard error; the command exits with status 0 in
every case. Fewer than three file arguments prints the usage.

```
plan-shortest-time --help
```

## Library use

```python
from shortest_time_planner.planner import PlannerShortestTime

planner = PlannerShortestTime()
planner.load_problem_data("problem.json", "states.json", "actions.json")
planner.validate_problem_data()
path = planner.calc_shortest_time_path()        # e.g. ["home", "station", "office"]
total = planner.echo_shortest_time_path("optimal_actions.json")  # e.g. 25
```

After `calc_shortest_time_path`, `planner.shortest_path` and
`planner.optimal_actions` hold the states and actions of the best path, and
`planner.state_info` maps each state name to a `StateInfo` with its
`cost_from_start`, `prev_state` and `opt_action`.

`PlannerError` is raised for missing files, unreadable or malformed JSON,
actions that refer to unknown states, start or goal states not in the list of
states, calculating before validating, and a goal that cannot be reached.

## Running the tests

```
pip install .[test]
pytest
```