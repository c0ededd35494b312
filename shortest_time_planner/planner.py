"""Shortest-time path planning over a graph of states connected by timed actions."""

from __future__ import annotations

import heapq
import itertools
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

NULL_STATE = "NULL"
UINT32_MAX = 2**32 - 1


class PlannerError(Exception):
    """Raised when problem data cannot be loaded, validated or solved."""


@dataclass
class ActionInfo:
    """An action leading from one state to another; its time is its cost."""

    name: str
    state_start: str
    state_end: str
    cost: int


@dataclass
class StateInfo:
    """A state with its best known predecessor, action and time from the start."""

    name: str
    prev_state: str = NULL_STATE
    opt_action: str = NULL_STATE
    cost_from_start: int = UINT32_MAX
    action_list: list[str] = field(default_factory=list)


def _read_json(path: str) -> Any:
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)


def _field(obj: Any, key: str) -> Any:
    if not isinstance(obj, dict):
        raise PlannerError(f"expected a JSON object holding '{key}'")
    if key not in obj:
        raise PlannerError(f"missing key '{key}'")
    return obj[key]


def _string(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise PlannerError(f"{what} must be a string, got {value!r}")
    return value


def _cost(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= UINT32_MAX:
        raise PlannerError(f"{what} must be an unsigned 32-bit integer, got {value!r}")
    return value


def _first_entry(container: Any) -> Any:
    """Return the first value of a JSON container, taking object keys in sorted order."""
    if isinstance(container, dict):
        if not container:
            raise PlannerError("actions data is empty")
        return container[min(container)]
    if isinstance(container, list):
        if not container:
            raise PlannerError("actions data is empty")
        return container[0]
    raise PlannerError("actions data must be a JSON object or array")


def _entries(container: Any) -> list[Any]:
    if isinstance(container, dict):
        return [container[key] for key in sorted(container)]
    if isinstance(container, list):
        return list(container)
    raise PlannerError("list of actions must be a JSON object or array")


class PlannerShortestTime:
    """Loads a planning problem from JSON files and finds the shortest-time path."""

    def __init__(self) -> None:
        self.start_state = ""
        self.goal_state = ""
        self.list_of_states: set[str] = set()
        self.action_info: dict[str, ActionInfo] = {}
        self.state_info: dict[str, StateInfo] = {}
        self.shortest_path: list[str] = []
        self.optimal_actions: list[str] = []
        self._valid = False

    def load_problem_data(self, problem_json_file, states_json_file, actions_json_file) -> None:
        """Read the problem, states and actions files; raise PlannerError on failure."""
        for path in (problem_json_file, states_json_file, actions_json_file):
            if not Path(path).is_file():
                raise PlannerError(f"File:{path} does not exist")

        print(
            "\n\n JSON files provided:\n"
            f" Problem: {problem_json_file}\n"
            f" States: {states_json_file}\n"
            f" Actions: {actions_json_file}"
        )

        try:
            problem = _read_json(problem_json_file)
            states = _read_json(states_json_file)
            actions = _read_json(actions_json_file)
        except (OSError, ValueError) as exc:
            raise PlannerError(f"Failed to load JSON data: {exc}") from exc

        state_names = _field(states, "states")
        if not isinstance(state_names, list):
            raise PlannerError("'states' must be a JSON array")
        self.list_of_states = {_string(name, "state") for name in state_names}
        self.state_info = {}
        print("\n List of states:")
        for idx, name in enumerate(sorted(self.list_of_states)):
            print(f"\t [{idx}] {name}")
            self.state_info[name] = StateInfo(name)

        self.start_state = _string(_field(problem, "init"), "init")
        self.goal_state = _string(_field(problem, "goal"), "goal")
        print("\n Problem description: ")
        print(f"\t Start state: {self.start_state}\n\t Goal state: {self.goal_state}")

        self.action_info = {}
        print("\n List of actions:")
        for idx, entry in enumerate(_entries(_first_entry(actions))):
            action = ActionInfo(
                name=_string(_field(entry, "action"), "action"),
                state_start=_string(_field(entry, "state_start"), "state_start"),
                state_end=_string(_field(entry, "state_end"), "state_end"),
                cost=_cost(_field(entry, "time"), "time"),
            )
            self.action_info[action.name] = action
            origin = self.state_info.get(action.state_start)
            if origin is None:
                raise PlannerError(
                    f"Action {action.name} starts from unknown state {action.state_start}"
                )
            origin.action_list.append(action.name)
            print(
                f"\n\n Action id [{idx}]: {action.name}\n"
                f" State start: {action.state_start}\n"
                f" State end: {action.state_end}\n"
                f" Cost(time): {action.cost}\n"
            )
        self._valid = False

    def validate_problem_data(self) -> None:
        """Check that the start and goal states are known; raise PlannerError if not."""
        if self.start_state not in self.list_of_states:
            raise PlannerError(f"Start state: {self.start_state} not found in list of states")
        if self.goal_state not in self.list_of_states:
            raise PlannerError(f"Goal state: {self.goal_state} not found in list of states")
        self._valid = True

    def calc_shortest_time_path(self) -> list[str]:
        """Run Dijkstra's method from the start state and return the states of the best path."""
        if not self._valid:
            raise PlannerError("Problem data not validated yet.")

        self.state_info[self.start_state].cost_from_start = 0
        order = itertools.count()
        queue = [(0, next(order), self.start_state)]
        visited: set[str] = set()

        while queue and visited != self.list_of_states:
            _, _, name = heapq.heappop(queue)
            current = self.state_info[name]
            for action_name in current.action_list:
                action = self.action_info[action_name]
                neighbour = action.state_end
                if neighbour in visited:
                    continue
                info = self.state_info.get(neighbour)
                if info is None:
                    raise PlannerError(
                        f"Action {action_name} leads to unknown state {neighbour}"
                    )
                cost = current.cost_from_start + action.cost
                if cost < info.cost_from_start:
                    info.cost_from_start = cost
                    info.prev_state = current.name
                    info.opt_action = action_name
                    heapq.heappush(queue, (cost, next(order), neighbour))
            visited.add(name)

        print("\n\n Done traversing graph\n")
        for name in sorted(self.state_info):
            info = self.state_info[name]
            print(
                f" Node: {name} cost: {info.cost_from_start}"
                f" prev node:{info.prev_state} opt. action:{info.opt_action}"
            )

        path: list[str] = []
        actions: list[str] = []
        state = self.goal_state
        while state != self.start_state:
            info = self.state_info[state]
            if info.prev_state == NULL_STATE:
                raise PlannerError(
                    f"No path from {self.start_state} to {self.goal_state}"
                )
            path.append(state)
            actions.append(info.opt_action)
            state = info.prev_state
        path.append(self.start_state)

        self.shortest_path = path[::-1]
        self.optimal_actions = actions[::-1]
        return list(self.shortest_path)

    def echo_shortest_time_path(self, output_file_path) -> int:
        """Print the path and actions, write them as JSON and return the total time."""
        print("\n\n Done calculating shortest path \n")
        print("".join(f"-->{state}" for state in self.shortest_path))

        print("\n\n Optimal action list (end to start) \n")
        print("".join(f"-->{action}" for action in self.optimal_actions))
        total_cost = sum(self.action_info[action].cost for action in self.optimal_actions)

        print(f"\n ----------- Total time of shortest path: {total_cost}\n")
        print(f" Writing optimal action list to: {output_file_path}\n")
        document = {"actions": self.optimal_actions, "cost": total_cost}
        with open(output_file_path, "w", encoding="utf-8") as handle:
            handle.write(
                json.dumps(document, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
            )
            handle.write("\n")
        return total_cost