"""Tests for the interactive menu, driven through in-memory streams."""

from __future__ import annotations

import io

from city_route_planner.config import GraphConfig
from city_route_planner.graph.road_network import RoadNetwork
from city_route_planner.shell import RoutePlannerShell


def run_shell(*lines: str, network: RoadNetwork | None = None):
    network = network or RoadNetwork(config=GraphConfig())
    stdout = io.StringIO()
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    RoutePlannerShell(network, stdin=stdin, stdout=stdout).run()
    return network, stdout.getvalue()


def add_intersections(*names: str) -> list[str]:
    lines: list[str] = []
    for name in names:
        lines += ["1", name]
    return lines


def test_menu_is_shown_and_exit_stops_loop():
    _, output = run_shell("5")

    assert "City Route Planner:" in output
    assert "1. Add Intersection" in output
    assert "5. Exit" in output
    assert "Choose an option: " in output
    assert output.rstrip().endswith("Exiting...")


def test_commands_after_exit_are_not_executed():
    network, _ = run_shell("5", "1", "A")

    assert len(network) == 0


def test_add_intersection_and_road():
    network, output = run_shell(*add_intersections("A", "B"), "2", "A", "B", "7", "5")

    assert output.count("Intersection added.") == 2
    assert "Enter Distance: " in output
    assert "Road added." in output
    assert network.road_count == 1


def test_names_are_stripped():
    network, _ = run_shell("1", "  Main  ", "5")

    assert network.intersections() == ["Main"]


def test_empty_name_is_prompted_again():
    network, output = run_shell("1", "", "A", "5")

    assert "Name must not be empty." in output
    assert network.intersections() == ["A"]


def test_shortest_path_is_printed():
    lines = add_intersections("A", "B", "C", "D") + [
        "2", "A", "B", "1",
        "2", "B", "C", "2",
        "2", "A", "C", "4",
        "2", "C", "D", "1",
        "3", "A", "D",
        "5",
    ]

    _, output = run_shell(*lines)

    assert "Shortest Path Distance: 4" in output
    assert "Path: A -> B -> C -> D" in output


def test_no_path_is_reported():
    _, output = run_shell(*add_intersections("A", "B"), "3", "A", "B", "5")

    assert "No path found from A to B" in output


def test_cycle_detection_messages():
    _, output = run_shell(*add_intersections("A", "B"), "4", "2", "A", "B", "1", "2", "B", "A", "1", "4", "5")

    assert "The graph has no cycles." in output
    assert "The graph has cycles." in output


def test_unknown_intersection_is_reported_and_loop_continues():
    network, output = run_shell("2", "A", "B", "3", "1", "A", "3", "A", "Z", "5")

    assert "Error: Unknown intersection: A" in output
    assert "Error: Unknown intersection: Z" in output
    assert network.intersections() == ["A"]
    assert "Exiting..." in output


def test_negative_distance_is_reported():
    network, output = run_shell(*add_intersections("A", "B"), "2", "A", "B", "-3", "5")

    assert "Error: Distance must not be negative, got -3" in output
    assert network.road_count == 0


def test_invalid_option():
    _, output = run_shell("9", "0", "5")

    assert output.count("Invalid option. Please try again.") == 2


def test_non_numeric_input():
    network, output = run_shell(*add_intersections("A", "B"), "x", "2", "A", "B", "far", "5")

    assert output.count("Invalid number. Please try again.") == 2
    assert network.road_count == 0


def test_end_of_input_exits_cleanly():
    network, output = run_shell("1", "A")

    assert network.intersections() == ["A"]
    assert output.rstrip().endswith("Exiting...")


def test_end_of_input_in_the_middle_of_a_command():
    network, output = run_shell(*add_intersections("A", "B"), "2", "A")

    assert network.road_count == 0
    assert output.rstrip().endswith("Exiting...")
