"""Interactive menu for building and querying a road network.

The shell reads a menu choice and its arguments line by line, calls the
road network and prints the outcome. Bad input and domain errors are
reported and the menu is shown again; only the exit choice or the end of
input stops the loop.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, TextIO

from .domain.errors import RoutePlannerError
from .domain.models import NoPathFound
from .ports.graph import RoadNetworkPort

MENU = (
    "\nCity Route Planner:\n"
    "1. Add Intersection\n"
    "2. Add Road\n"
    "3. Find Shortest Path\n"
    "4. Detect Cycles\n"
    "5. Exit"
)


class _EndOfInput(Exception):
    pass


class _InvalidNumber(Exception):
    pass


@dataclass
class RoutePlannerShell:
    """Line-oriented front-end driving a RoadNetworkPort.

    Attributes:
        network: The road network the commands act on
        stdin: Stream the commands are read from
        stdout: Stream prompts and results are written to
    """

    network: RoadNetworkPort
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)

    _logger: logging.Logger = field(init=False, repr=False)
    _commands: Dict[str, Callable[[], None]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._commands = {
            "1": self._add_intersection,
            "2": self._add_road,
            "3": self._find_shortest_path,
            "4": self._detect_cycles,
        }

    def run(self) -> None:
        """Show the menu and execute commands until exit or end of input."""
        while True:
            self._write(MENU)
            try:
                choice = self._read_int("Choose an option: ")
                if choice == 5:
                    break
                command = self._commands.get(str(choice))
                if command is None:
                    self._write("Invalid option. Please try again.")
                    continue
                command()
            except _InvalidNumber:
                self._write("Invalid number. Please try again.")
            except RoutePlannerError as e:
                self._logger.debug("Command failed", extra={"error": str(e)})
                self._write(f"Error: {e}")
            except _EndOfInput:
                self._logger.debug("End of input reached")
                break
        self._write("Exiting...")

    # --- Commands -------------------------------------------------------------

    def _add_intersection(self) -> None:
        name = self._read_name("Enter Intersection Name: ")
        self.network.add_intersection(name)
        self._write("Intersection added.")

    def _add_road(self) -> None:
        start = self._read_name("Enter Starting Intersection: ")
        end = self._read_name("Enter Ending Intersection: ")
        weight = self._read_int("Enter Distance: ")
        self.network.add_road(start, end, weight)
        self._write("Road added.")

    def _find_shortest_path(self) -> None:
        start = self._read_name("Enter Starting Intersection: ")
        end = self._read_name("Enter Ending Intersection: ")
        outcome = self.network.find_shortest_path(start, end)
        if isinstance(outcome, NoPathFound):
            self._write(f"No path found from {outcome.start} to {outcome.end}")
            return
        self._write(f"Shortest Path Distance: {outcome.total_distance}")
        self._write(f"Path: {outcome.describe()}")

    def _detect_cycles(self) -> None:
        if self.network.has_cycle():
            self._write("The graph has cycles.")
        else:
            self._write("The graph has no cycles.")

    # --- I/O ------------------------------------------------------------------

    def _write(self, text: str) -> None:
        print(text, file=self.stdout)

    def _prompt(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            self._write("")
            raise _EndOfInput()
        return line.strip()

    def _read_name(self, prompt: str) -> str:
        name = self._prompt(prompt)
        while not name:
            self._write("Name must not be empty.")
            name = self._prompt(prompt)
        return name

    def _read_int(self, prompt: str) -> int:
        text = self._prompt(prompt)
        try:
            return int(text)
        except ValueError:
            self._logger.debug("Not a number", extra={"text": text})
            raise _InvalidNumber(text)


def main() -> int:
    """Console entry point: configure logging and run the shell."""
    from .config import get_config
    from .graph import RoadNetwork
    from .monitoring import configure_logging

    config = get_config()
    configure_logging(config.observability)

    network = RoadNetwork(config=config.graph)
    RoutePlannerShell(network).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
