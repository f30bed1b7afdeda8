"""Simple launcher for the interactive route planner.

Runs the menu from a source checkout without installing the package.
"""

from __future__ import annotations

import sys

from city_route_planner.shell import main

if __name__ == "__main__":
    sys.exit(main())
