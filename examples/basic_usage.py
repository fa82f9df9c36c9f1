"""Example: validating application tokens at startup

Builds the environment twice: first with KEY2 unset, which reports the
aggregated error, then with KEY2 set.

    python examples/basic_usage.py
"""

import logging
import os
from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from envtoken import build_environment, lookup_from_settings, new_token
from envtoken.config import load_settings


def main():
    settings = load_settings()
    logging.basicConfig(level=settings.log_level_number)
    lookup = lookup_from_settings(settings)

    tokens = [
        new_token("KEY1", "default", False),
        new_token("KEY2", "", True),
    ]

    env, errors = build_environment(tokens, lookup)
    if errors is not None:
        print(errors.aggregate_error())

    os.environ["KEY2"] = "value2"

    env, errors = build_environment(tokens, lookup)
    print(f"KEY1={env.get_value('KEY1')}")
    print(f"KEY2={env.get_value('KEY2')}")


if __name__ == "__main__":
    main()
