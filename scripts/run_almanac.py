#!/usr/bin/env python3
"""Almanac runner script.

Usage:
    python scripts/run_almanac.py
    python scripts/run_almanac.py scripts/user_config.py
    python scripts/run_almanac.py scripts/user_config.py --strategy interval -v

Note: User config in scripts/user_config.py, defaults in src/almanac/schemas/param.py
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))

from almanac.cli.run_day import main


if __name__ == "__main__":
    sys.exit(main())
