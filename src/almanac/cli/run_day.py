"""Command-line runner for puzzle days.

Resolves configuration (defaults < user file or environment < CLI),
configures logging, runs the solver registered for the requested day and
turns any failure into a logged cause chain and a non-zero exit status.

Usage:
    almanac
    almanac --year 2023 --day 5 --strategy interval
    almanac my_config.py --input-dir ~/aoc/input -v
"""

import sys
import argparse
import logging
import os
import importlib.util
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from dotenv import dotenv_values
from pydantic import ValidationError

from almanac.contracts import AlmanacError
from almanac.pipeline import AlmanacProcessor, DayResult
from almanac.schemas import CLIConfig, InternalConfig, ParamConfig, UserConfig, resolve_config

__all__ = ['run_day', 'main', 'SOLVERS']

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'

# (year, day) -> factory taking InternalConfig, returning an object with run(year, day)
SOLVERS: Dict[Tuple[int, int], Callable[[InternalConfig], Any]] = {
    (2023, 5): AlmanacProcessor,
}


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.
    
    Returns the raw dict before Pydantic validation.
    
    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    
    spec = importlib.util.spec_from_file_location("config_module", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load config module from {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    
    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj
    
    raise ValueError(f"No CONFIG dict found in {path}")


def setup_logging(config: InternalConfig) -> None:
    """Configure the root logger from ``config.logging``.

    Existing root handlers are replaced so repeated runs in one process do
    not duplicate output.
    """
    log_level = getattr(logging, config.logging.level, logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    if config.logging.log_file:
        log_path = Path(config.logging.log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    logger.debug("Logging: level=%s, file=%s", config.logging.level, config.logging.log_file)


def load_environ(dotenv_path=None) -> Dict[str, str]:
    """Return the process environment on top of a ``.env`` file.

    The file defaults to ``.env`` in the working directory and may be
    missing. Process variables win over file entries.
    """
    path = Path(dotenv_path) if dotenv_path else Path.cwd() / ".env"
    file_values = {k: v for k, v in dotenv_values(path).items() if v is not None}
    if file_values:
        logger.debug("Loaded %d variables from %s", len(file_values), path)
    return {**file_values, **os.environ}


def build_config(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    environ=None,
) -> InternalConfig:
    """Resolve the runtime config.

    The user layer comes from ``user_config_path`` when given, otherwise
    from the environment (``AOC_*`` variables, with ``.env`` support).
    """
    if user_config_path:
        user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))
    else:
        user_cfg = UserConfig.from_environ(load_environ() if environ is None else environ)

    cli_dict = {k: v for k, v in (cli_args or {}).items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    return resolve_config(ParamConfig(), user_cfg, cli_cfg)


def run_day(config: InternalConfig, solver_factory=None) -> DayResult:
    """Run the solver registered for ``config.puzzle``.

    Raises
    ------
    ValueError
        If no solver is registered for the requested day
    """
    key = (config.puzzle.year, config.puzzle.day)
    if solver_factory is None:
        if key not in SOLVERS:
            raise ValueError(f"No solver for {key[0]} day {key[1]}")
        solver_factory = SOLVERS[key]

    solver = solver_factory(config)
    return solver.run(*key)


def format_error_chain(exc: BaseException) -> str:
    """Render an exception and its causes, outermost first."""
    parts = []
    seen = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        parts.append(f"{type(exc).__name__}: {exc}")
        exc = exc.__cause__ or exc.__context__
    return "\n  caused by: ".join(parts)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Solve a puzzle day with the Almanac solver")
    parser.add_argument("config", nargs="?", help="Path to user config file (Python, CONFIG dict)")
    parser.add_argument("--year", type=int, help="Puzzle year")
    parser.add_argument("--day", type=int, help="Puzzle day")
    parser.add_argument("--input-dir", help="Input cache directory")
    parser.add_argument("--strategy", choices=["step", "interval"], help="Range search strategy")
    parser.add_argument("--step", type=int, help="Coarse step of the step search")
    parser.add_argument("--max-location", help="Step search bound, or 'unbounded'")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point. Returns the process exit status."""
    args = parse_args(argv)

    try:
        config = build_config(
            args.config,
            {
                "year": args.year,
                "day": args.day,
                "input_dir": args.input_dir,
                "strategy": args.strategy,
                "step": args.step,
                "max_location": args.max_location,
                "log_level": "DEBUG" if args.verbose else None,
            },
        )
    except (ValidationError, ValueError, OSError, ImportError) as e:
        logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
        logger.error("Invalid configuration:\n  %s", format_error_chain(e))
        return 1

    setup_logging(config)
    logger.info("Solving %d day %02d (strategy=%s)",
                config.puzzle.year, config.puzzle.day, config.search.strategy)

    try:
        result = run_day(config)
    except (AlmanacError, ValueError, OSError) as e:
        logger.error("Run failed:\n  %s", format_error_chain(e))
        logger.debug("Traceback", exc_info=True)
        return 1

    logger.info("Done: part one=%d, part two=%d", result.part_one, result.part_two)
    return 0


if __name__ == "__main__":
    sys.exit(main())
