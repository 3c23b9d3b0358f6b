"""Command-line interface for running puzzle days."""

from almanac.cli.run_day import main

__all__ = ['main']
