"""Puzzle input retrieval."""

from almanac.fetch.downloader import PuzzleInputFetcher

__all__ = ['PuzzleInputFetcher']
