"""Puzzle input download with an on-disk cache.

Inputs are cached at ``{input_dir}/{year}/{day:02}.txt``. A cache hit is
read straight from disk; a miss downloads the input with the account's
session cookie and writes it to the cache before returning it.
"""

import logging
from pathlib import Path
from typing import Optional

import requests

from almanac.contracts import FetchError
from almanac.schemas.internal import InternalFetchConfig

__all__ = ['PuzzleInputFetcher']

logger = logging.getLogger(__name__)


class PuzzleInputFetcher:
    """Fetches puzzle input text, from the local cache when possible.

    **Cache layout:** ``input/2023/05.txt`` for year 2023, day 5. The cache
    directory is created on first download. Delete a file to force a
    re-download.

    **Authentication:** puzzle inputs are per account. The value of the
    browser's ``session`` cookie (``AOC_SESSION_ID``) is sent with every
    download. It is only needed on a cache miss.

    Example usage::

        fetcher = PuzzleInputFetcher(config.fetch)
        text = fetcher.get_input(2023, 5)
    """

    def __init__(self, config: InternalFetchConfig, session: Optional[requests.Session] = None):
        """Initialize fetcher.

        Parameters
        ----------
        config : InternalFetchConfig
            Fetch section of the resolved runtime configuration.

        session : requests.Session, optional
            HTTP session used for downloads. If None, one is created on the
            first cache miss. Allows injection for testing.
        """
        self.config = config
        self.base_url = config.base_url
        self.input_dir = Path(config.input_dir).expanduser()
        self._session = session

    def get_input(self, year: int, day: int) -> str:
        """Return the raw input text for ``year``/``day``.

        Raises
        ------
        ValueError
            If the base URL, year or day is invalid
        FetchError
            If the input is not cached and cannot be downloaded
        """
        self._validate(year, day)

        path = self.cache_path(year, day)
        if path.is_file():
            logger.debug("cached input for %d/%02d found!", year, day)
            return path.read_text()

        logger.debug("%d/%02d was not found, fetching...", year, day)
        text = self._download(year, day)

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        logger.info("Cached input: %s", path)
        return text

    def cache_path(self, year: int, day: int) -> Path:
        return self.input_dir / str(year) / f"{day:02d}.txt"

    def _validate(self, year: int, day: int) -> None:
        if not self.base_url.startswith("http"):
            raise ValueError(f"AOC_URL (`{self.base_url}`) doesn't look like a url")
        if not self.config.min_year <= year <= self.config.max_year:
            raise ValueError(f"{year} is not a valid AoC year.")
        if not 1 <= day <= 25:
            raise ValueError(f"{day} is not a valid AoC day.")

    def _get_session(self) -> requests.Session:
        if self._session is None:
            if not self.config.session_id:
                raise FetchError("input is not cached and AOC_SESSION_ID is not set")
            session = requests.Session()
            session.cookies.set("session", self.config.session_id)
            self._session = session
        return self._session

    def _download(self, year: int, day: int) -> str:
        url = f"{self.base_url}/{year}/day/{day}/input"
        session = self._get_session()
        try:
            response = session.get(url, timeout=self.config.timeout_sec)
            response.raise_for_status()
        except requests.HTTPError as e:
            raise FetchError(f"Check your AOC_SESSION_ID is valid ({url})") from e
        except requests.RequestException as e:
            raise FetchError(f"Download failed: {url}") from e

        logger.info("Downloaded %d/%02d (%d bytes)", year, day, len(response.text))
        return response.text
