"""
JSON fetching with retry and linear backoff, shared by every extractor.
"""
import logging
import time

import requests

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a URL could not be fetched after all attempts."""

    def __init__(self, url, message):
        super().__init__(f'{url}: {message}')
        self.url = url


class HttpFetcher:
    """
    Sequential JSON fetcher over a single requests.Session.

    - 2xx: decoded JSON is returned
    - 404: None is returned immediately (upstream has no data)
    - anything else, network errors or undecodable bodies: retried up to
      max_attempts, sleeping base_delay * attempt between tries, then FetchError
    """

    def __init__(self, max_attempts=3, base_delay=0.5, timeout=30,
                 user_agent=None, session=None, sleep=time.sleep):
        self.max_attempts = max(1, int(max_attempts))
        self.base_delay = base_delay
        self.timeout = timeout
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers['User-Agent'] = user_agent
        self.sleep = sleep
        self.requests_count = 0

    @classmethod
    def from_settings(cls, settings, **kwargs):
        """Create a fetcher from project settings."""
        return cls(
            max_attempts=settings.getint('FETCH_MAX_ATTEMPTS', 3),
            base_delay=settings.getfloat('FETCH_RETRY_DELAY', 0.5),
            timeout=settings.getfloat('DOWNLOAD_TIMEOUT', 30),
            user_agent=settings.get('USER_AGENT'),
            **kwargs
        )

    def get_json(self, url):
        """Fetch url and return its decoded JSON body, or None on 404."""
        last_error = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                self.requests_count += 1
                response = self.session.get(url, timeout=self.timeout)
                if response.status_code == 404:
                    logger.debug(f'404 for {url}')
                    return None
                response.raise_for_status()
                return response.json()
            except (requests.RequestException, ValueError) as e:
                last_error = e
                if attempt == self.max_attempts:
                    break
                delay = self.base_delay * attempt
                logger.warning(f'Attempt {attempt}/{self.max_attempts} failed for {url}: {e}, retrying in {delay:.1f}s')
                self.sleep(delay)

        raise FetchError(url, f'failed after {self.max_attempts} attempts: {last_error}')

    def close(self):
        self.session.close()
