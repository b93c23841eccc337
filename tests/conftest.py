import pytest

from ddragon_locales.config import get_settings

DD_BASE = 'https://ddragon.leagueoflegends.com/cdn/16.3.1'
CD_BASE = 'https://raw.communitydragon.org/latest'


class FakeFetcher:
    """In-memory stand-in for HttpFetcher: url -> JSON, Exception instances are raised, unknown urls are 404s."""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def get_json(self, url):
        self.calls.append(url)
        value = self.responses.get(url)
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def settings(tmp_path):
    return get_settings(
        {
            'OUTPUT_DIR': str(tmp_path / 'locales'),
            'LANGUAGES': ['en_US'],
            'DDRAGON_VERSION': '16.3.1',
            'DOWNLOAD_DELAY': 0,
        },
        environ={},
    )


@pytest.fixture
def make_fetcher():
    return FakeFetcher
