"""
Shared per-language batch loop for the extractors.
"""
import logging
import traceback

from ddragon_locales.config import ddragon_base, resolve_version
from ddragon_locales.fetcher import FetchError, HttpFetcher
from ddragon_locales.pipelines import JsonFilePipeline


class BaseExtractor:
    """
    Fetch -> normalize -> write, one language at a time.

    Subclasses set `name` (also the output file prefix) and implement
    extract_language(lang), returning the records for that language.
    A failing language is logged and skipped; the others still run.
    """
    name = None

    def __init__(self, settings, fetcher=None):
        self.settings = settings
        self.fetcher = fetcher or HttpFetcher.from_settings(settings)
        self.logger = logging.getLogger(f'ddragon_locales.{self.name}')
        self.stats = {
            'languages_written': 0,
            'languages_failed': 0,
            'records_written': 0,
        }

    @property
    def ddragon_base(self):
        return ddragon_base(self.settings)

    def languages(self):
        return self.settings.getlist('LANGUAGES')

    def output_filename(self, lang):
        return f'{self.name}_{lang}.json'

    def fetch_champion_list(self, lang):
        """Data Dragon champion.json 'data' mapping (id -> summary) for lang."""
        url = f'{self.ddragon_base}/data/{lang}/champion.json'
        data = self.fetcher.get_json(url)
        if data is None:
            raise FetchError(url, 'not found')
        return data.get('data') or {}

    def extract_language(self, lang):
        raise NotImplementedError

    def write(self, filename, records):
        pipeline = JsonFilePipeline.from_settings(self.settings, filename)
        pipeline.open()
        for record in records:
            pipeline.process_item(record)
        path = pipeline.close()
        self.stats['records_written'] += pipeline.items_count
        return path

    def run(self):
        """Extract every configured language; returns the written file paths."""
        resolve_version(self.settings, self.fetcher)
        self.logger.info(f'Extracting {self.name} (patch {self.settings.get("DDRAGON_VERSION")})')

        written = []
        for lang in self.languages():
            try:
                self.logger.info(f'Downloading [{lang}]...')
                # Build the full list before opening the file so a failure leaves the previous file intact
                records = list(self.extract_language(lang))
                path = self.write(self.output_filename(lang), records)
                written.append(path)
                self.stats['languages_written'] += 1
                self.logger.info(f'{path} ({len(records)} {self.name})')
            except Exception as e:
                self.stats['languages_failed'] += 1
                self.logger.error(f'[{lang}] {self.name} extraction failed: {e}')
                self.logger.debug(traceback.format_exc())
        return written
