"""
Runs the Data Dragon extractors and writes locales/*.json.

Usage:
    python main.py                      # champions, items, abilities, skins
    python main.py items abilities      # only the named extractors
"""
import os
import sys
import traceback

from dotenv import load_dotenv
from scrapy.utils.log import configure_logging

# Add the worker directory to Python path so the package imports without install
worker_dir = os.path.dirname(os.path.abspath(__file__))
if worker_dir not in sys.path:
    sys.path.insert(0, worker_dir)

from ddragon_locales.config import get_settings
from ddragon_locales.extractors import EXTRACTORS
from ddragon_locales.fetcher import HttpFetcher


def run_extractors(names, settings, fetcher=None):
    """
    Run the named extractors in order, sharing one fetcher.
    Returns the number of extractors that failed fatally.
    """
    owns_fetcher = fetcher is None
    if owns_fetcher:
        fetcher = HttpFetcher.from_settings(settings)
    failures = 0

    try:
        for name in names:
            try:
                extractor = EXTRACTORS[name](settings, fetcher=fetcher)
                written = extractor.run()
                print(f'{name}: {len(written)} file(s) written, stats={extractor.stats}')
            except Exception as e:
                failures += 1
                print(f'{name}: fatal error: {e}')
                traceback.print_exc()
    finally:
        if owns_fetcher:
            print(f'{fetcher.requests_count} HTTP request(s) made')
            fetcher.close()

    return failures


def main(argv=None):
    """Entry point; returns the process exit code."""
    argv = sys.argv[1:] if argv is None else argv

    unknown = [name for name in argv if name not in EXTRACTORS]
    if unknown:
        print(f'Unknown extractor(s): {", ".join(unknown)}')
        print(f'Available: {", ".join(EXTRACTORS)}')
        return 2
    names = argv or list(EXTRACTORS)

    # Load environment variables
    load_dotenv()
    settings = get_settings()
    configure_logging(settings)

    print(f'Starting extraction: {", ".join(names)}')
    print(f'Patch {settings.get("DDRAGON_VERSION")}, languages: {", ".join(settings.getlist("LANGUAGES"))}')

    failures = run_extractors(names, settings)
    if failures:
        print(f'Finished with {failures} failed extractor(s)')
        return 1

    print(f'Done! Files are in {settings.get("OUTPUT_DIR")}/')
    return 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print('\nExtraction stopped by user')
        sys.exit(130)
