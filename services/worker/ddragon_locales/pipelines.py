"""
Item pipelines for writing normalized records.
"""
import json
import logging
from pathlib import Path

from itemadapter import ItemAdapter

logger = logging.getLogger(__name__)


class JsonFilePipeline:
    """
    Pipeline that collects items and writes them as one pretty-printed JSON
    list when closed. The file is overwritten on every run.
    """

    def __init__(self, output_dir='locales', filename=None):
        self.output_dir = Path(output_dir)
        self.filename = filename
        self.items = []
        self.items_count = 0

    @classmethod
    def from_settings(cls, settings, filename):
        """Create pipeline instance from project settings."""
        return cls(settings.get('OUTPUT_DIR', 'locales'), filename)

    @property
    def path(self):
        return self.output_dir / self.filename

    def open(self):
        """Create the output directory and start a fresh list."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.items = []
        self.items_count = 0

    def process_item(self, item):
        """Queue an item (scrapy.Item or dict) for writing."""
        self.items.append(ItemAdapter(item).asdict())
        self.items_count += 1
        return item

    def close(self):
        """Write the collected items and return the file path."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(self.items, f, ensure_ascii=False, indent=2)
        logger.info(f'JsonFilePipeline: Wrote {self.items_count} items to {self.path}')
        return self.path
