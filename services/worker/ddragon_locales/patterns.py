"""
Language-keyed regex tables used to read stats out of item descriptions.

The JSON file holds, per language tag:
- stat_patterns: ordered [{unit, label, icon, percent}]; "unit" is the regex
  that must follow the number, e.g. "\\s*%\\s*attack speed\\b"
- stat_line_keywords: regex fragments marking a description line as a pure
  stat line ("+45 Attack Damage")

Languages missing from a table use fallback_language.
"""
import json
import re
from collections import namedtuple
from pathlib import Path

DEFAULT_PATTERNS_FILE = Path(__file__).parent / 'data' / 'patterns.json'

# Number as written upstream: "65", "2.5", "2,5"
NUMBER = r'(\d+(?:[,.]\d+)?)'

StatPattern = namedtuple('StatPattern', ['regex', 'label', 'icon', 'percent'])


class PatternTables:
    """Compiled pattern tables loaded from a JSON file."""

    def __init__(self, stat_patterns, stat_line_regexes, fallback_language='en_US'):
        self.stat_patterns = stat_patterns
        self.stat_line_regexes = stat_line_regexes
        self.fallback_language = fallback_language

    @classmethod
    def from_dict(cls, raw):
        fallback = raw.get('fallback_language', 'en_US')

        stat_patterns = {}
        for lang, entries in raw.get('stat_patterns', {}).items():
            stat_patterns[lang] = [
                StatPattern(
                    regex=re.compile(NUMBER + entry['unit'], re.IGNORECASE),
                    label=entry['label'],
                    icon=entry.get('icon', ''),
                    percent=bool(entry.get('percent', False)),
                )
                for entry in entries
            ]

        stat_line_regexes = {}
        for lang, keywords in raw.get('stat_line_keywords', {}).items():
            if not keywords:
                continue
            stat_line_regexes[lang] = re.compile(
                r'^\+?\d+(?:[,.]\d+)?\s*%?\s*(?:' + '|'.join(keywords) + ')',
                re.IGNORECASE,
            )

        if fallback not in stat_patterns:
            raise ValueError(f'Pattern file has no stat_patterns for fallback language {fallback}')

        return cls(stat_patterns, stat_line_regexes, fallback)

    @classmethod
    def from_file(cls, path):
        with open(path, 'r', encoding='utf-8') as f:
            return cls.from_dict(json.load(f))

    def patterns_for(self, lang):
        """Ordered StatPattern list for lang (fallback language if unknown)."""
        return self.stat_patterns.get(lang) or self.stat_patterns[self.fallback_language]

    def stat_line_regex_for(self, lang):
        return self.stat_line_regexes.get(lang) or self.stat_line_regexes.get(self.fallback_language)


_cache = {}


def load_patterns(path=None):
    """Load (and cache) the pattern tables; path None means the bundled file."""
    path = Path(path) if path else DEFAULT_PATTERNS_FILE
    key = str(path.resolve())
    if key not in _cache:
        _cache[key] = PatternTables.from_file(path)
    return _cache[key]
