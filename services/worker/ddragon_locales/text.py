"""
Markup stripping for Data Dragon descriptions.

Descriptions use XML-like tags (<mainText>, <stats>, <attention>, <scaleAD>...)
mixed with <br> line breaks and HTML entities.
"""
import re
import unicodedata

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

BR_RE = re.compile(r'<br\s*/?>', re.IGNORECASE)
TAG_RE = re.compile(r'<[^>]+>')


def strip_tags(html, separator='', line_break=' '):
    """
    Remove all tags from html and decode entities.

    Args:
        html: Raw description (None and '' give '')
        separator: Text inserted where a tag boundary was
        line_break: Text substituted for every <br>

    Returns:
        Plain text, whitespace untouched
    """
    if not html:
        return ''
    try:
        soup = BeautifulSoup(html, 'html.parser')
    except ParserRejectedMarkup:
        # Drop anything tag-shaped and keep the rest as text
        text = BR_RE.sub(line_break, html)
        return TAG_RE.sub(separator, text)
    for br in soup.find_all('br'):
        br.replace_with(line_break)
    return soup.get_text(separator)


def collapse_whitespace(text):
    return re.sub(r'\s+', ' ', text).strip()


def clean_html(html):
    """Readable single-paragraph version of a description (<br> -> space)."""
    text = strip_tags(html)
    return re.sub(r'\s{2,}', ' ', text).strip()


def flatten_description(html):
    """Tags become spaces so '<attention>65</attention>AD' still reads '65 AD'."""
    return collapse_whitespace(strip_tags(html, separator=' '))


def collation_key(value):
    """
    Sort key approximating locale-aware ordering: accents and case are
    ignored first, the raw string breaks ties ('Élise' sorts with 'Elise').
    """
    value = value or ''
    decomposed = unicodedata.normalize('NFD', value)
    base = ''.join(c for c in decomposed if not unicodedata.combining(c))
    return (base.casefold(), value)
