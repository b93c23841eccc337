"""
Best-effort scaling text for abilities.

Data Dragon does not expose ability ratios as data; descriptions carry them as
"(+ 40% AP)" clauses or not at all ({{ e1 }} placeholders). extract_ratio
walks a fallback chain and always returns a string.
"""
import re

from ddragon_locales.text import clean_html

SEE_DESCRIPTION = 'Voir description'

RATIO_UNITS = ['AP', 'AD', 'bonus AD', 'AD total', 'PV max', 'PV manquants', 'Mana', 'armor', 'MR']
DAMAGE_KEYWORDS = ['inflige', 'deals', 'deal', 'dégâts', 'damage', 'daño', 'verursacht', 'schaden', '피해']

RATIO_RE = re.compile(
    r'\(\+\s*[\d.,]+\s*%?\s*(?:' + '|'.join(RATIO_UNITS) + r')[^)]*\)',
    re.IGNORECASE,
)
DAMAGE_RE = re.compile(r'(?:' + '|'.join(DAMAGE_KEYWORDS) + r')[^.]{0,120}', re.IGNORECASE)

SCALING_MAX_CHARS = 120
SUMMARY_MAX_CHARS = 100


def extract_ratio(html):
    """
    Scaling text for a spell or passive description.

    1. every '(+ N% AP)'-style clause, joined with ' + '
    2. text from the first damage keyword, up to a period (120 chars max)
    3. the first 100 characters of the description, '…' appended when cut
    """
    if not html or not isinstance(html, str):
        return SEE_DESCRIPTION

    clean = clean_html(html)
    if not clean:
        return SEE_DESCRIPTION

    ratios = RATIO_RE.findall(clean)
    if ratios:
        return ' + '.join(ratios)

    scaling = DAMAGE_RE.search(clean)
    if scaling:
        return scaling.group(0)[:SCALING_MAX_CHARS]

    summary = clean[:SUMMARY_MAX_CHARS]
    if len(clean) > SUMMARY_MAX_CHARS:
        summary += '…'
    return summary
