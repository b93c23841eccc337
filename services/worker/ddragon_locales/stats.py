"""
Item stat extraction.

Two sources feed an item's stat map:
1. item.stats, Data Dragon's numeric object (authoritative)
2. the description text, which carries stats item.stats leaves out
   (ability haste, omnivamp, tenacity...)

Both produce label -> {'value', 'icon', 'percent'}; percent values are
strings such as '12%'.
"""
import math
import re

from ddragon_locales.patterns import load_patterns
from ddragon_locales.text import flatten_description, strip_tags

# Data Dragon item.stats key -> display label, icon, percent
STAT_FIELDS = {
    'FlatPhysicalDamageMod':    {'label': 'AD',          'icon': '⚔️', 'percent': False},
    'rFlatPhysicalDamageMod':   {'label': 'AD',          'icon': '⚔️', 'percent': False},
    'FlatMagicDamageMod':       {'label': 'AP',          'icon': '✨', 'percent': False},
    'FlatHPPoolMod':            {'label': 'HP',          'icon': '❤️', 'percent': False},
    'FlatMPPoolMod':            {'label': 'Mana',        'icon': '💙', 'percent': False},
    'FlatArmorMod':             {'label': 'AR',          'icon': '🛡️', 'percent': False},
    'FlatSpellBlockMod':        {'label': 'MR',          'icon': '🔮', 'percent': False},
    'PercentAttackSpeedMod':    {'label': 'Atk Speed',   'icon': '⚡', 'percent': True},
    'FlatCritChanceMod':        {'label': 'Crit Chance', 'icon': '🎯', 'percent': True},
    'FlatCritDamageMod':        {'label': 'Crit Dmg',    'icon': '💥', 'percent': True},
    'FlatMovementSpeedMod':     {'label': 'Speed',       'icon': '👟', 'percent': False},
    'PercentMovementSpeedMod':  {'label': 'Speed',       'icon': '👟', 'percent': True},
    'PercentLifeStealMod':      {'label': 'Lifesteal',   'icon': '🩸', 'percent': True},
    'FlatHPRegenMod':           {'label': 'HP Regen',    'icon': '💚', 'percent': False},
    'FlatMPRegenMod':           {'label': 'Mana Regen',  'icon': '🔵', 'percent': False},
    'rFlatArmorPenetrationMod': {'label': 'Lethality',   'icon': '🗡️', 'percent': False},
    'FlatMagicPenetrationMod':  {'label': 'Magic Pen',   'icon': '🌀', 'percent': False},
    'rFlatMagicPenetrationMod': {'label': 'Magic Pen',   'icon': '🌀', 'percent': False},
    'PercentHPPoolMod':         {'label': 'Bonus HP',    'icon': '❤️', 'percent': True},
    'FlatEXPBonus':             {'label': 'XP Bonus',    'icon': '⭐', 'percent': False},
    'rFlatTimeDeadMod':         {'label': 'Death Timer', 'icon': '💀', 'percent': False},
    'FlatCooldownMod':          {'label': 'AH',          'icon': '⏱️', 'percent': False},
    'AbilityHasteMod':          {'label': 'AH',          'icon': '⏱️', 'percent': False},
    'PercentBaseHPRegenMod':    {'label': 'HP Regen%',   'icon': '💚', 'percent': True},
}


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def _plain_number(value):
    """2.0 -> 2, 2.5 -> 2.5"""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def parse_stats_from_object(stats_obj):
    """Stat map from Data Dragon's item.stats; the first field seen for a label wins."""
    result = {}
    if not isinstance(stats_obj, dict):
        return result

    for key, value in stats_obj.items():
        field = STAT_FIELDS.get(key)
        if not field or field['label'] in result:
            continue
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            continue
        result[field['label']] = {
            'value': f"{_round_half_up(value * 100)}%" if field['percent'] else value,
            'icon': field['icon'],
            'percent': field['percent'],
        }
    return result


def parse_stats_from_description(html, lang, patterns=None):
    """
    Stat map read from description text.

    The whole flattened text is scanned once per pattern (not line by line):
    Data Dragon wraps values in tags, so after stripping, '10% ability haste'
    can read '10 % ability haste' and need not start a line.
    """
    text = flatten_description(html)
    if not text:
        return {}

    patterns = patterns or load_patterns()
    result = {}
    for pattern in patterns.patterns_for(lang):
        if pattern.label in result:
            continue
        match = pattern.regex.search(text)
        if not match:
            continue
        try:
            raw = float(match.group(1).replace(',', '.'))
        except ValueError:
            continue
        if math.isnan(raw) or raw <= 0:
            continue
        raw = _plain_number(raw)
        result[pattern.label] = {
            'value': f'{raw}%' if pattern.percent else raw,
            'icon': pattern.icon,
            'percent': pattern.percent,
        }
    return result


def merge_stats(structured, described):
    """Structured stats first; description stats only fill labels still missing."""
    merged = dict(structured)
    for label, stat in described.items():
        if label not in merged:
            merged[label] = stat
    return merged


def clean_flavor_text(html, lang='en_US', patterns=None):
    """
    Keep the passive/active text of an item description, drop pure stat lines.

    '<stats>+45 Attack Damage<br>+20 Ability Haste</stats><br><passive>Spellblade</passive>...'
    -> 'Spellblade...'
    """
    text = strip_tags(html, line_break='\n')
    if not text:
        return ''

    patterns = patterns or load_patterns()
    stat_line = patterns.stat_line_regex_for(lang)

    kept = []
    for line in text.split('\n'):
        line = line.strip()
        if not line:
            continue
        if stat_line is not None and stat_line.match(line):
            continue
        kept.append(line)

    return re.sub(r'\s{2,}', ' ', ' '.join(kept)).strip()
