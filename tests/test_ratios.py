import pytest

from ddragon_locales.ratios import SEE_DESCRIPTION, extract_ratio


def test_ratio_clause_example():
    assert extract_ratio('Deals 10 (+ 40% AP) magic damage') == '(+ 40% AP)'


def test_ratio_clauses_are_joined():
    html = (
        'Ahri deals <magicDamage>40 (+ 50% AP)</magicDamage> magic damage, '
        'then <trueDamage>40 (+ 50% AP)</trueDamage> true damage. '
        'Heals for 3 (+ 2% PV max).'
    )
    assert extract_ratio(html) == '(+ 50% AP) + (+ 50% AP) + (+ 2% PV max)'


def test_ratio_clause_case_insensitive_with_trailing_text():
    assert extract_ratio('Strikes for 60 (+ 0.8 bonus ad per stack)') == '(+ 0.8 bonus ad per stack)'


def test_damage_keyword_fallback_stops_at_period():
    html = 'Garen spins, dealing {{ e1 }} damage to nearby enemies. Then he stops.'
    assert extract_ratio(html) == 'dealing {{ e1 }} damage to nearby enemies'


def test_damage_keyword_fallback_is_capped():
    html = 'Inflige ' + 'x' * 300
    result = extract_ratio(html)
    assert result.startswith('Inflige')
    assert len(result) == 120


def test_summary_fallback_truncates_with_ellipsis():
    text = 'Grants a shield that lasts a while and moves with you around the map ' * 3
    result = extract_ratio(text)
    assert result.endswith('…')
    assert len(result) == 101


def test_summary_fallback_short_text_untouched():
    assert extract_ratio('<b>Gains</b> a shield.') == 'Gains a shield.'


@pytest.mark.parametrize('html', ['', None, '<br><br>', 42])
def test_empty_descriptions_get_placeholder(html):
    assert extract_ratio(html) == SEE_DESCRIPTION


@pytest.mark.parametrize('html', ['<<<>>>', '(+ AP', '(+ 10% AP', '<scaleAP unclosed', '{{ e1 }}'])
def test_malformed_descriptions_never_raise(html):
    assert isinstance(extract_ratio(html), str)
