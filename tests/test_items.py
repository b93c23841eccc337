import json

from conftest import DD_BASE

from ddragon_locales.extractors import ItemExtractor

ITEMS_EN = {
    'type': 'item',
    'data': {
        '3078': {
            'name': 'Trinity Force',
            'description': (
                '<mainText><stats><attention>36</attention> Attack Damage<br>'
                '<attention>30%</attention> Attack Speed<br>'
                '<attention>333</attention> Health<br>'
                '<attention>15</attention> Ability Haste</stats><br><br>'
                '<passive>Spellblade</passive><br>After using an Ability, your next Attack deals bonus damage.'
                '</mainText>'
            ),
            'from': ['3057', '3051', '9999'],
            'gold': {'base': 333, 'purchasable': True, 'total': 3333, 'sell': 2333},
            'stats': {'FlatPhysicalDamageMod': 36, 'PercentAttackSpeedMod': 0.3, 'FlatHPPoolMod': 300},
        },
        '1001': {
            'name': 'Boots',
            'description': '<mainText><stats><attention>25</attention> Move Speed</stats></mainText>',
            'gold': {'base': 300, 'purchasable': True, 'total': 300, 'sell': 210},
            'stats': {'FlatMovementSpeedMod': 25},
        },
        '3057': {
            'name': 'Sheen',
            'description': '<mainText><stats></stats><br><passive>Spellblade</passive><br>Empowers your next Attack.</mainText>',
            'gold': {'base': 900, 'purchasable': True, 'total': 900, 'sell': 630},
            'stats': {},
        },
        '3051': {
            'name': 'Hearthbound Axe',
            'description': '<mainText><stats><attention>15</attention> Attack Damage<br><attention>20%</attention> Attack Speed</stats></mainText>',
            'gold': {'base': 300, 'purchasable': True, 'total': 1000, 'sell': 700},
            'stats': {'FlatPhysicalDamageMod': 15, 'PercentAttackSpeedMod': 0.2},
        },
        '2003': {
            'name': 'Health Potion',
            'description': '<mainText><active>Consume:</active> Restores health over time.</mainText>',
            'gold': {'base': 50, 'purchasable': True, 'total': 50, 'sell': 20},
            'stats': {},
        },
        '7000': {
            'name': 'Sandshrike\'s Claw',
            'description': '<mainText><stats><attention>70</attention> Attack Damage</stats></mainText>',
            'gold': {'base': 0, 'purchasable': True, 'total': 3300, 'sell': 2310},
            'requiredAlly': 'Ornn',
            'stats': {'FlatPhysicalDamageMod': 70},
        },
        '3340': {
            'name': 'Stealth Ward',
            'description': '<mainText><stats></stats></mainText>',
            'gold': {'base': 0, 'purchasable': True, 'total': 0, 'sell': 0},
            'stats': {},
        },
        '3400': {
            'name': 'Your Cut',
            'description': '<mainText><stats><attention>10</attention> Armor</stats></mainText>',
            'gold': {'base': 0, 'purchasable': False, 'total': 0, 'sell': 0},
            'stats': {},
        },
        '223078': {
            'name': 'Trinity Force ',
            'description': '<mainText><stats><attention>36</attention> Attack Damage</stats></mainText>',
            'gold': {'base': 333, 'purchasable': True, 'total': 3333, 'sell': 2333},
            'stats': {'FlatPhysicalDamageMod': 36},
        },
    },
}


def _items(settings, make_fetcher):
    extractor = ItemExtractor(settings, fetcher=make_fetcher({}))
    return extractor.normalize(ITEMS_EN['data'], 'en_US')


def test_filters_and_orders_by_numeric_id(settings, make_fetcher):
    items = _items(settings, make_fetcher)

    # Sheen and Health Potion have no stats, 7000 is an Ornn upgrade,
    # 3340 is free, 3400 unpurchasable, 223078 repeats a name
    assert [i['id'] for i in items] == [1001, 3051, 3078]


def test_structured_stats_win_over_description(settings, make_fetcher):
    trinity = _items(settings, make_fetcher)[-1]

    assert trinity['stats']['HP'] == {'value': 300, 'icon': '❤️', 'percent': False}
    assert trinity['stats']['Atk Speed']['value'] == '30%'
    assert trinity['stats']['AH'] == {'value': 15, 'icon': '⏱️', 'percent': False}
    assert list(trinity['stats']) == ['AD', 'Atk Speed', 'HP', 'AH']


def test_components_and_unknown_fallback(settings, make_fetcher):
    trinity = _items(settings, make_fetcher)[-1]

    assert trinity['components'] == [
        {'name': 'Sheen', 'price': 900, 'img': f'{DD_BASE}/img/item/3057.png'},
        {'name': 'Hearthbound Axe', 'price': 1000, 'img': f'{DD_BASE}/img/item/3051.png'},
        {'name': 'Unknown', 'price': 0, 'img': f'{DD_BASE}/img/item/9999.png'},
    ]


def test_record_fields(settings, make_fetcher):
    trinity = _items(settings, make_fetcher)[-1]

    assert trinity['name'] == 'Trinity Force'
    assert trinity['price'] == 3333
    assert trinity['desc'] == 'Spellblade After using an Ability, your next Attack deals bonus damage.'
    assert trinity['img'] == f'{DD_BASE}/img/item/3078.png'


def test_malformed_item_is_skipped_not_fatal(settings, make_fetcher):
    data = dict(ITEMS_EN['data'])
    data['1002'] = {'name': 'Broken', 'gold': {'purchasable': True, 'total': 'lots'}}
    extractor = ItemExtractor(settings, fetcher=make_fetcher({}))

    items = extractor.normalize(data, 'en_US')

    assert [i['id'] for i in items] == [1001, 3051, 3078]


def test_item_output_is_idempotent(settings, make_fetcher, tmp_path):
    fetcher = make_fetcher({f'{DD_BASE}/data/en_US/item.json': ITEMS_EN})
    path = tmp_path / 'locales' / 'items_en_US.json'

    ItemExtractor(settings, fetcher=fetcher).run()
    first = path.read_bytes()
    ItemExtractor(settings, fetcher=fetcher).run()

    assert path.read_bytes() == first
    written = json.loads(first.decode('utf-8'))
    for item in written:
        assert len(item['stats']) == len(set(item['stats']))
