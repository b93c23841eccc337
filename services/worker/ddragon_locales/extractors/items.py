import traceback

from ddragon_locales.extractors.base import BaseExtractor
from ddragon_locales.fetcher import FetchError
from ddragon_locales.items import ShopItem
from ddragon_locales.patterns import load_patterns
from ddragon_locales.stats import (
    clean_flavor_text,
    merge_stats,
    parse_stats_from_description,
    parse_stats_from_object,
)

UNKNOWN_COMPONENT = 'Unknown'


def _item_order(item_id):
    """Numeric ids ascending, then any non-numeric keys."""
    item_id = str(item_id)
    if item_id.isdigit():
        return (0, int(item_id), '')
    return (1, 0, item_id)


class ItemExtractor(BaseExtractor):
    """
    items_<lang>.json: purchasable shop items with their stat map and build
    components.

    Skipped: unpurchasable items, Ornn upgrades (requiredAlly), free items,
    repeated names, and items with no stats at all (consumables, trinkets).
    """
    name = 'items'

    def __init__(self, settings, fetcher=None):
        super().__init__(settings, fetcher)
        self.patterns = load_patterns(settings.get('PATTERNS_FILE'))

    def extract_language(self, lang):
        url = f'{self.ddragon_base}/data/{lang}/item.json'
        data = self.fetcher.get_json(url)
        if data is None:
            raise FetchError(url, 'not found')
        return self.normalize(data.get('data') or {}, lang)

    def normalize(self, items_data, lang):
        items = []
        seen_names = set()

        for item_id in sorted(items_data, key=_item_order):
            raw = items_data[item_id]
            try:
                gold = raw.get('gold') or {}
                if not gold.get('purchasable') or raw.get('requiredAlly'):
                    continue
                price = gold.get('total') or 0
                if price <= 0:
                    continue

                name = raw.get('name') or ''
                name_key = name.lower().strip()
                if name_key in seen_names:
                    continue
                seen_names.add(name_key)

                stats = self.item_stats(raw, lang)
                if not stats:
                    continue

                item = ShopItem()
                item['id'] = int(item_id) if str(item_id).isdigit() else item_id
                item['name'] = name
                item['price'] = price
                item['desc'] = clean_flavor_text(raw.get('description'), lang, self.patterns)
                item['stats'] = stats
                item['components'] = self.components(raw, items_data)
                item['img'] = f'{self.ddragon_base}/img/item/{item_id}.png'
                items.append(item)
            except Exception as e:
                self.logger.warning(f'[{lang}] Skipping item {item_id}: {e}')
                self.logger.debug(traceback.format_exc())

        return items

    def item_stats(self, raw, lang):
        """item.stats first (authoritative), description fills the gaps."""
        return merge_stats(
            parse_stats_from_object(raw.get('stats')),
            parse_stats_from_description(raw.get('description'), lang, self.patterns),
        )

    def components(self, raw, items_data):
        components = []
        for comp_id in raw.get('from') or []:
            comp = items_data.get(str(comp_id))
            if comp:
                name = comp.get('name') or UNKNOWN_COMPONENT
                price = (comp.get('gold') or {}).get('total') or 0
            else:
                name = UNKNOWN_COMPONENT
                price = 0
            components.append({
                'name': name,
                'price': price,
                'img': f'{self.ddragon_base}/img/item/{comp_id}.png',
            })
        return components
