import traceback

from ddragon_locales.extractors.base import BaseExtractor
from ddragon_locales.items import ChampionItem
from ddragon_locales.text import collation_key


class ChampionExtractor(BaseExtractor):
    """champions_<lang>.json: localized names and titles, sorted by name."""
    name = 'champions'

    def extract_language(self, lang):
        return self.normalize(self.fetch_champion_list(lang))

    def normalize(self, champions_data):
        champions = []
        for key, champ in champions_data.items():
            try:
                champ_id = str(champ.get('id') or key)
                item = ChampionItem()
                item['id'] = champ_id
                item['name'] = str(champ.get('name') or champ_id)
                item['title'] = str(champ.get('title') or '')
                item['img'] = f'{self.ddragon_base}/img/champion/{champ_id}.png'
                champions.append(item)
            except Exception as e:
                self.logger.warning(f'Skipping champion {key}: {e}')
                self.logger.debug(traceback.format_exc())

        # Alphabetical by localized name, for autocomplete
        champions.sort(key=lambda c: collation_key(c['name']))
        return champions
