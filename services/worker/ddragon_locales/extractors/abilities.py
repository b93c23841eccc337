"""
abilities_<lang>.json: passive + Q/W/E/R of every champion.

Data Dragon has no structured ratios, so `ratio` is pulled from the
description text (see ratios.extract_ratio) and may need manual touch-ups.
"""
import traceback

from ddragon_locales.extractors.base import BaseExtractor
from ddragon_locales.items import AbilityItem
from ddragon_locales.ratios import extract_ratio
from ddragon_locales.text import clean_html

# spells[0..3] -> key; a fifth spell would become 'S4'
SPELL_KEYS = ['Q', 'W', 'E', 'R']
PASSIVE_KEY = 'P'


class AbilityExtractor(BaseExtractor):
    name = 'abilities'

    def extract_language(self, lang):
        champion_ids = list(self.fetch_champion_list(lang))
        self.logger.info(f'[{lang}] {len(champion_ids)} champions to process')

        abilities = []
        for champ_id in champion_ids:
            try:
                # The per-champion file is the only one with spell data
                data = self.fetcher.get_json(f'{self.ddragon_base}/data/{lang}/champion/{champ_id}.json')
                if data is None:
                    self.logger.warning(f'[{lang}] {champ_id} not found')
                    continue
                champ = (data.get('data') or {}).get(champ_id)
                if not champ:
                    self.logger.warning(f'[{lang}] {champ_id} missing from its own file')
                    continue
                abilities.extend(self.normalize(champ_id, champ))
            except Exception as e:
                self.logger.warning(f'[{lang}] Error on {champ_id}: {e}')
                self.logger.debug(traceback.format_exc())

        return abilities

    def normalize(self, champ_id, champ):
        abilities = []

        passive = champ.get('passive')
        if passive:
            abilities.append(self._ability(champ_id, passive, PASSIVE_KEY, 'passive'))

        for index, spell in enumerate(champ.get('spells') or []):
            key = SPELL_KEYS[index] if index < len(SPELL_KEYS) else f'S{index}'
            abilities.append(self._ability(champ_id, spell, key, 'spell'))

        return abilities

    def _ability(self, champ_id, spell, key, image_folder):
        description = spell.get('description')
        image_file = (spell.get('image') or {}).get('full')

        item = AbilityItem()
        item['championId'] = champ_id
        item['name'] = spell.get('name') or ''
        item['key'] = key
        item['ratio'] = extract_ratio(description)
        item['rawDesc'] = clean_html(description)
        item['img'] = f'{self.ddragon_base}/img/{image_folder}/{image_file}' if image_file else None
        return item
