"""
skins.json: every skin of every champion, with a splash art URL.

Splash URLs come from CommunityDragon (served without CORS restrictions,
unlike Data Dragon). CommunityDragon is keyed by the numeric champion key
(Aatrox = 266); a skin id is key * 1000 + skin number.

    /lol-game-data/assets/ASSETS/Characters/Aatrox/Skins/Skin01/aatroxsplashuncentered_1.jpg
    -> <cdragon>/plugins/rcp-be-lol-game-data/global/default/assets/characters/aatrox/skins/skin01/aatroxsplashuncentered_1.jpg

When CommunityDragon has nothing for a champion, its Data Dragon detail file
is used instead, with Data Dragon splash URLs.
"""
import time
import traceback

from ddragon_locales.config import resolve_version
from ddragon_locales.extractors.base import BaseExtractor
from ddragon_locales.fetcher import FetchError
from ddragon_locales.items import SkinItem
from ddragon_locales.text import collation_key

SKINS_FILENAME = 'skins.json'
GAME_DATA_PREFIX = '/lol-game-data/assets/'
PROGRESS_EVERY = 20


class SkinExtractor(BaseExtractor):
    name = 'skins'

    def __init__(self, settings, fetcher=None, sleep=time.sleep):
        super().__init__(settings, fetcher)
        self.sleep = sleep
        self.delay = settings.getfloat('DOWNLOAD_DELAY', 0.1)
        self.cdragon_base = settings.get('CDRAGON_BASE').rstrip('/')
        self.base_label = settings.get('SKIN_BASE_LABEL', 'Classique')

    def run(self):
        """
        Build and write skins.json for the default language.

        Raises:
            FetchError: the champion list itself could not be fetched
        """
        resolve_version(self.settings, self.fetcher)
        lang = self.settings.get('DEFAULT_LANGUAGE', 'en_US')

        self.logger.info(f'Fetching champion list [{lang}]...')
        champions = sorted(
            self.fetch_champion_list(lang).values(),
            key=lambda c: collation_key(c.get('id')),
        )
        self.logger.info(f'{len(champions)} champions found')

        skins = []
        for done, champ in enumerate(champions, 1):
            try:
                skins.extend(self.extract_champion(champ, lang))
            except Exception as e:
                self.logger.warning(f'Skipping {champ.get("id")}: {e}')
                self.logger.debug(traceback.format_exc())

            if done % PROGRESS_EVERY == 0 or done == len(champions):
                self.logger.info(f'[{done:3d}/{len(champions)}] {champ.get("id", "")} - {len(skins)} skins collected')

        skins = self.finalize(skins)
        path = self.write(SKINS_FILENAME, skins)
        self.stats['languages_written'] += 1

        from_cdragon = sum(1 for s in skins if 'communitydragon' in (s['imgUrl'] or ''))
        self.logger.info(f'{path}: {len(skins)} skins for {len(champions)} champions')
        self.logger.info(f'CommunityDragon URLs: {from_cdragon}, Data Dragon fallback: {len(skins) - from_cdragon}')
        return [path]

    def extract_champion(self, champ, lang):
        champ_id = champ.get('id')
        champ_key = champ.get('key')
        champ_name = champ.get('name') or champ_id

        # Rate limit against the CDN
        self.sleep(self.delay)

        cd_data = None
        if champ_key:
            url = f'{self.cdragon_base}/plugins/rcp-be-lol-game-data/global/default/v1/champions/{champ_key}.json'
            try:
                cd_data = self.fetcher.get_json(url)
            except FetchError as e:
                self.logger.warning(f'{champ_id}: CommunityDragon request failed ({e})')

        if cd_data is None:
            self.logger.warning(f'{champ_id} (key={champ_key}): no CommunityDragon JSON, using Data Dragon')
            return self.skins_from_ddragon(champ_id, champ_name, lang)

        return self.skins_from_cdragon(champ_id, champ_name, cd_data)

    def skins_from_cdragon(self, champ_id, champ_name, cd_data):
        skins = []
        for skin in cd_data.get('skins') or []:
            try:
                skin_num = int(skin.get('id')) % 1000
            except (TypeError, ValueError):
                self.logger.debug(f'{champ_id}: skin without numeric id: {skin.get("name")}')
                continue

            if skin.get('isBase'):
                name = f'{champ_name} {self.base_label}'
            else:
                name = skin.get('name') or f'{champ_name} Skin {skin_num}'

            img_url = (
                self.cdragon_asset_url(skin.get('uncenteredSplashPath'))
                or self.cdragon_asset_url(skin.get('splashPath'))
                or self.ddragon_splash_url(champ_id, skin_num)
            )
            skins.append(self._skin(champ_id, champ_name, skin_num, name, img_url))
        return skins

    def skins_from_ddragon(self, champ_id, champ_name, lang):
        data = self.fetcher.get_json(f'{self.ddragon_base}/data/{lang}/champion/{champ_id}.json')
        if not data:
            return []

        champ = (data.get('data') or {}).get(champ_id) or {}
        skins = []
        for skin in champ.get('skins') or []:
            try:
                skin_num = int(skin.get('num', 0))
            except (TypeError, ValueError):
                self.logger.debug(f'{champ_id}: skin without numeric num: {skin.get("name")}')
                continue
            name = skin.get('name')
            if not name or name == 'default':
                name = f'{champ_name} {self.base_label}'
            skins.append(self._skin(champ_id, champ_name, skin_num, name,
                                    self.ddragon_splash_url(champ_id, skin_num)))
        return skins

    def cdragon_asset_url(self, lol_path):
        if not lol_path:
            return None
        lower = lol_path.replace(GAME_DATA_PREFIX, '', 1).lower()
        return f'{self.cdragon_base}/plugins/rcp-be-lol-game-data/global/default/{lower}'

    def ddragon_splash_url(self, champ_id, skin_num):
        return f'{self.ddragon_base}/img/champion/splash/{champ_id}_{skin_num}.jpg'

    @staticmethod
    def finalize(skins):
        """Sort by (championId, skinNum); keep the first of each pair."""
        ordered = sorted(skins, key=lambda s: (collation_key(s['championId']), s['skinNum']))
        seen = set()
        unique = []
        for skin in ordered:
            key = (skin['championId'], skin['skinNum'])
            if key in seen:
                continue
            seen.add(key)
            unique.append(skin)
        return unique

    @staticmethod
    def _skin(champ_id, champ_name, skin_num, name, img_url):
        item = SkinItem()
        item['championId'] = champ_id
        item['championName'] = champ_name
        item['skinNum'] = skin_num
        item['name'] = name
        item['imgUrl'] = img_url
        return item
