from ddragon_locales.extractors.abilities import AbilityExtractor
from ddragon_locales.extractors.champions import ChampionExtractor
from ddragon_locales.extractors.items import ItemExtractor
from ddragon_locales.extractors.skins import SkinExtractor

# Run order when no names are given
EXTRACTORS = {
    ChampionExtractor.name: ChampionExtractor,
    ItemExtractor.name: ItemExtractor,
    AbilityExtractor.name: AbilityExtractor,
    SkinExtractor.name: SkinExtractor,
}
