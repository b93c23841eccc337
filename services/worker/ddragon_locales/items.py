"""
Scrapy items for the normalized records written to locales/*.json.
Field names are the JSON keys the front-end reads.
"""
import scrapy


class ChampionItem(scrapy.Item):
    """One champion in one language (champions_<lang>.json)."""
    id = scrapy.Field()  # Internal English key, e.g. "MissFortune"
    name = scrapy.Field()  # Localized display name
    title = scrapy.Field()  # Localized title
    img = scrapy.Field()


class AbilityItem(scrapy.Item):
    """One passive or spell of one champion in one language (abilities_<lang>.json)."""
    championId = scrapy.Field()
    name = scrapy.Field()
    key = scrapy.Field()  # P / Q / W / E / R
    ratio = scrapy.Field()  # Scaling text pulled from the description
    rawDesc = scrapy.Field()
    img = scrapy.Field()


class ShopItem(scrapy.Item):
    """One purchasable item in one language (items_<lang>.json)."""
    id = scrapy.Field()  # int
    name = scrapy.Field()
    price = scrapy.Field()  # Total gold cost
    desc = scrapy.Field()  # Passive/active text, stat lines removed
    stats = scrapy.Field()  # label -> {value, icon, percent}
    components = scrapy.Field()  # [{name, price, img}]
    img = scrapy.Field()


class SkinItem(scrapy.Item):
    """One skin of one champion (skins.json, default language only)."""
    championId = scrapy.Field()
    championName = scrapy.Field()
    skinNum = scrapy.Field()
    name = scrapy.Field()
    imgUrl = scrapy.Field()
