"""
Project settings for ddragon_locales.
"""
BOT_NAME = 'ddragon_locales'

# Data Dragon patch to extract. 'latest' resolves through api/versions.json.
DDRAGON_VERSION = '16.3.1'
DDRAGON_CDN = 'https://ddragon.leagueoflegends.com/cdn'
DDRAGON_VERSIONS_URL = 'https://ddragon.leagueoflegends.com/api/versions.json'

# CommunityDragon serves splash art without CORS restrictions
CDRAGON_BASE = 'https://raw.communitydragon.org/latest'

LANGUAGES = ['fr_FR', 'en_US', 'es_ES', 'de_DE', 'ko_KR']
# Skin names are only written in this language
DEFAULT_LANGUAGE = 'en_US'

# Output directory for the generated JSON files
OUTPUT_DIR = 'locales'

# Language-keyed regex tables (None = bundled data/patterns.json)
PATTERNS_FILE = None

# Appended to the champion name for base skins
SKIN_BASE_LABEL = 'Classique'

# Fetch retries: attempt N waits FETCH_RETRY_DELAY * N seconds before the next one.
# A 404 is never retried.
FETCH_MAX_ATTEMPTS = 3
FETCH_RETRY_DELAY = 0.5

# Delay before each per-champion request in the skin extractor
DOWNLOAD_DELAY = 0.1
DOWNLOAD_TIMEOUT = 30

USER_AGENT = 'ddragon-locales/1.0 (+https://ddragon.leagueoflegends.com)'

# Logging
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'
