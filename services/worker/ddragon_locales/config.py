"""
Builds the Settings value handed to every extractor.

Order of precedence (lowest first):
- ddragon_locales.settings
- environment variables (a .env file is loaded by main.py)
- explicit overrides
"""
import os

from scrapy.settings import Settings

SETTINGS_MODULE = 'ddragon_locales.settings'

# Environment variable -> setting name
ENV_OVERRIDES = {
    'DDRAGON_VERSION': 'DDRAGON_VERSION',
    'DDRAGON_LANGUAGES': 'LANGUAGES',
    'DDRAGON_DEFAULT_LANGUAGE': 'DEFAULT_LANGUAGE',
    'DDRAGON_OUTPUT_DIR': 'OUTPUT_DIR',
    'DDRAGON_PATTERNS_FILE': 'PATTERNS_FILE',
    'LOG_LEVEL': 'LOG_LEVEL',
}


def get_settings(overrides=None, environ=None):
    """
    Load project settings, apply environment and explicit overrides.

    Args:
        overrides: Mapping of setting name -> value (highest priority)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        scrapy.settings.Settings
    """
    if environ is None:
        environ = os.environ

    settings = Settings()
    settings.setmodule(SETTINGS_MODULE, priority='project')

    for env_name, setting_name in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if not value:
            continue
        if setting_name == 'LANGUAGES':
            # "fr_FR, en_US" -> ['fr_FR', 'en_US']
            value = [lang.strip() for lang in value.split(',') if lang.strip()]
        settings.set(setting_name, value, priority='cmdline')

    if overrides:
        settings.update(overrides, priority='cmdline')

    return settings


def resolve_version(settings, fetcher):
    """Return the configured Data Dragon version, resolving 'latest' through versions.json."""
    version = settings.get('DDRAGON_VERSION')
    if version != 'latest':
        return version

    versions = fetcher.get_json(settings.get('DDRAGON_VERSIONS_URL'))
    if not versions:
        raise ValueError('Data Dragon versions.json returned no versions')
    # First entry is the newest patch
    settings.set('DDRAGON_VERSION', versions[0], priority='cmdline')
    return versions[0]


def ddragon_base(settings):
    """Versioned CDN root, e.g. https://ddragon.leagueoflegends.com/cdn/16.3.1"""
    return f"{settings.get('DDRAGON_CDN').rstrip('/')}/{settings.get('DDRAGON_VERSION')}"
