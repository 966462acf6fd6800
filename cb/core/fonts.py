import os
import requests
from cb.common.logger import log

GOOGLE_FONTS_URL = "https://www.googleapis.com/webfonts/v1/webfonts"
API_KEY_ENV = "COUNTERBLOCK_FONTS_API_KEY"


# Fetches up to `limit` Google Font families as select options ({"label": family, "value": family}). Any failure
# (network, bad status, unexpected payload) is logged and gives back an empty list, never an exception.
def fetch_font_options(api_key=None, limit=1000, timeout=10.0, session=None):
    api_key = api_key or os.getenv(API_KEY_ENV)
    if not api_key:
        log.info(f"No Google Fonts API key configured (set {API_KEY_ENV}), skipping font list fetch.")
        return []

    http = session or requests
    try:
        response = http.get(GOOGLE_FONTS_URL, params={"key": api_key}, timeout=timeout)
        response.raise_for_status()
        items = response.json()["items"][:limit]
        options = [{"label": font["family"], "value": font["family"]} for font in items]
    except (requests.RequestException, ValueError, KeyError, TypeError):
        log.warning("Error fetching Google Fonts, falling back to an empty font list.",exc_info=True)
        return []

    log.debug(f"Fetched {len(options)} Google Font families")
    return options
