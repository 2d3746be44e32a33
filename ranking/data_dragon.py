"""
Data Dragon loader.
Riot's static CDN serves one champion.json per patch at
https://ddragon.leagueoflegends.com/cdn/<version>/data/<locale>/champion.json
No authentication required.

The champion mapping is fetched once and cached for the process lifetime.
Any failure is logged and surfaces as an empty population — the scoring code
then simply has nothing to rank.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

# ── Config ─────────────────────────────────────────────────────────────────────
DATA_DRAGON_VERSION = "15.24.1"
DEFAULT_LOCALE      = "en_US"
BASE_URL            = "https://ddragon.leagueoflegends.com/cdn"
TIMEOUT             = 5.0   # seconds
RETRIES             = 2

logger = logging.getLogger(__name__)

# (version, locale) -> {champion_id: champion}
_champions_cache: dict = {}
_session: Optional[requests.Session] = None


def _get_session() -> requests.Session:
    global _session
    if _session is None:
        retry = Retry(total=RETRIES, backoff_factor=0.3,
                      status_forcelist=(500, 502, 503, 504))
        _session = requests.Session()
        _session.mount("https://", HTTPAdapter(max_retries=retry))
    return _session


def _get(url: str) -> Optional[dict]:
    """Raw GET of a JSON document."""
    try:
        r = _get_session().get(url, timeout=TIMEOUT)
        r.raise_for_status()
        return r.json()
    except requests.exceptions.ConnectionError:
        logger.warning(f"Data Dragon not reachable: {url}")
        return None
    except requests.exceptions.Timeout:
        logger.warning("Data Dragon timeout")
        return None
    except requests.exceptions.RequestException as e:
        logger.warning(f"Data Dragon error: {e}")
        return None
    except ValueError as e:
        logger.warning(f"Data Dragon returned invalid JSON: {e}")
        return None


def _extract_champions(payload) -> dict:
    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, dict):
        logger.warning("champion.json has no 'data' mapping")
        return {}
    return data


# ── Loading ────────────────────────────────────────────────────────────────────

def champion_json_url(version: str = DATA_DRAGON_VERSION,
                      locale: str = DEFAULT_LOCALE) -> str:
    return f"{BASE_URL}/{version}/data/{locale}/champion.json"


def load_champions(version: str = DATA_DRAGON_VERSION,
                   locale: str = DEFAULT_LOCALE) -> dict:
    """
    Returns {champion_id: champion} for the given patch.
    Empty dict on failure (not cached, so a later call retries).
    """
    key = (version, locale)
    if key in _champions_cache:
        logger.debug(f"Champion cache hit for {version}/{locale}")
        return _champions_cache[key]

    payload = _get(champion_json_url(version, locale))
    if payload is None:
        return {}

    champions = _extract_champions(payload)
    if champions:
        _champions_cache[key] = champions
        logger.info(f"Loaded {len(champions)} champions ({version}/{locale})")
    return champions


def load_champions_from_file(path) -> dict:
    """Same contract as load_champions(), from a local champion.json."""
    try:
        with open(Path(path), encoding="utf-8") as f:
            payload = json.load(f)
    except OSError as e:
        logger.warning(f"Cannot read dataset {path}: {e}")
        return {}
    except ValueError as e:
        logger.warning(f"Invalid JSON in {path}: {e}")
        return {}
    return _extract_champions(payload)


def clear_cache():
    _champions_cache.clear()


# ── Asset URLs ─────────────────────────────────────────────────────────────────

def champion_icon_url(champion_id: str,
                      version: str = DATA_DRAGON_VERSION) -> str:
    return f"{BASE_URL}/{version}/img/champion/{champion_id}.png"


def champion_splash_url(champion_id: str, skin_num: int = 0) -> str:
    return f"{BASE_URL}/img/champion/splash/{champion_id}_{skin_num}.jpg"


def champion_loading_url(champion_id: str, skin_num: int = 0) -> str:
    return f"{BASE_URL}/img/champion/loading/{champion_id}_{skin_num}.jpg"


# ── Demo / test ───────────────────────────────────────────────────────────────
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    champs = load_champions()
    print(f"{len(champs)} champions loaded")
    for cid in list(champs)[:5]:
        print(cid, champs[cid].get("tags"), champion_icon_url(cid))
