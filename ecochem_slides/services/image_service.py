"""
Placeholder image fetching for the visual panel
"""
from io import BytesIO
from typing import MutableMapping, Optional

import requests
from PIL import Image

from ecochem_slides import config
from ecochem_slides.utils.logger import get_logger

logger = get_logger(__name__)


class ImageService:
    """Best-effort image download. Failures return None and are only logged."""

    def __init__(self, timeout: float = config.IMAGE_TIMEOUT, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, url: str) -> Optional[bytes]:
        try:
            logger.info(f"Downloading image: {url}")
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()

            # Make sure we got an actual picture, not an error page
            with Image.open(BytesIO(response.content)) as img:
                img.verify()

            logger.info(f"Image downloaded ({len(response.content)} bytes)")
            return response.content
        except requests.exceptions.RequestException as e:
            logger.warning(f"Image request failed for {url}: {e}")
        except (OSError, SyntaxError) as e:
            # Pillow raises UnidentifiedImageError (an OSError) for non-image payloads
            logger.warning(f"Image payload is not a valid picture for {url}: {e}")
        return None

    def fetch_cached(self, url: str, cache: MutableMapping[str, Optional[bytes]]) -> Optional[bytes]:
        """
        Fetch at most once per ``cache``. Failures are remembered as None so
        the slide keeps its placeholder instead of retrying on every rerun.
        The UI passes a per-session dict.
        """
        if url not in cache:
            cache[url] = self.fetch(url)
        return cache[url]
