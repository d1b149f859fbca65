"""Listing image downloader.

Fetches each listing's remote images over HTTP and writes them under
``<output_dir>/images`` with deterministic names
(``listing_01_img_01.jpg``). Relative paths of the saved files are appended
to ``Listing.local_image_paths``. A failed image never stops the others.
"""

import logging
from pathlib import Path
from typing import Optional

import httpx

from ..config import DEFAULT_USER_AGENT
from ..models.listing import Listing

logger = logging.getLogger(__name__)

IMAGES_DIR = "images"

# Responses this small are placeholders or broken images
DEFAULT_MIN_BYTES = 1000


def image_extension(url: str) -> str:
    """Guess a file extension from the image URL (defaults to .jpg)."""
    lower = url.lower()
    for ext in (".png", ".webp", ".gif"):
        if ext in lower:
            return ext
    return ".jpg"


def image_filename(listing_index: int, image_index: int, url: str) -> str:
    """File name for the n-th image of the n-th listing (both 1-based)."""
    return f"listing_{listing_index:02d}_img_{image_index:02d}{image_extension(url)}"


class ImageDownloader:
    """Download listing images to disk.

    Example:
        async with ImageDownloader() as downloader:
            saved = await downloader.download_all(listings, Path("artifacts"))
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: Optional[str] = None,
        min_bytes: int = DEFAULT_MIN_BYTES,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the downloader.

        Args:
            timeout: Per-request timeout in seconds
            user_agent: User-Agent header (desktop Chrome if None)
            min_bytes: Responses of this size or smaller are discarded
            transport: Custom httpx transport (used by tests)
        """
        self.timeout = timeout
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.min_bytes = min_bytes
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def fetch(self, url: str) -> Optional[bytes]:
        """Fetch image bytes, or None for errors and placeholder-sized bodies."""
        client = await self._get_client()
        try:
            response = await client.get(url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"Failed to download image {url}: {e}")
            return None

        content = response.content
        if len(content) <= self.min_bytes:
            logger.debug(f"Skipping tiny image ({len(content)} bytes): {url}")
            return None
        return content

    async def download_all(self, listings: list[Listing], output_dir: Path) -> int:
        """Download every listing's images into ``output_dir/images``.

        Args:
            listings: Listings in report order; their position sets file names
            output_dir: Root output directory

        Returns:
            Number of images saved
        """
        images_dir = Path(output_dir) / IMAGES_DIR
        images_dir.mkdir(parents=True, exist_ok=True)

        saved = 0
        for listing_index, listing in enumerate(listings, start=1):
            for image_index, url in enumerate(listing.image_urls, start=1):
                data = await self.fetch(url)
                if data is None:
                    continue

                filename = image_filename(listing_index, image_index, url)
                try:
                    (images_dir / filename).write_bytes(data)
                except OSError as e:
                    logger.debug(f"Failed to write {filename}: {e}")
                    continue

                listing.local_image_paths.append(f"{IMAGES_DIR}/{filename}")
                saved += 1
                logger.debug(f"Downloaded {url} -> {filename}")

        logger.info(f"Downloaded {saved} images to {images_dir}")
        return saved

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ImageDownloader":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
