"""Tests for the command-line runner."""

import asyncio
import json
from pathlib import Path

import httpx
import pytest
from conftest import BrokenSource, FakeSession, StubSource, card

from studiospace import cli
from studiospace.collectors import BrowserSessionError, ListingCollector
from studiospace.config import Settings
from studiospace.media import ImageDownloader

SEARCH = "https://stub.example/search"


def _downloader() -> ImageDownloader:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"\x00" * 5000))
    return ImageDownloader(transport=transport)


def _collector(settings: Settings, session: FakeSession, sources=None) -> ListingCollector:
    sources = sources or [StubSource(settings, urls=[SEARCH])]
    return ListingCollector(sources=sources, settings=settings, session_factory=lambda: session)


class TestRunSearch:
    """Test the search, download and export run."""

    def test_exports_listings(self, settings: Settings, tmp_path: Path):
        """Found listings are trimmed, downloaded and written to listings.json."""
        session = FakeSession(pages={
            SEARCH: [
                card("Creative warehouse studio", "/l/1", price="$2,000/mo",
                     image="https://i.example/1.jpg"),
                card("Photo studio loft", "/l/2"),
                card("Industrial unit downtown", "/l/3"),
            ],
        })

        code = asyncio.run(cli.run_search(
            settings,
            postal_code="L5A 4E6",
            output_dir=tmp_path,
            max_listings=2,
            collector=_collector(settings, session),
            downloader=_downloader(),
        ))

        assert code == 0
        data = json.loads((tmp_path / "listings.json").read_text(encoding="utf-8"))
        assert [item["listing_url"] for item in data] == [
            "https://stub.example/l/1",
            "https://stub.example/l/2",
        ]
        assert data[0]["rental_cost"] == "$2,000/mo"
        assert data[0]["local_image_paths"] == ["images/listing_01_img_01.jpg"]
        assert "address_is_placeholder" not in data[0]
        assert (tmp_path / "images" / "listing_01_img_01.jpg").exists()

    def test_nothing_found(self, settings: Settings, tmp_path: Path):
        """An empty search exits with 1 and writes nothing."""
        code = asyncio.run(cli.run_search(
            settings,
            postal_code="L5A 4E6",
            output_dir=tmp_path,
            max_listings=20,
            collector=_collector(settings, FakeSession()),
            downloader=_downloader(),
        ))

        assert code == 1
        assert not (tmp_path / "listings.json").exists()

    def test_browser_failure(self, settings: Settings, tmp_path: Path):
        """A browser session failure exits with 1."""
        sources = [BrokenSource(settings, BrowserSessionError("browser", "crashed"))]

        code = asyncio.run(cli.run_search(
            settings,
            postal_code="L5A 4E6",
            output_dir=tmp_path,
            max_listings=20,
            collector=_collector(settings, FakeSession(), sources),
            downloader=_downloader(),
        ))

        assert code == 1


class TestMain:
    """Test argument handling."""

    def test_requires_command(self):
        """Running without a subcommand is a usage error."""
        with pytest.raises(SystemExit) as exc:
            cli.main([])
        assert exc.value.code == 2

    @pytest.mark.parametrize("value", ["0", "-1", "many"])
    def test_max_listings_must_be_positive(self, value: str):
        """Listing counts below 1 are a usage error."""
        with pytest.raises(SystemExit) as exc:
            cli.main(["search", "-m", value])
        assert exc.value.code == 2

    def test_positive_int(self):
        """Counts of 1 and above are accepted as integers."""
        assert cli.positive_int("1") == 1
        assert cli.positive_int("25") == 25

    def test_search_arguments(self, monkeypatch, tmp_path: Path):
        """Options reach the search run and its exit code is returned."""
        calls = {}

        async def fake_run_search(settings, postal_code, output_dir, max_listings):
            calls.update(
                settings=settings,
                postal_code=postal_code,
                output_dir=output_dir,
                max_listings=max_listings,
            )
            return 0

        monkeypatch.setattr(cli, "run_search", fake_run_search)
        monkeypatch.setattr(cli, "setup_logging", lambda verbose=False: None)

        with pytest.raises(SystemExit) as exc:
            cli.main(["search", "-p", "M5V 2T6", "-o", str(tmp_path), "-m", "5", "--parallel"])

        assert exc.value.code == 0
        assert calls["postal_code"] == "M5V 2T6"
        assert calls["output_dir"] == tmp_path
        assert calls["max_listings"] == 5
        assert calls["settings"].parallel_sources
        assert calls["settings"].artifacts_path == tmp_path
