"""Tests for the headless browser session."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from grant_catalog.browser import BrowserSession


def mock_playwright(launch_side_effect=None):
    """Build a fake async_playwright() chain."""
    browser = MagicMock()
    browser.close = AsyncMock()

    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(
        return_value=browser,
        side_effect=launch_side_effect,
    )
    playwright.stop = AsyncMock()

    manager = MagicMock()
    manager.start = AsyncMock(return_value=playwright)
    return manager, playwright, browser


class TestBrowserSession:
    """Tests for BrowserSession context manager."""

    @pytest.mark.asyncio
    async def test_launch_and_close(self):
        """Test browser is launched headless and released on exit."""
        manager, playwright, browser = mock_playwright()

        with patch("grant_catalog.browser.async_playwright", return_value=manager):
            async with BrowserSession() as session:
                assert session.is_open

        playwright.chromium.launch.assert_awaited_once_with(
            headless=True,
            args=["--no-sandbox"],
        )
        browser.close.assert_awaited_once()
        playwright.stop.assert_awaited_once()
        assert not session.is_open

    @pytest.mark.asyncio
    async def test_released_on_error(self):
        """Test browser is released when the body raises."""
        manager, playwright, browser = mock_playwright()

        with patch("grant_catalog.browser.async_playwright", return_value=manager):
            with pytest.raises(RuntimeError):
                async with BrowserSession():
                    raise RuntimeError("boom")

        browser.close.assert_awaited_once()
        playwright.stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_launch_failure_stops_playwright(self):
        """Test playwright is stopped when launch fails."""
        manager, playwright, _ = mock_playwright(
            launch_side_effect=RuntimeError("no chromium"),
        )

        with patch("grant_catalog.browser.async_playwright", return_value=manager):
            with pytest.raises(RuntimeError):
                async with BrowserSession():
                    pass

        playwright.stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_disabled_session(self):
        """Test nothing is launched when disabled."""
        with patch("grant_catalog.browser.async_playwright") as factory:
            async with BrowserSession(enabled=False) as session:
                assert not session.is_open

        factory.assert_not_called()

    @pytest.mark.asyncio
    async def test_custom_args(self):
        """Test headed launch with custom flags."""
        manager, playwright, _ = mock_playwright()

        with patch("grant_catalog.browser.async_playwright", return_value=manager):
            async with BrowserSession(headless=False, args=["--disable-gpu"]):
                pass

        playwright.chromium.launch.assert_awaited_once_with(
            headless=False,
            args=["--disable-gpu"],
        )
