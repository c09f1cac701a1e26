"""
Shared fixtures for Truck Fault Tracker backend tests.
"""
import os
import sys

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Keep tests independent of a developer's local .env
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("VIN_REPORT_CHECK_DIGIT", "true")

# WMI 1XK (Kenworth), check digit "0", year code "K" (2019)
KENWORTH_VIN = "1XKDP4TX0KJ123456"


@pytest.fixture
def kenworth_vin():
    return KENWORTH_VIN


@pytest_asyncio.fixture
async def client():
    """HTTP client bound to the ASGI app, no network."""
    from app.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
