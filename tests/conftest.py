"""
Test configuration and fixtures for Withdraw Receipts

Every test gets a fresh record store and application instance, so records
never leak between tests.

Usage:
    pytest tests/
"""

from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from withdraw_receipts.core.config import Settings
from withdraw_receipts.main import create_app
from withdraw_receipts.repos.withdrawal_repo import RecordStore
from withdraw_receipts.services.receipts import ReceiptService

ADMIN_KEY = "test-admin-key"
FIXED_NOW = datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        admin_key=ADMIN_KEY,
        brand_name="Test Desk",
        public_base_url="",
        log_level="INFO",
    )


@pytest.fixture
def record_store() -> RecordStore:
    return RecordStore()


@pytest.fixture
def receipt_service(record_store: RecordStore) -> ReceiptService:
    """Service with a fixed clock."""
    return ReceiptService(record_store, clock=lambda: FIXED_NOW)


@pytest.fixture
def test_app(test_settings: Settings, record_store: RecordStore) -> FastAPI:
    return create_app(settings=test_settings, store=record_store)


@pytest.fixture
def client(test_app: FastAPI) -> TestClient:
    return TestClient(test_app)


@pytest.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def valid_payload() -> dict:
    return {
        "chain": "bitcoin",
        "address": "1ABC",
        "amount": "2.5",
        "publicCode": "XYZ",
        "requirementConfirmed": True,
    }


@pytest.fixture
def admin_key() -> str:
    return ADMIN_KEY


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
