"""Shared test fixtures."""

import os

# Rate limiter state is process-wide; keep it off so API tests stay independent.
# Must be set before app.core.config is imported.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from collections.abc import AsyncGenerator, Iterator  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.main import create_app  # noqa: E402
from app.providers import factory  # noqa: E402
from app.providers.llm.base import TaskType  # noqa: E402
from app.providers.llm.mock_adapter import MockLLMProvider  # noqa: E402
from app.schemas.registration import (  # noqa: E402
    KtpPhoto,
    SecurityVerificationUpdate,
    SellerProfileUpdate,
    StoreDetailsUpdate,
)
from app.services.registration_session import RegistrationSession  # noqa: E402

# Smallest valid PNG header bytes; enough for base64 preview tests
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"

MOCK_SUMMARY = "📋 *Informasi Toko* - Kopi Jaya Makmur"
MOCK_ASSISTANCE = "Halo Mitra Penjual! Siapkan KTP dan alamat toko Anda."


@pytest.fixture
def mock_llm() -> Iterator[MockLLMProvider]:
    """Provide a MockLLMProvider injected into the factory singleton.

    Yields:
        MockLLMProvider with canned assistant and summary answers.
    """
    mock = MockLLMProvider(
        {
            TaskType.SELLER_ASSISTANCE: MOCK_ASSISTANCE,
            TaskType.REGISTRATION_SUMMARY: MOCK_SUMMARY,
        }
    )

    factory._llm_provider = mock

    yield mock

    factory.reset_providers()


@pytest.fixture
def session() -> RegistrationSession:
    """Fresh, empty onboarding session."""
    return RegistrationSession()


@pytest.fixture
def ktp_photo() -> KtpPhoto:
    """A small PNG KTP photo."""
    return KtpPhoto(filename="ktp.png", content_type="image/png", content=PNG_BYTES)


@pytest.fixture
def filled_session(session: RegistrationSession) -> RegistrationSession:
    """Session with every text field filled in."""
    session.update_profile(
        SellerProfileUpdate(
            full_name="Budi Santoso",
            phone="6281234567890",
            email="budi@example.com",
            address="Jl. Merdeka No. 1",
            province="Sumatera Selatan",
            regency="Lahat",
        )
    )
    session.update_store(
        StoreDetailsUpdate(
            store_name="Kopi Jaya Makmur",
            store_address="Pasar Lahat Blok A",
            annual_sales="1000",
        )
    )
    session.update_verification(
        SecurityVerificationUpdate(ktp_number="1671234567890001")
    )
    return session


@pytest.fixture
def app() -> FastAPI:
    """Create test application instance with its own session."""
    return create_app()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
