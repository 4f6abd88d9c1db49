"""Tests for the registration summary composer."""

import json

import pytest

from app.providers.errors import ContentFilterError, TransientError
from app.providers.llm.base import TaskType
from app.providers.llm.mock_adapter import MockLLMProvider
from app.schemas.registration import (
    RegistrationData,
    SecurityVerificationUpdate,
    StoreDetailsUpdate,
)
from app.services.registration_summary import (
    format_fallback_summary,
    generate_professional_summary,
)
from tests.conftest import MOCK_SUMMARY

_FILLED_SUMMARY = """*Pendaftaran Mitra Penjual Baru - Petanikopiku*

*Profil Penjual:*
- Nama: Budi Santoso
- No. HP: 6281234567890
- Domisili: Lahat, Sumatera Selatan

*Rincian Toko:*
- Nama Toko: Kopi Jaya Makmur
- Alamat Toko: Pasar Lahat Blok A
- Estimasi Penjualan: 1000 kg/tahun

*Verifikasi:*
- No KTP: 1671234567890001"""


class TestFormatFallbackSummary:
    """Tests for format_fallback_summary()."""

    def test_filled_record(self, filled_session):
        assert format_fallback_summary(filled_session.data) == _FILLED_SUMMARY

    def test_empty_record_keeps_labels(self):
        summary = format_fallback_summary(RegistrationData())

        assert "- Nama: \n" in summary
        assert "- Domisili: , \n" in summary
        assert "- Estimasi Penjualan:  kg/tahun" in summary
        assert summary.endswith("- No KTP:")

    def test_result_is_trimmed(self, session):
        session.update_verification(SecurityVerificationUpdate(ktp_number="1671  "))

        summary = format_fallback_summary(session.data)

        assert summary == summary.strip()
        assert summary.endswith("- No KTP: 1671")

    def test_email_and_address_not_included(self, filled_session):
        summary = format_fallback_summary(filled_session.data)
        assert "budi@example.com" not in summary
        assert "Jl. Merdeka" not in summary

    def test_braces_in_values_are_literal(self, session):
        session.update_store(StoreDetailsUpdate(store_name="{full_name}"))
        assert "- Nama Toko: {full_name}" in format_fallback_summary(session.data)


class TestGenerateProfessionalSummary:
    """Tests for generate_professional_summary()."""

    @pytest.mark.asyncio
    async def test_returns_model_summary(self, filled_session, mock_llm):
        summary = await generate_professional_summary(filled_session.data)

        assert summary == MOCK_SUMMARY
        mock_llm.assert_called_with_task(TaskType.REGISTRATION_SUMMARY)
        assert mock_llm.calls[0]["kwargs"]["temperature"] == 0.5

    @pytest.mark.asyncio
    async def test_prompt_contains_json_snapshot(
        self, filled_session, ktp_photo, mock_llm
    ):
        filled_session.set_ktp_photo(ktp_photo, "data:image/png;base64,AA==")

        await generate_professional_summary(filled_session.data)

        prompt = mock_llm.calls[0]["messages"][0].content
        assert "Informasi Toko" in prompt
        details = prompt.split("with these details: ", 1)[1].split("}.\n", 1)[0]
        payload = json.loads(details + "}")
        assert payload["store"]["store_name"] == "Kopi Jaya Makmur"
        assert payload["verification"] == {
            "ktp_number": "1671234567890001",
            "has_ktp_photo": True,
        }
        assert "base64" not in prompt

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error", [TransientError("503"), ContentFilterError("blocked")]
    )
    async def test_provider_error_returns_none(self, filled_session, error):
        provider = MockLLMProvider()
        provider.set_error(TaskType.REGISTRATION_SUMMARY, error)

        summary = await generate_professional_summary(filled_session.data, provider)
        assert summary is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, ""])
    async def test_empty_answer_returns_none(self, filled_session, content):
        provider = MockLLMProvider({TaskType.REGISTRATION_SUMMARY: content})
        summary = await generate_professional_summary(filled_session.data, provider)
        assert summary is None
