"""Registration summary composer.

Produces the text that is sent to the Petanikopiku admin over WhatsApp.
Gemini writes a formatted summary when it can; otherwise a fixed local
template is used so submission always has a message to send.
"""

import logging

from app.providers import ProviderError, factory
from app.providers.llm.base import LLMMessage, LLMProvider, TaskType
from app.schemas.registration import RegistrationData, RegistrationSnapshot

logger = logging.getLogger(__name__)

_SUMMARY_TEMPERATURE = 0.5

SUMMARY_PROMPT_TEMPLATE = """Generate a professional registration summary for a coffee store owner (penjual) with these details: {details}.
The summary will be sent to an admin via WhatsApp.
Format it neatly with emojis and clear sections. Use formal Indonesian. Use the term 'Informasi Toko'."""

FALLBACK_SUMMARY_TEMPLATE = """*Pendaftaran Mitra Penjual Baru - Petanikopiku*

*Profil Penjual:*
- Nama: {full_name}
- No. HP: {phone}
- Domisili: {regency}, {province}

*Rincian Toko:*
- Nama Toko: {store_name}
- Alamat Toko: {store_address}
- Estimasi Penjualan: {annual_sales} kg/tahun

*Verifikasi:*
- No KTP: {ktp_number}"""


def format_fallback_summary(data: RegistrationData) -> str:
    """Render the local summary template.

    Field values are substituted verbatim; empty fields leave their labels
    in place. Surrounding whitespace is trimmed from the result.

    Args:
        data: Registration record.

    Returns:
        The filled-in, trimmed template.
    """
    profile = data.profile
    store = data.store
    # Braces inside field values are not re-interpreted by format()
    return FALLBACK_SUMMARY_TEMPLATE.format(
        full_name=profile.full_name,
        phone=profile.phone,
        regency=profile.regency,
        province=profile.province,
        store_name=store.store_name,
        store_address=store.store_address,
        annual_sales=store.annual_sales,
        ktp_number=data.verification.ktp_number,
    ).strip()


async def generate_professional_summary(
    data: RegistrationData,
    provider: LLMProvider | None = None,
) -> str | None:
    """Ask Gemini for a formatted registration summary.

    Args:
        data: Registration record; sent as a typed snapshot without photo
            bytes.
        provider: LLM provider; defaults to the factory singleton.

    Returns:
        Summary text, or None if the provider failed or returned nothing.
    """
    details = RegistrationSnapshot.from_data(data).model_dump_json()

    try:
        llm = provider or factory.get_llm_provider()
        response = await llm.complete(
            messages=[
                LLMMessage(
                    role="user",
                    content=SUMMARY_PROMPT_TEMPLATE.format(details=details),
                ),
            ],
            task=TaskType.REGISTRATION_SUMMARY,
            temperature=_SUMMARY_TEMPERATURE,
        )
    except ProviderError as e:
        logger.warning("Summary generation failed (%s), using template", e)
        return None

    return response.content or None
