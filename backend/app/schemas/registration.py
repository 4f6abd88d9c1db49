"""Seller registration record schemas.

The registration record is made of three sub-forms (seller profile, store
details, identity verification) collected over the onboarding steps.

All record models are frozen. The session replaces a whole sub-record when a
patch arrives and builds a new aggregate that shares the untouched
sub-records, so holding a reference to an old record is always safe.

Field content is never validated: empty or malformed input flows through to
the summary unmodified. The only enforced invariant is that the KTP photo and
its preview are set or cleared together.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# Steps
# =============================================================================


class Step(str, Enum):
    """Onboarding steps in navigation order."""

    PROFILE = "profile"
    STORE = "store"
    VERIFICATION = "verification"
    SUMMARY = "summary"


# =============================================================================
# Record Models
# =============================================================================


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class SellerProfile(_FrozenModel):
    """Seller contact and domicile information ("Profil Penjual")."""

    full_name: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    province: str = ""
    regency: str = ""


class StoreDetails(_FrozenModel):
    """Coffee store information ("Rincian Toko").

    Attributes:
        store_name: Store display name.
        store_address: Operational address of the store.
        annual_sales: Estimated sales in kg per year, kept as typed text.
    """

    store_name: str = ""
    store_address: str = ""
    annual_sales: str = ""


class KtpPhoto(_FrozenModel):
    """Binary handle for an uploaded KTP image.

    The raw bytes are kept out of repr() so they never end up in logs.
    """

    filename: str
    content_type: str
    content: bytes = Field(repr=False)

    @property
    def size_bytes(self) -> int:
        """Size of the image content in bytes."""
        return len(self.content)


class SecurityVerification(_FrozenModel):
    """Identity verification ("Verifikasi Keamanan").

    Attributes:
        ktp_number: NIK from the KTP. Intended to be 16 digits; not enforced.
        ktp_photo: Uploaded KTP image, or None.
        ktp_photo_preview: data: URL rendering of ktp_photo, or None.
    """

    ktp_number: str = ""
    ktp_photo: KtpPhoto | None = None
    ktp_photo_preview: str | None = None

    @model_validator(mode="after")
    def check_photo_pair(self) -> "SecurityVerification":
        """Photo and preview must be both present or both absent."""
        if (self.ktp_photo is None) != (self.ktp_photo_preview is None):
            msg = "ktp_photo and ktp_photo_preview must be set or cleared together"
            raise ValueError(msg)
        return self


class RegistrationData(_FrozenModel):
    """Aggregate registration record owned by a RegistrationSession."""

    profile: SellerProfile = Field(default_factory=SellerProfile)
    store: StoreDetails = Field(default_factory=StoreDetails)
    verification: SecurityVerification = Field(default_factory=SecurityVerification)


def merge_fields(record: _FrozenModel, fields: dict[str, Any]) -> Any:
    """Build a new sub-record with ``fields`` merged over ``record``.

    Goes through model_validate (not model_copy) so record validators run on
    the merged result.

    Args:
        record: Current sub-record.
        fields: Field values to replace.

    Returns:
        A new instance of the same model type.
    """
    return type(record).model_validate({**dict(record), **fields})


# =============================================================================
# Patch Models
# =============================================================================

# WHY no None: only fields the client actually sent are merged
# (model_dump(exclude_unset=True)), so an omitted field keeps its value.


class SellerProfileUpdate(BaseModel):
    """Partial update for SellerProfile."""

    full_name: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    province: str = ""
    regency: str = ""


class StoreDetailsUpdate(BaseModel):
    """Partial update for StoreDetails."""

    store_name: str = ""
    store_address: str = ""
    annual_sales: str = ""


class SecurityVerificationUpdate(BaseModel):
    """Partial update for SecurityVerification.

    The photo pair is not patchable here; it changes only through media
    capture (set) or clear_ktp_photo (remove).
    """

    ktp_number: str = ""


# =============================================================================
# Snapshots
# =============================================================================


class VerificationSnapshot(BaseModel):
    """JSON-safe view of SecurityVerification without image data."""

    ktp_number: str
    has_ktp_photo: bool

    @classmethod
    def from_verification(
        cls, verification: SecurityVerification
    ) -> "VerificationSnapshot":
        """Build a snapshot from a verification sub-record."""
        return cls(
            ktp_number=verification.ktp_number,
            has_ktp_photo=verification.ktp_photo is not None,
        )


class RegistrationSnapshot(BaseModel):
    """Typed, JSON-safe snapshot of the full record.

    This is the payload sent to the summary composer and returned by the API.
    """

    profile: SellerProfile
    store: StoreDetails
    verification: VerificationSnapshot

    @classmethod
    def from_data(cls, data: RegistrationData) -> "RegistrationSnapshot":
        """Build a snapshot from the registration record."""
        return cls(
            profile=data.profile,
            store=data.store,
            verification=VerificationSnapshot.from_verification(data.verification),
        )
