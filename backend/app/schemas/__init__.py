"""Pydantic schemas for the registration record and API payloads."""

from app.schemas.registration import (
    KtpPhoto,
    RegistrationData,
    RegistrationSnapshot,
    SecurityVerification,
    SecurityVerificationUpdate,
    SellerProfile,
    SellerProfileUpdate,
    Step,
    StoreDetails,
    StoreDetailsUpdate,
    VerificationSnapshot,
)

__all__ = [
    # Record
    "KtpPhoto",
    "RegistrationData",
    "SecurityVerification",
    "SellerProfile",
    "Step",
    "StoreDetails",
    # Patches
    "SecurityVerificationUpdate",
    "SellerProfileUpdate",
    "StoreDetailsUpdate",
    # Snapshots
    "RegistrationSnapshot",
    "VerificationSnapshot",
]
