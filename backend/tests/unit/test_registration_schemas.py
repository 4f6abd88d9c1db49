"""Tests for the registration record schemas."""

import pytest
from pydantic import ValidationError

from app.schemas.registration import (
    KtpPhoto,
    RegistrationData,
    RegistrationSnapshot,
    SecurityVerification,
    SellerProfile,
    merge_fields,
)


@pytest.fixture
def photo():
    return KtpPhoto(filename="ktp.jpg", content_type="image/jpeg", content=b"abc")


class TestRegistrationDataDefaults:
    """A new record is entirely empty."""

    def test_all_text_fields_empty(self):
        data = RegistrationData()
        assert data.profile == SellerProfile()
        assert data.profile.full_name == ""
        assert data.store.annual_sales == ""
        assert data.verification.ktp_number == ""

    def test_no_photo(self):
        verification = RegistrationData().verification
        assert verification.ktp_photo is None
        assert verification.ktp_photo_preview is None

    def test_records_are_frozen(self):
        """Records are replaced, never mutated in place."""
        with pytest.raises(ValidationError):
            RegistrationData().profile.full_name = "Budi"


class TestPhotoPairInvariant:
    """Photo and preview are set or cleared together."""

    def test_photo_without_preview_rejected(self, photo):
        with pytest.raises(ValidationError, match="set or cleared together"):
            SecurityVerification(ktp_photo=photo)

    def test_preview_without_photo_rejected(self):
        with pytest.raises(ValidationError):
            SecurityVerification(ktp_photo_preview="data:image/jpeg;base64,YWJj")

    def test_both_present_accepted(self, photo):
        verification = SecurityVerification(
            ktp_photo=photo, ktp_photo_preview="data:image/jpeg;base64,YWJj"
        )
        assert verification.ktp_photo.size_bytes == 3

    def test_merge_fields_runs_validator(self, photo):
        """A merge that breaks the pair is rejected."""
        with pytest.raises(ValidationError):
            merge_fields(SecurityVerification(), {"ktp_photo": photo})


class TestMergeFields:
    """merge_fields() builds a new record."""

    def test_merges_over_existing_values(self):
        profile = SellerProfile(full_name="Budi", phone="0812")
        merged = merge_fields(profile, {"phone": "0813"})
        assert merged == SellerProfile(full_name="Budi", phone="0813")
        assert profile.phone == "0812"

    def test_values_kept_verbatim(self):
        """No trimming or validation of field content."""
        merged = merge_fields(SellerProfile(), {"email": "  not-an-email "})
        assert merged.email == "  not-an-email "


class TestKtpPhoto:
    """KtpPhoto keeps bytes out of its repr."""

    def test_repr_hides_content(self, photo):
        assert "abc" not in repr(photo)
        assert "ktp.jpg" in repr(photo)


class TestRegistrationSnapshot:
    """The snapshot is JSON-safe and carries no image data."""

    def test_snapshot_reports_photo_presence_only(self, photo):
        data = RegistrationData(
            verification=SecurityVerification(
                ktp_number="1671",
                ktp_photo=photo,
                ktp_photo_preview="data:image/jpeg;base64,YWJj",
            )
        )

        snapshot = RegistrationSnapshot.from_data(data)
        dumped = snapshot.model_dump_json()

        assert snapshot.verification.has_ktp_photo is True
        assert snapshot.verification.ktp_number == "1671"
        assert "base64" not in dumped
        assert "ktp.jpg" not in dumped

    def test_snapshot_of_empty_record(self):
        snapshot = RegistrationSnapshot.from_data(RegistrationData())
        assert snapshot.verification.has_ktp_photo is False
        assert snapshot.store.store_name == ""
