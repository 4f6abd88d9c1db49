"""Tests for RegistrationSession.

Record updates replace a whole sub-record; untouched sub-records and
fields are preserved; the photo pair changes atomically.
"""

from app.schemas.registration import (
    SecurityVerificationUpdate,
    SellerProfileUpdate,
    Step,
    StoreDetailsUpdate,
)
from app.services.registration_session import RegistrationSession


class TestNewSession:
    """A new session is empty and on the profile step."""

    def test_initial_state(self, session):
        assert session.current_step is Step.PROFILE
        assert session.ai_response == ""
        assert session.is_ai_loading is False
        assert session.is_submitting is False
        assert session.data.profile.full_name == ""


class TestUpdates:
    """Tests for update_profile/store/verification."""

    def test_update_profile_sets_only_sent_fields(self, session):
        session.update_profile(SellerProfileUpdate(full_name="Budi"))
        session.update_profile(SellerProfileUpdate(phone="0812"))

        assert session.data.profile.full_name == "Budi"
        assert session.data.profile.phone == "0812"

    def test_explicit_empty_string_clears_field(self, session):
        session.update_profile(SellerProfileUpdate(full_name="Budi"))
        session.update_profile(SellerProfileUpdate(full_name=""))
        assert session.data.profile.full_name == ""

    def test_update_replaces_record_and_shares_untouched_parts(self, session):
        before = session.data

        after = session.update_store(StoreDetailsUpdate(store_name="Kopi Jaya"))

        assert after is session.data
        assert after is not before
        assert after.profile is before.profile
        assert after.verification is before.verification
        assert before.store.store_name == ""

    def test_update_verification_keeps_photo(self, session, ktp_photo):
        session.set_ktp_photo(ktp_photo, "data:image/png;base64,AA==")

        session.update_verification(SecurityVerificationUpdate(ktp_number="1671"))

        verification = session.data.verification
        assert verification.ktp_number == "1671"
        assert verification.ktp_photo == ktp_photo

    def test_updates_do_not_move_steps(self, session):
        session.update_profile(SellerProfileUpdate(full_name="Budi"))
        assert session.current_step is Step.PROFILE


class TestKtpPhoto:
    """Tests for set_ktp_photo() and clear_ktp_photo()."""

    def test_set_stores_photo_and_preview(self, session, ktp_photo):
        session.set_ktp_photo(ktp_photo, "data:image/png;base64,AA==")

        verification = session.data.verification
        assert verification.ktp_photo == ktp_photo
        assert verification.ktp_photo_preview == "data:image/png;base64,AA=="

    def test_clear_removes_both(self, session, ktp_photo):
        session.update_verification(SecurityVerificationUpdate(ktp_number="1671"))
        session.set_ktp_photo(ktp_photo, "data:image/png;base64,AA==")

        session.clear_ktp_photo()

        verification = session.data.verification
        assert verification.ktp_photo is None
        assert verification.ktp_photo_preview is None
        assert verification.ktp_number == "1671"

    def test_clear_without_photo_is_harmless(self, session):
        session.clear_ktp_photo()
        assert session.data.verification.ktp_photo is None


class TestAiResponse:
    """Tests for clear_ai_response()."""

    def test_clear_dismisses_answer_only(self, filled_session):
        filled_session.advance()
        filled_session.ai_response = "Siapkan KTP Anda."
        before = filled_session.data

        filled_session.clear_ai_response()

        assert filled_session.ai_response == ""
        assert filled_session.data is before
        assert filled_session.current_step is Step.STORE

    def test_clear_without_answer_is_harmless(self, session):
        session.clear_ai_response()
        assert session.ai_response == ""


class TestNavigation:
    """Navigation ignores whether fields are filled in."""

    def test_advance_with_empty_record(self, session):
        assert session.advance() is Step.STORE
        assert session.advance() is Step.VERIFICATION
        assert session.advance() is Step.SUMMARY
        assert session.advance() is Step.SUMMARY

    def test_retreat_keeps_data(self, filled_session):
        filled_session.advance()
        filled_session.retreat()
        assert filled_session.current_step is Step.PROFILE
        assert filled_session.data.store.store_name == "Kopi Jaya Makmur"

    def test_sessions_are_independent(self, filled_session):
        assert RegistrationSession().data.profile.full_name == ""
