"""In-memory seller registration session.

A RegistrationSession owns everything the onboarding form mutates:

- the registration record (replaced wholesale on every update)
- the step controller
- the latest assistant answer
- the two busy flags (is_ai_loading, is_submitting)

The session is created empty, passed explicitly to the services that act on
it, and discarded on reset. Nothing is persisted.

Busy flags are advisory: they tell the front end a remote call is running but
do not prevent a second call from starting.
"""

import logging

from app.schemas.registration import (
    KtpPhoto,
    RegistrationData,
    SecurityVerificationUpdate,
    SellerProfileUpdate,
    Step,
    StoreDetailsUpdate,
    merge_fields,
)
from app.services.step_controller import StepController

logger = logging.getLogger(__name__)


class RegistrationSession:
    """Owner of one seller's in-progress registration."""

    def __init__(self) -> None:
        self.data = RegistrationData()
        self.steps = StepController()
        self.ai_response = ""
        self.is_ai_loading = False
        self.is_submitting = False

    @property
    def current_step(self) -> Step:
        """The step the seller is currently on."""
        return self.steps.current

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def advance(self) -> Step:
        """Go to the next step, regardless of what has been filled in."""
        return self.steps.advance()

    def retreat(self) -> Step:
        """Go back one step."""
        return self.steps.retreat()

    # -------------------------------------------------------------------------
    # Record updates
    # -------------------------------------------------------------------------

    def update_profile(self, update: SellerProfileUpdate) -> RegistrationData:
        """Merge a partial profile patch into the record.

        Args:
            update: Patch; only fields explicitly set are applied.

        Returns:
            The new registration record.
        """
        fields = update.model_dump(exclude_unset=True)
        profile = merge_fields(self.data.profile, fields)
        self.data = self.data.model_copy(update={"profile": profile})
        return self.data

    def update_store(self, update: StoreDetailsUpdate) -> RegistrationData:
        """Merge a partial store patch into the record."""
        fields = update.model_dump(exclude_unset=True)
        store = merge_fields(self.data.store, fields)
        self.data = self.data.model_copy(update={"store": store})
        return self.data

    def update_verification(
        self, update: SecurityVerificationUpdate
    ) -> RegistrationData:
        """Merge a partial verification patch (KTP number) into the record."""
        fields = update.model_dump(exclude_unset=True)
        verification = merge_fields(self.data.verification, fields)
        self.data = self.data.model_copy(update={"verification": verification})
        return self.data

    def set_ktp_photo(self, photo: KtpPhoto, preview: str) -> RegistrationData:
        """Replace the KTP photo and its preview in one record replacement.

        Args:
            photo: Uploaded image.
            preview: data: URL rendering of the image.

        Returns:
            The new registration record.
        """
        verification = merge_fields(
            self.data.verification,
            {"ktp_photo": photo, "ktp_photo_preview": preview},
        )
        self.data = self.data.model_copy(update={"verification": verification})
        logger.info(
            "KTP photo set (%s, %d bytes)", photo.content_type, photo.size_bytes
        )
        return self.data

    def clear_ktp_photo(self) -> RegistrationData:
        """Remove the KTP photo and its preview together."""
        verification = merge_fields(
            self.data.verification,
            {"ktp_photo": None, "ktp_photo_preview": None},
        )
        self.data = self.data.model_copy(update={"verification": verification})
        return self.data

    # -------------------------------------------------------------------------
    # Assistant
    # -------------------------------------------------------------------------

    def clear_ai_response(self) -> None:
        """Dismiss the assistant answer. The record and step are untouched."""
        self.ai_response = ""
