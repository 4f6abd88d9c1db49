"""Onboarding API response schemas."""

from pydantic import BaseModel

from app.schemas.registration import RegistrationSnapshot, Step
from app.services.registration_session import RegistrationSession
from app.services.whatsapp_dispatch import DispatchResult


class StepProgressSchema(BaseModel):
    """Stepper badge for one data-entry step."""

    step: Step
    label: str
    is_active: bool
    is_completed: bool


class SessionState(BaseModel):
    """Everything the form front end renders.

    Attributes:
        current_step: Step being shown.
        can_go_back: False on the first step.
        can_submit: True on the summary step.
        progress: Stepper badges for profile, store and verification.
        registration: Snapshot of the record (no photo bytes).
        ktp_photo_preview: data: URL preview of the KTP photo, if any.
        ai_response: Latest assistant answer ("" before the first question).
        is_ai_loading: An assistant call is running.
        is_submitting: A submission is running.
    """

    current_step: Step
    can_go_back: bool
    can_submit: bool
    progress: list[StepProgressSchema]
    registration: RegistrationSnapshot
    ktp_photo_preview: str | None
    ai_response: str
    is_ai_loading: bool
    is_submitting: bool

    @classmethod
    def from_session(cls, session: RegistrationSession) -> "SessionState":
        """Build the API view of a session."""
        return cls(
            current_step=session.current_step,
            can_go_back=not session.steps.is_first,
            can_submit=session.steps.is_last,
            progress=[
                StepProgressSchema(
                    step=p.step,
                    label=p.label,
                    is_active=p.is_active,
                    is_completed=p.is_completed,
                )
                for p in session.steps.progress()
            ],
            registration=RegistrationSnapshot.from_data(session.data),
            ktp_photo_preview=session.data.verification.ktp_photo_preview,
            ai_response=session.ai_response,
            is_ai_loading=session.is_ai_loading,
            is_submitting=session.is_submitting,
        )


class AssistantResponse(BaseModel):
    """Answer from the seller assistant (or its fallback)."""

    response: str


class SubmitResponse(BaseModel):
    """Result of submitting the registration.

    The front end opens whatsapp_url in a new tab.
    """

    message: str
    whatsapp_url: str
    used_fallback: bool

    @classmethod
    def from_result(cls, result: DispatchResult) -> "SubmitResponse":
        """Build the API view of a dispatch result."""
        return cls(
            message=result.message,
            whatsapp_url=result.whatsapp_url,
            used_fallback=result.used_fallback,
        )
