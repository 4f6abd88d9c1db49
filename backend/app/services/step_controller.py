"""Onboarding step controller.

Linear state machine over the four onboarding steps:

    profile → store → verification → summary

advance() and retreat() move one step and clamp at both ends. Transitions are
driven by explicit user action only; field completeness never blocks a move.
"""

from dataclasses import dataclass

from app.schemas.registration import Step

# WHY: Ordered list defines the navigation state machine.
STEP_ORDER: list[Step] = [
    Step.PROFILE,
    Step.STORE,
    Step.VERIFICATION,
    Step.SUMMARY,
]

# Data-entry steps shown in the progress stepper (summary has no badge)
STEP_LABELS: dict[Step, str] = {
    Step.PROFILE: "Profil Penjual",
    Step.STORE: "Rincian Toko",
    Step.VERIFICATION: "Verifikasi Keamanan",
}


@dataclass(frozen=True)
class StepProgress:
    """Stepper badge state for one data-entry step."""

    step: Step
    label: str
    is_active: bool
    is_completed: bool


def get_next_step(current_step: Step) -> Step | None:
    """Get the next step in the onboarding flow.

    Args:
        current_step: Current step.

    Returns:
        Next step, or None if already at summary.
    """
    index = STEP_ORDER.index(current_step)
    if index < len(STEP_ORDER) - 1:
        return STEP_ORDER[index + 1]
    return None


def get_previous_step(current_step: Step) -> Step | None:
    """Get the previous step in the onboarding flow.

    Args:
        current_step: Current step.

    Returns:
        Previous step, or None if already at profile.
    """
    index = STEP_ORDER.index(current_step)
    if index > 0:
        return STEP_ORDER[index - 1]
    return None


class StepController:
    """Tracks and moves the current onboarding step."""

    def __init__(self, initial: Step = Step.PROFILE) -> None:
        self.current = initial

    @property
    def is_first(self) -> bool:
        """True on the profile step (no Back button)."""
        return self.current is STEP_ORDER[0]

    @property
    def is_last(self) -> bool:
        """True on the summary step (Submit instead of Next)."""
        return self.current is STEP_ORDER[-1]

    def advance(self) -> Step:
        """Move forward one step. No-op at summary.

        Returns:
            The current step after the move.
        """
        next_step = get_next_step(self.current)
        if next_step is not None:
            self.current = next_step
        return self.current

    def retreat(self) -> Step:
        """Move back one step. No-op at profile.

        Returns:
            The current step after the move.
        """
        previous_step = get_previous_step(self.current)
        if previous_step is not None:
            self.current = previous_step
        return self.current

    def progress(self) -> list[StepProgress]:
        """Build stepper state for the data-entry steps.

        A step is completed once the current step lies after it; on summary
        every data-entry step is completed.
        """
        current_index = STEP_ORDER.index(self.current)
        return [
            StepProgress(
                step=step,
                label=label,
                is_active=step is self.current,
                is_completed=current_index > STEP_ORDER.index(step),
            )
            for step, label in STEP_LABELS.items()
        ]
