"""Onboarding wizard steps and progress arithmetic."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OnboardingStep:
    """One step of the client onboarding wizard."""

    number: int
    column: str
    name: str

    @property
    def completed_at_column(self) -> str:
        return f"step_{self.number}_completed_at"


ONBOARDING_STEPS: tuple[OnboardingStep, ...] = (
    OnboardingStep(1, "step_1_personal_info", "personal_info"),
    OnboardingStep(2, "step_2_current_address", "current_address"),
    OnboardingStep(3, "step_3_address_history", "address_history"),
    OnboardingStep(4, "step_4_employment", "employment"),
    OnboardingStep(5, "step_5_documents", "documents"),
    OnboardingStep(6, "step_6_authorizations", "authorizations"),
    OnboardingStep(7, "step_7_signature", "signature"),
)

TOTAL_ONBOARDING_STEPS = len(ONBOARDING_STEPS)


def get_onboarding_step(number: int) -> OnboardingStep:
    """
    Look up a wizard step by its 1-based number.

    Raises:
        ValueError: If the number is outside 1..7
    """
    if not 1 <= number <= TOTAL_ONBOARDING_STEPS:
        raise ValueError(f"Step must be between 1 and {TOTAL_ONBOARDING_STEPS}")
    return ONBOARDING_STEPS[number - 1]


def onboarding_percent(steps_completed: int, onboarding_completed: bool = False) -> int:
    """
    Percentage of the wizard a client has finished, rounded down.

    Completed onboarding always reports 100, whatever the step flags say.
    """
    if onboarding_completed:
        return 100
    steps_completed = max(0, min(steps_completed, TOTAL_ONBOARDING_STEPS))
    return steps_completed * 100 // TOTAL_ONBOARDING_STEPS
