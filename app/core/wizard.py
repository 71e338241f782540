"""Wizard progress transitions.

The wizard runs basics -> market -> product -> financial -> results. Progress
is an explicit value passed in and returned; persistence lives in
``app.db.wizard_progress``.
"""

from app.core.errors import UnknownStepError
from app.core.logging import get_logger
from app.core.schemas_wizard import WizardProgress, WizardProgressResponse

logger = get_logger(__name__)

STEPS: tuple[str, ...] = ("basics", "market", "product", "financial", "results")


def validate_step(step: str) -> str:
    if step not in STEPS:
        raise UnknownStepError(step)
    return step


def new_progress(project_id: int) -> WizardProgress:
    return WizardProgress(project_id=project_id, current_step=STEPS[0], completed_steps=[])


def next_open_step(completed: list[str], after: str | None = None) -> str | None:
    """First step not yet completed, searching from just after ``after``."""
    start = STEPS.index(after) + 1 if after else 0
    for step in STEPS[start:]:
        if step not in completed:
            return step
    for step in STEPS[:start]:
        if step not in completed:
            return step
    return None


def complete_step(progress: WizardProgress, step: str) -> WizardProgress:
    """
    Mark a step complete and advance the current step.

    Completing an already-completed step leaves the completed list unchanged
    but still moves the cursor past it, which is how the wizard behaves when
    a founder edits an earlier step and continues.

    Args:
        progress: Current progress
        step: Step that was just submitted

    Returns:
        New WizardProgress; the input is not modified

    Raises:
        UnknownStepError: If ``step`` is not a wizard step
    """
    validate_step(step)

    completed = list(progress.completed_steps)
    if step not in completed:
        completed.append(step)
    # Keep completed steps in flow order regardless of submit order
    completed.sort(key=STEPS.index)

    current = next_open_step(completed, after=step) or STEPS[-1]

    return WizardProgress(
        project_id=progress.project_id,
        current_step=current,
        completed_steps=completed,
        updated_at=progress.updated_at,
    )


def describe(progress: WizardProgress) -> WizardProgressResponse:
    """Attach derived completion flags for API responses."""
    completed = list(progress.completed_steps)
    return WizardProgressResponse(
        **progress.model_dump(),
        is_complete=all(step in completed for step in STEPS),
        next_step=next_open_step(completed),
    )


def load_progress(project_id: int) -> WizardProgress:
    """Stored progress for a project, or a fresh one at ``basics``."""
    from app.db.wizard_progress import get_wizard_progress

    return get_wizard_progress(project_id) or new_progress(project_id)


def record_step(project_id: int, step: str) -> WizardProgress:
    """Load, advance and store progress for a submitted step."""
    from app.db.wizard_progress import save_wizard_progress

    progress = complete_step(load_progress(project_id), step)
    return save_wizard_progress(progress)


def record_step_quietly(project_id: int, step: str) -> None:
    """
    Best-effort ``record_step`` for use after a step's data is stored.

    The step data is already persisted at this point; a progress write
    failure is logged and the request still succeeds.
    """
    try:
        record_step(project_id, step)
    except Exception as e:
        logger.warning(
            f"Failed to record wizard step {step} for project {project_id}: {e}",
            extra={"project_id": project_id},
        )
