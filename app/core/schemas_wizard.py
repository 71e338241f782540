"""Pydantic schemas for wizard progress."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.core.schemas_common import CamelModel

WizardStep = Literal["basics", "market", "product", "financial", "results"]


class WizardProgress(CamelModel):
    """Where a founder is in the evaluation wizard for one project."""

    project_id: int
    current_step: WizardStep = "basics"
    completed_steps: list[WizardStep] = Field(default_factory=list)
    updated_at: datetime | None = None


class WizardProgressResponse(WizardProgress):
    """Wizard progress plus derived flags."""

    is_complete: bool = False
    next_step: WizardStep | None = None
