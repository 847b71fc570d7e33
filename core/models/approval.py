# =============================================================================
# core/models/approval.py - Approval Configuration
# =============================================================================
# Policy knob for the review approval quorum. Supplied to the review service
# at construction (see app.config.Settings.approval_configuration).
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class ApprovalConfiguration(BaseModel):
    """Minimum number of distinct approvals before a review counts as approved."""

    model_config = ConfigDict(frozen=True)

    min_count: int = Field(
        ...,
        ge=0,
        description="Approval quorum threshold"
    )
