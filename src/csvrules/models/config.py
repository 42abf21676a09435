"""Run configuration shared by the engine and the CSV front ends."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ValidatorConfig(BaseModel):
    """Options for a single validation run.

    ``delimiter`` is only read by the CSV collaborators; the engine uses
    ``has_header`` for row numbering and ``fail_fast`` for early termination.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    delimiter: str = Field(default=",", min_length=1, description="CSV field delimiter")
    has_header: bool = Field(
        default=True, alias="hasHeader", description="First CSV record is a header row"
    )
    fail_fast: bool = Field(
        default=False, alias="failFast", description="Stop at the first finding"
    )
