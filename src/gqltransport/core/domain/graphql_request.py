from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from gqltransport.core.interfaces.model_bases import DomainModel


class RequestEnvelope(DomainModel):
    """Decoded ``{query, operationName, variables}`` request payload.

    Unknown keys in the JSON body are ignored. ``variables`` and
    ``extensions`` default to empty mappings, and an explicit ``null`` is
    treated the same as an absent key.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    query: str = Field(min_length=1)
    operation_name: str | None = Field(default=None, alias="operationName")
    variables: dict[str, Any] = Field(default_factory=dict)
    extensions: dict[str, Any] = Field(default_factory=dict)

    @field_validator("variables", "extensions", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("operation_name")
    @classmethod
    def _blank_operation_name(cls, v: str | None) -> str | None:
        # An empty operationName selects the only operation, same as absent.
        return v or None
