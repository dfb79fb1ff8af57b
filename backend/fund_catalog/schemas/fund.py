"""Fund Schemas: Pydantic models for fund records and the endpoints that return them.

Invariants:
    - Fund documents one element of the persisted JSON array (camelCase names);
      routes return stored records as-is and only reference it for OpenAPI
    - FundPatch fields are all optional; only fields actually sent form the patch
    - FundPatch rejects unknown fields and explicit nulls
    - Numeric ranges are not enforced here (the edit form validates them)

Design Decisions:
    - extra="allow" on Fund: the documented shape is open to extra stored fields
    - model_dump(exclude_unset=True) is the patch: absent vs null stays distinguishable
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Fund(BaseModel):
    """Canonical fund record shape."""
    model_config = ConfigDict(extra="allow")

    name: str
    strategies: list[str] = Field(default_factory=list)
    geographies: list[str] = Field(default_factory=list)
    currency: str = ""
    fundSize: int | float = 0
    vintage: int | float = 0
    managers: list[str] = Field(default_factory=list)
    description: str = ""


class FundPatch(BaseModel):
    """Update payload: every field optional, unknown fields rejected."""
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    strategies: list[str] | None = None
    geographies: list[str] | None = None
    currency: str | None = None
    fundSize: int | float | None = None
    vintage: int | float | None = None
    managers: list[str] | None = None
    description: str | None = None

    @field_validator("*")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field may be omitted but not null")
        return v

    def to_patch(self) -> dict:
        return self.model_dump(exclude_unset=True)


class Pagination(BaseModel):
    page: int
    pageSize: int
    total: int
    totalPages: int


class FundListResponse(BaseModel):
    """One page of the list endpoint."""
    data: list[Fund]
    pagination: Pagination


class FilterMeta(BaseModel):
    """Distinct values for the filter controls."""
    strategies: list[str]
    geographies: list[str]
    currencies: list[str]
    managers: list[str]


class FundDeleted(BaseModel):
    message: str
    fund: Fund
