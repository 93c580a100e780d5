from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FormData(BaseModel):
    """The insurance form the API edits. Keys match the command field ids."""

    model_config = ConfigDict(extra="forbid")

    firstName: str
    lastName: str
    email: str
    phone: str
    policyType: str
    policyNumber: str
    startDate: str
    endDate: str
    coverageAmount: str
    deductible: str
    coverageType: str
    monthlyPremium: str
    companyId: int | None = None
