from __future__ import annotations

from threading import Lock
from typing import Any

from services.api.app.models.form import FormData

DEFAULT_FORM_DATA = FormData(
    firstName="John",
    lastName="Smith",
    email="john.smith@example.com",
    phone="(555) 123-4567",
    policyType="auto",
    policyNumber="POL-123456789",
    startDate="2023-01-15",
    endDate="2024-01-15",
    coverageAmount="100,000",
    deductible="1,000",
    coverageType="comprehensive",
    monthlyPremium="150",
)


class UnknownFieldError(ValueError):
    def __init__(self, fields: list[str]) -> None:
        super().__init__(f"Invalid fields: {', '.join(fields)}")
        self.fields = fields


class InMemoryFormStore:
    """Holds the single form being edited."""

    def __init__(self, initial: FormData = DEFAULT_FORM_DATA) -> None:
        self._initial = initial
        self._form = initial.model_copy()
        self._lock = Lock()

    def get(self) -> FormData:
        return self._form

    def update(self, updates: dict[str, Any]) -> FormData:
        if not updates:
            raise ValueError("No updates provided")

        unknown = [k for k in updates if k not in FormData.model_fields]
        if unknown:
            raise UnknownFieldError(unknown)

        with self._lock:
            merged = {**self._form.model_dump(), **updates}
            # Re-validate so a bad type never lands in the store.
            self._form = FormData.model_validate(merged)
            return self._form

    def reset(self) -> FormData:
        with self._lock:
            self._form = self._initial.model_copy()
            return self._form


store = InMemoryFormStore()
