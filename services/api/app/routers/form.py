from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, HTTPException
from pydantic import ValidationError
from services.api.app.models.form import FormData
from services.api.app.services.form_store import store

router = APIRouter()


@router.get("/api/form-data", response_model=FormData)
def get_form_data() -> FormData:
    return store.get()


@router.patch("/api/form-data", response_model=FormData)
def update_form_data(updates: dict[str, Any] = Body(...)) -> FormData:
    try:
        return store.update(updates)
    except ValidationError as e:
        raise HTTPException(
            status_code=400,
            detail={"message": "Validation error", "errors": e.errors(include_url=False)},
        ) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
