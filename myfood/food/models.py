# -*- coding: utf-8 -*-
"""Food — Pydantic models for the REST API payloads."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """Envelope of every API response; a non-empty `error` is an application failure."""

    error: str = ""
    data: Any = None


class FoodListItem(BaseModel):
    key: str
    name: str
    brand: str = ""
    cal100: float = Field(0.0, description="kcal per 100 g")
    comment: str = ""


class Food(BaseModel):
    key: Optional[str] = None
    name: str
    brand: str = ""
    cal100: float = Field(0.0, description="kcal per 100 g")
    prot100: float = Field(0.0, description="protein g per 100 g")
    fat100: float = Field(0.0, description="fat g per 100 g")
    carb100: float = Field(0.0, description="carbohydrates g per 100 g")
    comment: str = ""


class DeleteFoodRequest(BaseModel):
    key: str = Field(..., min_length=1)
