"""Habit DTOs and schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class HabitCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = ""


class HabitResponse(BaseModel):
    id: int
    name: str
    streak: int = Field(ge=0)
    progress: int = Field(ge=0, le=100)


class HabitListResponse(BaseModel):
    ok: bool = True
    habits: List[HabitResponse]
