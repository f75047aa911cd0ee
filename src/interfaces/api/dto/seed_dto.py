"""Seed 端点 DTO"""

from pydantic import BaseModel


class SeedCounts(BaseModel):
    departments: int
    users: int
    employees: int
    templates: int
    workflows: int
    tasks: int


class SeedResponse(BaseModel):
    message: str
    data: SeedCounts
