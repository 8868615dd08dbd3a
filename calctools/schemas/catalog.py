"""Pydantic schema for the tool catalog."""

from typing import List

from pydantic import BaseModel


class Tool(BaseModel):
    id: str
    title: str
    description: str
    path: str


class ToolCatalog(BaseModel):
    tools: List[Tool]
