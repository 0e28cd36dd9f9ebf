"""Pydantic request/response models for API endpoints."""

from typing import Literal

from pydantic import BaseModel

from card_draw.actions import ActionType
from card_draw.models import Drawing, EligibleChart


class DrawingActionBody(BaseModel):
    drawing: Drawing
    action: ActionType
    chart_id: str
    player: Literal[1, 2] = 1
    pick: EligibleChart | None = None
