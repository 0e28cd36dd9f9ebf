"""Drawing action endpoint (ban, protect, winner, pocket pick, clear)."""

from fastapi import APIRouter, HTTPException

from card_draw.actions import DrawingActionError, apply_action

from .models import DrawingActionBody

router = APIRouter()


@router.post("/drawings/actions")
async def drawing_action(body: DrawingActionBody):
    """Apply one tournament action to a drawing and return the updated drawing."""
    try:
        return apply_action(
            body.drawing, body.action, body.chart_id,
            player=body.player, pick=body.pick,
        )
    except DrawingActionError as e:
        raise HTTPException(400, str(e))
