"""AI coach pass-through route."""

from typing import Any

from fastapi import APIRouter, Body, Request

router = APIRouter(tags=["coach"])


@router.post("/ai-coach")
async def ask_coach(request: Request, payload: dict[str, Any] = Body(...)):
    """Forward a free-form request to the AI coach and return its reply."""
    reply = await request.app.state.coach.ask(payload)
    return reply.to_dict()
