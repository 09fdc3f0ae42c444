from __future__ import annotations

from fastapi import APIRouter, Request

from agents.flight_agent import EXAMPLE_QUERIES
from models.schemas import ChatMessageRequest


router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("/message")
async def post_chat_message(payload: ChatMessageRequest, request: Request):
    agent = request.app.state.flight_agent
    response = await agent.process(payload)
    return response.model_dump(mode="json")


@router.get("/tools")
async def list_tools(request: Request):
    return {"tools": [tool.function_spec() for tool in request.app.state.tools.values()]}


@router.get("/examples")
async def list_examples():
    return {"queries": list(EXAMPLE_QUERIES)}
