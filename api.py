from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from weatherchat.service import get_weather
from weatherchat.session import SessionStore


log = logging.getLogger(__name__)

app = FastAPI(title="Weather Chat API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: str
    conversation_id: str = Field(alias="conversationId")


class ChatResponse(BaseModel):
    message: str


SESSIONS = SessionStore()


# Sync handlers: FastAPI runs each request on its own threadpool worker.
@app.post("/api/chat", response_model=ChatResponse)
def chat(req: ChatRequest):
    prompt = (req.prompt or "").strip()
    if not prompt:
        return JSONResponse({"error": "Prompt is required."}, status_code=400)

    sess = SESSIONS.get(req.conversation_id)
    sess.add("user", prompt)
    reply = get_weather(prompt)
    sess.add("assistant", reply)
    log.debug("conversation %s: %d messages", req.conversation_id, len(sess.history))
    return ChatResponse(message=reply)


@app.delete("/api/chat/{conversation_id}")
def clear_conversation(conversation_id: str):
    return {"cleared": SESSIONS.drop(conversation_id)}


@app.get("/api/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    from util.logs import setup_logging

    setup_logging()
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "3000")))
