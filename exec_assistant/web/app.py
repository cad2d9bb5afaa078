"""FastAPI application serving the briefing page and its JSON endpoints."""

from typing import Any, Literal

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from exec_assistant.web.page import render_page
from exec_assistant.web.view import AssistantView


class EmailEdit(BaseModel):
    field: Literal["sender", "subject", "body"]
    value: str


def create_app(view: AssistantView) -> FastAPI:
    """Build the app around a single shared view (one user, one process)."""
    app = FastAPI(
        title="Executive Assistant",
        description="Summarise and prioritise a handful of emails with Claude",
        version="1.0.0",
    )
    app.state.view = view

    @app.get("/", response_class=HTMLResponse)
    async def index() -> str:
        return render_page(view)

    @app.get("/api/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "service": "exec-assistant"}

    @app.get("/api/state")
    async def get_state() -> dict[str, Any]:
        return view.to_dict()

    @app.patch("/api/emails/{email_id}")
    async def edit_email(email_id: str, edit: EmailEdit) -> dict[str, Any]:
        updated = view.store.update(email_id, edit.field, edit.value)
        return {"updated": updated}

    @app.post("/api/analyze")
    async def analyze() -> dict[str, Any]:
        started = await view.run_analysis()
        if not started:
            raise HTTPException(status_code=409, detail="Analysis already in progress")
        return view.to_dict()

    return app
