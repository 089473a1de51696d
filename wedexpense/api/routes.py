import json
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from wedexpense.ingestion.orchestrator import IngestionOrchestrator

router = APIRouter()


def ok(data: dict[str, Any]) -> JSONResponse:
    return JSONResponse({"status": "success", "data": data})


def error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"status": "error", "message": message}, status_code=status_code)


def _orchestrator(request: Request) -> IngestionOrchestrator:
    return request.app.state.orchestrator


@router.post("/receipts/scan", summary="Extract expense fields from an uploaded receipt")
async def scan_receipt(request: Request) -> JSONResponse:
    body = await request.body()
    content_type = request.headers.get("content-type")
    result = await run_in_threadpool(_orchestrator(request).ingest, body, content_type)
    return ok(result.to_response())


@router.post("/expenses/categorize", summary="Suggest a category for an expense description")
async def categorize_expense(request: Request) -> JSONResponse:
    raw = await request.body()
    try:
        payload = json.loads(raw) if raw else {}
    except json.JSONDecodeError:
        return error(400, "Request body must be valid JSON")
    if not isinstance(payload, dict):
        return error(400, "Request body must be a JSON object")
    description = payload.get("description") or ""
    if not isinstance(description, str):
        return error(400, "'description' must be a string")
    category = await run_in_threadpool(
        _orchestrator(request).categorize_description, description
    )
    return ok({"category": category})
