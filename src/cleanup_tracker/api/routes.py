"""REST endpoints for waste entries, events, statistics and tips."""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import aclosing
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import StreamingResponse

from cleanup_tracker.api.models import EventCreate, WasteEntryCreate
from cleanup_tracker.errors import StorageError

if TYPE_CHECKING:
    from cleanup_tracker.config import Settings
    from cleanup_tracker.containers import AppContainer
    from cleanup_tracker.domain.changes import ChangeEvent
    from cleanup_tracker.domain.events import Event
    from cleanup_tracker.domain.stats import StatsSummary
    from cleanup_tracker.domain.tips import Tip
    from cleanup_tracker.domain.waste import WasteEntry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.post("/waste")
async def create_waste_entry(
    body: WasteEntryCreate, request: Request
) -> dict[str, str]:
    """Log a collected-waste entry for the submitting user."""
    entry_id = _container(request).waste_service.create_entry(
        type=body.type,
        volume=body.volume,
        location=body.location,
        submitter=body.submitter(),
    )
    return {"message": "Waste entry added", "id": entry_id}


@router.get("/waste")
async def list_waste_entries(request: Request) -> list[dict[str, object]]:
    """Return every waste entry in store order."""
    entries = _container(request).waste_service.list_entries()
    return [_waste_entry_payload(entry) for entry in entries]


@router.post("/events")
async def create_event(body: EventCreate, request: Request) -> dict[str, str]:
    """Schedule a clean-up event created by the submitting user."""
    event_id = _container(request).event_service.create_event(
        title=body.title,
        description=body.description,
        location=body.location,
        date=body.date,
        creator=body.submitter(),
    )
    return {"message": "Event added", "id": event_id}


@router.get("/events")
async def list_events(request: Request) -> list[dict[str, object]]:
    """Return every event in store order."""
    events = _container(request).event_service.list_events()
    return [_event_payload(event) for event in events]


@router.get("/stats")
async def get_stats(request: Request) -> dict[str, object]:
    """Return counts over all waste entries."""
    return _stats_payload(_container(request).stats_service.compute_stats())


@router.get("/tips")
async def list_tips(request: Request) -> list[dict[str, str]]:
    """Return awareness tips."""
    return [_tip_payload(tip) for tip in _container(request).tip_service.list_tips()]


@router.get("/changes/{name}")
async def stream_changes(
    name: str,
    request: Request,
    limit: int | None = Query(default=None, ge=1),
) -> StreamingResponse:
    """Stream collection changes as server-sent events."""
    container = _container(request)
    collection = _feed_collection(container.settings, name)
    if collection is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    changes = container.change_feed.subscribe(collection)
    return StreamingResponse(
        _server_sent_events(changes, limit), media_type="text/event-stream"
    )


def _feed_collection(settings: Settings, name: str) -> str | None:
    return {
        "waste": settings.waste_collection,
        "events": settings.events_collection,
        "tips": settings.tips_collection,
    }.get(name)


async def _server_sent_events(
    changes: AsyncGenerator[ChangeEvent, None], limit: int | None
) -> AsyncIterator[str]:
    sent = 0
    async with aclosing(changes):
        try:
            async for change in changes:
                payload = jsonable_encoder(
                    {"id": change.document_id, "document": change.document}
                )
                yield f"event: {change.kind}\ndata: {json.dumps(payload)}\n\n"
                sent += 1
                if limit is not None and sent >= limit:
                    break
        except StorageError as exc:
            logger.exception("Change stream aborted by document store failure")
            yield f"event: error\ndata: {json.dumps({'error': str(exc)})}\n\n"


def _waste_entry_payload(entry: WasteEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "type": entry.type,
        "volume": entry.volume,
        "location": entry.location,
        "submitterId": entry.submitter_id,
        "submitterEmail": entry.submitter_email,
        "createdAt": entry.created_at,
    }


def _event_payload(event: Event) -> dict[str, object]:
    return {
        "id": event.id,
        "title": event.title,
        "description": event.description,
        "location": event.location,
        "date": event.date,
        "creatorId": event.creator_id,
        "creatorEmail": event.creator_email,
        "createdAt": event.created_at,
    }


def _stats_payload(summary: StatsSummary) -> dict[str, object]:
    return {
        "totalEntries": summary.total_entries,
        "totalsByType": summary.totals_by_type,
        "totalsByUser": summary.totals_by_user,
    }


def _tip_payload(tip: Tip) -> dict[str, str]:
    return {"id": tip.id, "title": tip.title, "content": tip.content}
