from datetime import datetime
from typing import Optional, NoReturn

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from alumni_events.core.config import load_config
from alumni_events.core.errors import InvalidArgumentError, InvalidIntervalError, NotFoundError, SchedulingError
from alumni_events.schemas.events import (
    ConflictCheckResponse,
    PopularityItem,
    PopularityResponse,
    SimilarEventsResponse,
    SlotModel,
    SuggestedTimeResponse,
    TimelineEntryModel,
    TimelineResponse,
)
from alumni_events.services.engine import get_scheduling_service


router = APIRouter()


def _require_api_key_if_configured(request: Request) -> None:
    cfg = load_config()
    if not cfg.api_key:
        return
    provided = request.headers.get("x-api-key") or request.headers.get("X-API-Key")
    if provided != cfg.api_key:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")


def _raise_http(error: SchedulingError) -> NoReturn:
    if isinstance(error, NotFoundError):
        raise HTTPException(status_code=404, detail=error.message)
    if isinstance(error, (InvalidIntervalError, InvalidArgumentError)):
        raise HTTPException(status_code=400, detail=error.message)
    raise HTTPException(status_code=500, detail=error.message)


@router.post("/suggest")
async def suggest_best_time(
    request: Request,
    organizer_id: int = Query(...),
    duration_hours: float = Query(...),
) -> JSONResponse:
    """
    Suggest the best free slot for a new event of the organizer.

    A fully booked horizon is not an error: the response has ok=false and
    no suggested slot.
    """
    _require_api_key_if_configured(request)
    service = get_scheduling_service()
    try:
        result = service.suggest_best_time(organizer_id, duration_hours)
    except SchedulingError as e:
        _raise_http(e)

    response = SuggestedTimeResponse(
        ok=result.found,
        organizer_id=organizer_id,
        duration_hours=duration_hours,
        suggested=SlotModel(**vars(result.suggested)) if result.suggested else None,
        score=result.score,
        alternatives=[SlotModel(**vars(s)) for s in result.alternatives],
        message=None if result.found else "No available time",
    )
    return JSONResponse(status_code=200, content=response.model_dump(mode="json"))


@router.get("/conflict")
async def check_conflict(
    request: Request,
    event_id: int = Query(...),
    new_start: datetime = Query(...),
    new_end: datetime = Query(...),
) -> JSONResponse:
    _require_api_key_if_configured(request)
    service = get_scheduling_service()
    try:
        conflict = service.check_conflict(event_id, new_start, new_end)
    except SchedulingError as e:
        _raise_http(e)

    response = ConflictCheckResponse(
        event_id=event_id,
        new_start=new_start,
        new_end=new_end,
        has_conflict=conflict,
    )
    return JSONResponse(status_code=200, content=response.model_dump(mode="json"))


@router.get("/similar/{event_id}")
async def get_similar_events(request: Request, event_id: int, count: int = 3) -> JSONResponse:
    _require_api_key_if_configured(request)
    service = get_scheduling_service()
    try:
        events = service.get_similar_events(event_id, count)
    except SchedulingError as e:
        _raise_http(e)

    response = SimilarEventsResponse(event_id=event_id, events=events)
    return JSONResponse(status_code=200, content=response.model_dump(mode="json"))


@router.get("/popularity")
async def get_events_by_popularity(
    request: Request,
    top: int = 10,
    major_id: Optional[int] = None,
) -> JSONResponse:
    _require_api_key_if_configured(request)
    service = get_scheduling_service()
    try:
        ranked = service.get_events_by_popularity(top, major_id)
    except SchedulingError as e:
        _raise_http(e)

    response = PopularityResponse(
        top=top,
        events=[PopularityItem(**vars(r)) for r in ranked],
    )
    return JSONResponse(status_code=200, content=response.model_dump(mode="json"))


@router.get("/timeline")
async def get_suggested_timeline(
    request: Request,
    event_start: datetime = Query(...),
    duration_hours: float = Query(...),
    event_end: Optional[datetime] = None,
) -> JSONResponse:
    """
    Scaled agenda for an event starting at `event_start`.

    When `event_end` is supplied the response also lists phases that run
    past it.
    """
    _require_api_key_if_configured(request)
    service = get_scheduling_service()
    try:
        entries, overruns = service.get_suggested_timeline(event_start, duration_hours, event_end)
    except SchedulingError as e:
        _raise_http(e)

    response = TimelineResponse(
        event_start=event_start,
        duration_hours=duration_hours,
        scaling=service.timeline_scaling,
        timeline=[
            TimelineEntryModel(
                name=entry.name,
                day=entry.day,
                start_time=entry.start_time,
                end_time=entry.end_time,
                start_offset_hours=entry.start_offset_hours,
                end_offset_hours=entry.end_offset_hours,
                description=entry.description,
            )
            for entry in entries
        ],
        fits_event=None if event_end is None else not overruns,
        overruns=overruns,
    )
    return JSONResponse(status_code=200, content=response.model_dump(mode="json"))
