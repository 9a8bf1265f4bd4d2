# plevenlab/api/v1/routers/events.py
from fastapi import APIRouter, Depends, HTTPException, Query, status

from plevenlab.api.v1.deps import get_current_user
from plevenlab.api.v1.routers.categories import category_to_dict
from plevenlab.models.category import Category
from plevenlab.models.event import Event
from plevenlab.models.user import User
from plevenlab.schemas.event import EventIn

router = APIRouter(prefix="/events", tags=["events"])


def event_to_dict(e: Event) -> dict:
    """
    Convert an Event (with category and created_by fetched) to its API form.
    The author is reduced to id and name.
    """
    return {
        "id": e.id,
        "title": e.title,
        "category": category_to_dict(e.category),
        "createdBy": {"id": e.created_by.id, "name": e.created_by.name},
        "createdDate": e.created_date.isoformat(),
        "startDate": e.start_date.isoformat(),
        "endDate": e.end_date.isoformat(),
        "locationFriendlyName": e.location_friendly_name,
        "locationLat": e.location_lat,
        "locationLng": e.location_lng,
    }


async def _get_or_404(event_id: int) -> Event:
    e = await Event.get_or_none(id=event_id).prefetch_related("category", "created_by")
    if not e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="NOT_FOUND")
    return e


async def _event_fields(body: EventIn) -> dict:
    """
    Map request fields to model fields, resolving category and author.

    Raises:
        HTTPException (400): If the category or the user does not exist
    """
    category = await Category.get_or_none(id=body.categoryId)
    author = await User.get_or_none(id=body.createdByUserId)
    if not category or not author:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                            detail={"code": "UNKNOWN_REFERENCE", "message": "Category or user does not exist"})
    return {
        "category": category,
        "created_by": author,
        "title": body.title,
        "created_date": body.createdDate,
        "start_date": body.startDate,
        "end_date": body.endDate,
        "location_friendly_name": body.locationFriendlyName,
        "location_lat": body.locationLat,
        "location_lng": body.locationLng,
    }


@router.get("")
async def list_events(
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=200),
):
    """
    Get paginated list of events, soonest start first.

    Returns:
        dict: success flag and data with items/offset/limit/total
    """
    total = await Event.all().count()
    rows = await (
        Event.all()
        .order_by("start_date")
        .offset(offset)
        .limit(limit)
        .prefetch_related("category", "created_by")
    )
    items = [event_to_dict(e) for e in rows]
    return {"success": True, "data": {"items": items, "offset": offset, "limit": limit, "total": total}}


@router.get("/{event_id}")
async def get_event(event_id: int):
    return {"success": True, "data": event_to_dict(await _get_or_404(event_id))}


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(get_current_user)])
async def create_event(body: EventIn):
    e = await Event.create(**await _event_fields(body))
    return {"success": True, "data": event_to_dict(e)}


@router.put("/{event_id}", dependencies=[Depends(get_current_user)])
async def update_event(event_id: int, body: EventIn):
    e = await _get_or_404(event_id)
    for name, value in (await _event_fields(body)).items():
        setattr(e, name, value)
    await e.save()
    return {"success": True, "data": event_to_dict(e)}


@router.delete("/{event_id}", dependencies=[Depends(get_current_user)])
async def delete_event(event_id: int):
    e = await _get_or_404(event_id)
    data = event_to_dict(e)
    await e.delete()
    return {"success": True, "data": data}
