"""Event routes: CRUD and student registration."""

from fastapi import APIRouter, Depends

from api.routes.resource_router import register_resource_routes
from core.dependencies import EventManagerDep
from core.identity import get_current_user
from schemas.event import CreateEventRequest, Event, RegistrationStatus, UpdateEventRequest
from schemas.user import User
from utils.converters import event_to_schema

router = APIRouter(prefix="/api/events", tags=["Events"])


@router.post("/{event_id}/register", response_model=Event, summary="Register for event")
def register_for_event(
    event_id: str,
    event_manager: EventManagerDep,
    current_user: User = Depends(get_current_user),
) -> Event:
    """Register the caller for an event.

    Args:
        event_id: Event to register for.
        event_manager: Injected EventManager instance.
        current_user: Current authenticated user.

    Returns:
        The event with its updated registration count.

    Raises:
        ConflictError: If already registered.
        CapacityError: If the event is full.
        InvalidStateError: If registration has closed.
    """
    event = event_manager.register(current_user, event_id)
    return event_to_schema(event, current_user)


@router.put("/{event_id}/unregister", response_model=Event, summary="Unregister from event")
def unregister_from_event(
    event_id: str,
    event_manager: EventManagerDep,
    current_user: User = Depends(get_current_user),
) -> Event:
    event = event_manager.unregister(current_user, event_id)
    return event_to_schema(event, current_user)


@router.get(
    "/{event_id}/check-registration",
    response_model=RegistrationStatus,
    summary="Check registration",
)
def check_registration(
    event_id: str,
    event_manager: EventManagerDep,
    current_user: User = Depends(get_current_user),
) -> RegistrationStatus:
    return RegistrationStatus(is_registered=event_manager.is_registered(current_user, event_id))


register_resource_routes(
    router,
    manager_dep=EventManagerDep,
    serialize=event_to_schema,
    response_model=Event,
    create_model=CreateEventRequest,
    update_model=UpdateEventRequest,
    noun="event",
)
