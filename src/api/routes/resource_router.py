"""Shared CRUD route registration for authorization-scoped resources.

Each resource router declares its own sub-resource routes first and then calls
``register_resource_routes`` so that static paths such as ``/mine`` are
matched before the generic ``/{document_id}``.
"""

from typing import Any, Callable, List, Type

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from core.identity import get_current_user
from schemas.common import MessageResponse
from schemas.user import User


def register_resource_routes(
    router: APIRouter,
    *,
    manager_dep: Any,
    serialize: Callable[[Any, User], BaseModel],
    response_model: Type[BaseModel],
    create_model: Type[BaseModel],
    update_model: Type[BaseModel],
    noun: str,
    include_list: bool = True,
) -> None:
    """Add list/get/create/update/delete routes to a router.

    Args:
        router: Router carrying the resource prefix.
        manager_dep: Annotated dependency resolving the resource manager.
        serialize: Converts a stored model into its response schema for an actor.
        response_model: Response schema for a single document.
        create_model: Request body schema for creation.
        update_model: Request body schema for partial updates.
        noun: Human-readable resource name used in summaries and messages.
        include_list: Whether to add the generic list route.
    """
    if include_list:

        @router.get("", response_model=List[response_model], summary=f"List {noun}s")
        def list_documents(
            manager: manager_dep,
            current_user: User = Depends(get_current_user),
        ) -> List[Any]:
            return [serialize(model, current_user) for model in manager.list(current_user)]

    @router.get("/{document_id}", response_model=response_model, summary=f"Get {noun}")
    def get_document(
        document_id: str,
        manager: manager_dep,
        current_user: User = Depends(get_current_user),
    ) -> Any:
        return serialize(manager.get(current_user, document_id), current_user)

    @router.post(
        "",
        response_model=response_model,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {noun}",
    )
    def create_document(
        req: create_model,
        manager: manager_dep,
        current_user: User = Depends(get_current_user),
    ) -> Any:
        model = manager.create(current_user, req.model_dump())
        return serialize(model, current_user)

    @router.put("/{document_id}", response_model=response_model, summary=f"Update {noun}")
    def update_document(
        document_id: str,
        req: update_model,
        manager: manager_dep,
        current_user: User = Depends(get_current_user),
    ) -> Any:
        model = manager.update(current_user, document_id, req.model_dump(exclude_unset=True))
        return serialize(model, current_user)

    @router.delete("/{document_id}", response_model=MessageResponse, summary=f"Delete {noun}")
    def delete_document(
        document_id: str,
        manager: manager_dep,
        current_user: User = Depends(get_current_user),
    ) -> MessageResponse:
        manager.delete(current_user, document_id)
        return MessageResponse(message=f"{noun.capitalize()} deleted successfully")
