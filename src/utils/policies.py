"""Visibility and ownership predicates.

Every predicate is a pure function of (document, actor). The same predicate
backs list filtering and single-document reads of a resource, so an actor can
never list a document they would be refused on ``get``.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, FrozenSet, Optional, Tuple

from schemas.user import User

Predicate = Callable[[Any, User], bool]


@dataclass(frozen=True)
class ResourcePolicy:
    """Authorization axes of one resource type.

    Attributes:
        name: Display name used in error messages, e.g. "Course".
        model: SQLAlchemy model class.
        id_field: Primary key attribute of the model.
        creator_roles: Roles allowed to create (and own) documents.
        owner_field: Attribute set from the actor on create, or None.
        can_view: Visibility predicate for list/get.
        can_write: Predicate for update (and delete unless can_delete is set).
        can_delete: Optional stricter predicate for delete.
        order_by: Attributes the list is ordered by.
    """

    name: str
    model: Any
    id_field: str
    creator_roles: FrozenSet[str]
    owner_field: Optional[str]
    can_view: Predicate
    can_write: Predicate
    can_delete: Optional[Predicate] = None
    order_by: Tuple[Any, ...] = field(default_factory=tuple)

    def allows_delete(self, document: Any, actor: User) -> bool:
        if self.can_delete is not None:
            return self.can_delete(document, actor)
        return self.can_write(document, actor)


def is_admin(actor: User) -> bool:
    return actor.role == "admin"


def everyone(document: Any, actor: User) -> bool:
    return True


def admin_only(document: Any, actor: User) -> bool:
    return is_admin(actor)


def owner_or_admin(owner_field: str) -> Predicate:
    """Build a predicate passing the document's owner and admins."""

    def predicate(document: Any, actor: User) -> bool:
        return is_admin(actor) or getattr(document, owner_field) == actor.user_id

    return predicate


def owner_if_role(role: str, owner_field: str) -> Predicate:
    """Build a predicate scoping one role to its own documents.

    Actors holding ``role`` see only documents they own; every other role
    sees everything. Used for club-owned events/announcements and
    professor-owned research posts.
    """

    def predicate(document: Any, actor: User) -> bool:
        if actor.role != role:
            return True
        return getattr(document, owner_field) == actor.user_id

    return predicate


def is_self_or_admin(user: Any, actor: User) -> bool:
    return is_admin(actor) or user.user_id == actor.user_id


def is_course_member(course: Any, actor: User) -> bool:
    """Admins, the teaching professor and enrolled students."""
    if is_admin(actor) or course.professor_id == actor.user_id:
        return True
    return actor.user_id in course.student_ids


def is_course_professor_or_admin(course: Any, actor: User) -> bool:
    return is_admin(actor) or course.professor_id == actor.user_id


def via_course(predicate: Predicate) -> Predicate:
    """Lift a course predicate to documents that reference a course."""

    def lifted(document: Any, actor: User) -> bool:
        return predicate(document.course, actor)

    return lifted


def is_grievance_party(grievance: Any, actor: User) -> bool:
    """Admins, the creator and the assignee."""
    return (
        is_admin(actor)
        or grievance.created_by == actor.user_id
        or grievance.assigned_to == actor.user_id
    )
