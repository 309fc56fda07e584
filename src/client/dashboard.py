"""Role-specific dashboards built on the data-access client.

The role is always taken from the server's answer to ``/users/me``, never
from what the client claimed.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from client.campus_client import CampusClient

# Section name -> client call, per role, in display order
DASHBOARD_SECTIONS: Dict[str, List[Tuple[str, Callable]]] = {
    "student": [
        ("courses", CampusClient.list_courses),
        ("assignments", CampusClient.list_assignments),
        ("events", CampusClient.list_events),
        ("announcements", CampusClient.list_announcements),
        ("research_applications", CampusClient.list_my_applications),
    ],
    "professor": [
        ("courses", CampusClient.list_courses),
        ("assignments", CampusClient.list_assignments),
        ("research", CampusClient.list_research),
    ],
    "club": [
        ("events", CampusClient.list_events),
        ("announcements", CampusClient.list_announcements),
    ],
    "admin": [
        ("users", CampusClient.list_users),
        ("courses", CampusClient.list_courses),
        ("grievances", CampusClient.list_grievances),
    ],
}

# Field shown as the title of each entry in a section
_TITLE_FIELDS = ("title", "name", "code")


@dataclass
class Dashboard:
    role: str
    user: Dict[str, Any]
    sections: Dict[str, List[Dict[str, Any]]] = field(default_factory=dict)


def load_dashboard(client: CampusClient) -> Dashboard:
    """Fetch every section of the caller's dashboard.

    Args:
        client: Client carrying the caller's identity.

    Returns:
        Dashboard for the role the server resolved.

    Raises:
        ApiError: If identity resolution or any section request fails.
    """
    user = client.me()
    role = user["role"]
    sections = {}
    for name, fetch in DASHBOARD_SECTIONS.get(role, []):
        sections[name] = fetch(client)
    return Dashboard(role=role, user=user, sections=sections)


def _entry_title(entry: Dict[str, Any]) -> str:
    for key in _TITLE_FIELDS:
        if entry.get(key):
            return str(entry[key])
    return "(untitled)"


def render_dashboard(dashboard: Dashboard) -> str:
    """Format a dashboard as plain text."""
    lines = [
        "=" * 70,
        f"  {dashboard.user.get('name', '')} ({dashboard.role})",
        "=" * 70,
    ]
    for name, entries in dashboard.sections.items():
        lines.append("")
        lines.append(f"{name.replace('_', ' ').title()} ({len(entries)})")
        if not entries:
            lines.append("  (none)")
        for entry in entries:
            lines.append(f"  - {_entry_title(entry)}")
    return "\n".join(lines)
