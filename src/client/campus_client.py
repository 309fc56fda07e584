"""HTTP data-access client for the Campus Portal API.

Wraps ``httpx.Client`` with the portal's identity transport and error
envelope. Every non-2xx response raises an ``ApiError`` subclass carrying the
server's ``message`` and status code; transport failures and timeouts raise
``ApiConnectionError``.

Usage:
    from client.campus_client import CampusClient

    with CampusClient(user_id="a1b2", role="student") as client:
        courses = client.list_courses()
        client.register_for_event(event_id)
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

import config

logger = logging.getLogger(__name__)

JsonDict = Dict[str, Any]


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(f"{status_code}: {message}" if status_code else message)


class ApiValidation(ApiError):
    pass


class ApiUnauthorized(ApiError):
    pass


class ApiForbidden(ApiError):
    pass


class ApiNotFound(ApiError):
    pass


class ApiConflict(ApiError):
    pass


class ApiServerError(ApiError):
    pass


class ApiConnectionError(ApiError):
    """The server could not be reached or did not answer in time."""


_ERRORS_BY_STATUS = {
    400: ApiValidation,
    401: ApiUnauthorized,
    403: ApiForbidden,
    404: ApiNotFound,
    409: ApiConflict,
}


def error_for_response(response: httpx.Response) -> ApiError:
    """Build the ApiError matching a failed response."""
    try:
        message = response.json().get("message") or response.reason_phrase
    except (ValueError, AttributeError):
        message = response.text or response.reason_phrase
    if response.status_code >= 500:
        error_class = ApiServerError
    else:
        error_class = _ERRORS_BY_STATUS.get(response.status_code, ApiError)
    return error_class(message, response.status_code)


class CampusClient:
    """Typed access to every Campus Portal endpoint."""

    def __init__(
        self,
        base_url: str = config.CLIENT_API_URL,
        user_id: Optional[str] = None,
        role: Optional[str] = None,
        token: Optional[str] = None,
        timeout: float = config.CLIENT_TIMEOUT_SECONDS,
        http_client: Optional[httpx.Client] = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root including the ``/api`` prefix.
            user_id: Identity sent in header mode.
            role: Role claimed in header mode.
            token: Bearer token used in token mode; takes precedence over headers.
            timeout: Per-request timeout in seconds.
            http_client: Optional preconfigured client (e.g. a test client).
        """
        self.base_url = base_url.rstrip("/")
        self.user_id = user_id
        self.role = role
        self.token = token
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "CampusClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    # --- Transport ---

    def _identity_headers(self) -> Dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        headers = {}
        if self.user_id:
            headers[config.USER_ID_HEADER] = self.user_id
        if self.role:
            headers[config.USER_ROLE_HEADER] = self.role
        return headers

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[JsonDict] = None,
        params: Optional[JsonDict] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        try:
            response = self._http.request(
                method, url, json=json, params=params, headers=self._identity_headers()
            )
        except httpx.TimeoutException as e:
            logger.warning("Request timed out: %s %s", method, url)
            raise ApiConnectionError(f"Request timed out: {method} {path}") from e
        except httpx.TransportError as e:
            logger.warning("Connection failed: %s %s (%s)", method, url, e)
            raise ApiConnectionError(f"Could not reach the server: {e}") from e

        if response.is_error:
            raise error_for_response(response)
        if not response.content:
            return None
        return response.json()

    def _list(self, path: str, **params: Any) -> List[JsonDict]:
        return self._request("GET", path, params=params or None)

    def _get(self, path: str) -> JsonDict:
        return self._request("GET", path)

    def _post(self, path: str, payload: Optional[JsonDict] = None) -> Any:
        return self._request("POST", path, json=payload)

    def _put(self, path: str, payload: Optional[JsonDict] = None) -> Any:
        return self._request("PUT", path, json=payload)

    def _patch(self, path: str, payload: JsonDict) -> Any:
        return self._request("PATCH", path, json=payload)

    def _delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    # --- Users ---

    def health(self) -> JsonDict:
        return self._get("/health")

    def me(self) -> JsonDict:
        """Return the identity the server resolved for this client."""
        return self._get("/users/me")

    def list_users(self) -> List[JsonDict]:
        return self._list("/users")

    def get_user(self, user_id: str) -> JsonDict:
        return self._get(f"/users/{user_id}")

    def create_user(self, payload: JsonDict) -> JsonDict:
        return self._post("/users", payload)

    def update_user(self, user_id: str, patch: JsonDict) -> JsonDict:
        return self._put(f"/users/{user_id}", patch)

    def delete_user(self, user_id: str) -> JsonDict:
        return self._delete(f"/users/{user_id}")

    def issue_token(self, user_id: str) -> str:
        return self._post(f"/users/{user_id}/token")["access_token"]

    # --- Courses ---

    def list_courses(self) -> List[JsonDict]:
        return self._list("/courses")

    def get_course(self, course_id: str) -> JsonDict:
        return self._get(f"/courses/{course_id}")

    def create_course(self, payload: JsonDict) -> JsonDict:
        return self._post("/courses", payload)

    def update_course(self, course_id: str, patch: JsonDict) -> JsonDict:
        return self._put(f"/courses/{course_id}", patch)

    def delete_course(self, course_id: str) -> JsonDict:
        return self._delete(f"/courses/{course_id}")

    def enroll_student(self, course_id: str, student_id: str) -> JsonDict:
        return self._post(f"/courses/{course_id}/students", {"student_id": student_id})

    def unenroll_student(self, course_id: str, student_id: str) -> JsonDict:
        return self._delete(f"/courses/{course_id}/students/{student_id}")

    # --- Study materials ---

    def list_study_materials(self) -> List[JsonDict]:
        return self._list("/study-materials")

    def get_study_material(self, material_id: str) -> JsonDict:
        return self._get(f"/study-materials/{material_id}")

    def create_study_material(self, payload: JsonDict) -> JsonDict:
        return self._post("/study-materials", payload)

    def update_study_material(self, material_id: str, patch: JsonDict) -> JsonDict:
        return self._put(f"/study-materials/{material_id}", patch)

    def delete_study_material(self, material_id: str) -> JsonDict:
        return self._delete(f"/study-materials/{material_id}")

    # --- Assignments ---

    def list_assignments(self) -> List[JsonDict]:
        return self._list("/assignments")

    def get_assignment(self, assignment_id: str) -> JsonDict:
        return self._get(f"/assignments/{assignment_id}")

    def create_assignment(self, payload: JsonDict) -> JsonDict:
        return self._post("/assignments", payload)

    def update_assignment(self, assignment_id: str, patch: JsonDict) -> JsonDict:
        return self._put(f"/assignments/{assignment_id}", patch)

    def delete_assignment(self, assignment_id: str) -> JsonDict:
        return self._delete(f"/assignments/{assignment_id}")

    def submit_assignment(self, assignment_id: str, file_url: Optional[str] = None) -> JsonDict:
        return self._post(f"/assignments/{assignment_id}/submit", {"file_url": file_url})

    def grade_submission(
        self,
        assignment_id: str,
        student_id: str,
        marks: Optional[float] = None,
        feedback: Optional[str] = None,
    ) -> JsonDict:
        return self._patch(
            f"/assignments/{assignment_id}/submissions/{student_id}",
            {"marks": marks, "feedback": feedback},
        )

    # --- Events ---

    def list_events(self) -> List[JsonDict]:
        return self._list("/events")

    def get_event(self, event_id: str) -> JsonDict:
        return self._get(f"/events/{event_id}")

    def create_event(self, payload: JsonDict) -> JsonDict:
        return self._post("/events", payload)

    def update_event(self, event_id: str, patch: JsonDict) -> JsonDict:
        return self._put(f"/events/{event_id}", patch)

    def delete_event(self, event_id: str) -> JsonDict:
        return self._delete(f"/events/{event_id}")

    def register_for_event(self, event_id: str) -> JsonDict:
        return self._post(f"/events/{event_id}/register")

    def unregister_from_event(self, event_id: str) -> JsonDict:
        return self._put(f"/events/{event_id}/unregister")

    def check_registration(self, event_id: str) -> bool:
        return self._get(f"/events/{event_id}/check-registration")["is_registered"]

    # --- Announcements ---

    def list_announcements(self) -> List[JsonDict]:
        return self._list("/announcements")

    def get_announcement(self, announcement_id: str) -> JsonDict:
        return self._get(f"/announcements/{announcement_id}")

    def create_announcement(self, payload: JsonDict) -> JsonDict:
        return self._post("/announcements", payload)

    def update_announcement(self, announcement_id: str, patch: JsonDict) -> JsonDict:
        return self._put(f"/announcements/{announcement_id}", patch)

    def delete_announcement(self, announcement_id: str) -> JsonDict:
        return self._delete(f"/announcements/{announcement_id}")

    def add_announcement_comment(self, announcement_id: str, text: str) -> List[JsonDict]:
        return self._post(f"/announcements/{announcement_id}/comments", {"text": text})

    # --- Grievances ---

    def list_grievances(self) -> List[JsonDict]:
        return self._list("/grievances")

    def get_grievance(self, grievance_id: str) -> JsonDict:
        return self._get(f"/grievances/{grievance_id}")

    def create_grievance(self, payload: JsonDict) -> JsonDict:
        return self._post("/grievances", payload)

    def update_grievance(self, grievance_id: str, patch: JsonDict) -> JsonDict:
        return self._put(f"/grievances/{grievance_id}", patch)

    def delete_grievance(self, grievance_id: str) -> JsonDict:
        return self._delete(f"/grievances/{grievance_id}")

    def comment_on_grievance(self, grievance_id: str, comment: str) -> JsonDict:
        return self._put(f"/grievances/{grievance_id}/comment", {"comment": comment})

    # --- Lost and found ---

    def list_lost_found(
        self,
        item_type: Optional[str] = None,
        status: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[JsonDict]:
        return self._list("/lost-found", type=item_type, status=status, category=category)

    def list_my_lost_found(self) -> List[JsonDict]:
        return self._list("/lost-found/mine")

    def get_lost_found_item(self, item_id: str) -> JsonDict:
        return self._get(f"/lost-found/{item_id}")

    def create_lost_found_item(self, payload: JsonDict) -> JsonDict:
        return self._post("/lost-found", payload)

    def update_lost_found_item(self, item_id: str, patch: JsonDict) -> JsonDict:
        return self._put(f"/lost-found/{item_id}", patch)

    def delete_lost_found_item(self, item_id: str) -> JsonDict:
        return self._delete(f"/lost-found/{item_id}")

    def match_lost_found_item(self, item_id: str, matched_item_id: str) -> JsonDict:
        return self._put(f"/lost-found/{item_id}/match", {"matched_item_id": matched_item_id})

    # --- Research ---

    def list_research(self) -> List[JsonDict]:
        return self._list("/research")

    def get_research(self, internship_id: str) -> JsonDict:
        return self._get(f"/research/{internship_id}")

    def create_research(self, payload: JsonDict) -> JsonDict:
        return self._post("/research", payload)

    def update_research(self, internship_id: str, patch: JsonDict) -> JsonDict:
        return self._put(f"/research/{internship_id}", patch)

    def delete_research(self, internship_id: str) -> JsonDict:
        return self._delete(f"/research/{internship_id}")

    def apply_to_research(self, internship_id: str) -> JsonDict:
        return self._post(f"/research/{internship_id}/apply")

    def withdraw_research_application(self, internship_id: str) -> JsonDict:
        return self._delete(f"/research/{internship_id}/apply")

    def list_applicants(self, internship_id: str) -> List[JsonDict]:
        return self._list(f"/research/{internship_id}/applicants")

    def decide_application(self, internship_id: str, application_id: str, status: str) -> JsonDict:
        return self._patch(
            f"/research/{internship_id}/applicants/{application_id}", {"status": status}
        )

    def list_my_applications(self) -> List[JsonDict]:
        return self._list("/research/applications/mine")
