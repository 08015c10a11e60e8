"""Per-resource list views that re-read the server after every write."""

import itertools
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx
from pydantic import BaseModel, ConfigDict

from app.client.api import ClientError, ResourceClient
from app.client.views import PageView, ViewState, derive_view

logger = logging.getLogger(__name__)


class ResourcePreset(BaseModel):
    """How one resource is listed in the UI."""

    model_config = ConfigDict(frozen=True)

    resource: str
    label: str
    id_key: str
    search_fields: Tuple[str, ...]
    sort_key: str
    page_size: int


RESOURCES: Dict[str, ResourcePreset] = {
    "Students": ResourcePreset(
        resource="Students",
        label="student",
        id_key="studentId",
        search_fields=("firstName", "lastName", "email"),
        sort_key="firstName",
        page_size=5,
    ),
    "Courses": ResourcePreset(
        resource="Courses",
        label="course",
        id_key="courseId",
        search_fields=("courseName", "description"),
        sort_key="courseName",
        page_size=6,
    ),
    "Enrollments": ResourcePreset(
        resource="Enrollments",
        label="enrollment",
        id_key="enrollmentId",
        search_fields=("student.firstName", "student.lastName", "course.courseName"),
        sort_key="enrollmentDate",
        page_size=10,
    ),
}


class Notification(BaseModel):
    """Transient message shown until dismissed."""

    model_config = ConfigDict(frozen=True)

    id: int
    message: str
    level: str = "error"


class ResourceView:
    """Cached list of one resource plus its filter/sort/page state."""

    def __init__(self, client: ResourceClient, preset: ResourcePreset):
        self.client = client
        self.preset = preset
        self.state = ViewState(sort_key=preset.sort_key, page_size=preset.page_size)
        self.notifications: List[Notification] = []
        self._notification_ids = itertools.count(1)
        self.loading = False

    @classmethod
    def for_resource(
        cls,
        resource: str,
        base_url: str,
        api_prefix: str = "/api",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ResourceView":
        preset = RESOURCES[resource]
        client = ResourceClient(base_url, preset.resource, api_prefix=api_prefix, transport=transport)
        return cls(client, preset)

    @property
    def current_page(self) -> PageView:
        return derive_view(self.state, self.preset.search_fields)

    async def refresh(self) -> bool:
        """Re-read the full list. Keeps the previous items on failure."""
        self.loading = True
        try:
            items = await self.client.list()
        except ClientError as e:
            logger.error(f"Fetching {self.preset.resource} failed: {e}")
            self._notify(f"An error occurred while fetching {self.preset.label}s.")
            return False
        finally:
            self.loading = False

        self.state = self.state.model_copy(update={"items": tuple(items)})
        return True

    async def save(self, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Create or update depending on whether ``fields`` carries an identity."""
        identity = fields.get(self.preset.id_key)
        try:
            if identity:
                saved = await self.client.update(identity, fields)
            else:
                saved = await self.client.create(fields)
        except ClientError as e:
            logger.error(f"Saving {self.preset.label} failed: {e}")
            self._notify(f"An error occurred while saving the {self.preset.label}: {e}")
            return None

        await self.refresh()
        self._notify(f"{self.preset.label.capitalize()} saved successfully.", level="success")
        return saved

    async def remove(self, identity: int) -> bool:
        try:
            await self.client.delete(identity)
        except ClientError as e:
            logger.error(f"Deleting {self.preset.label} {identity} failed: {e}")
            self._notify(f"An error occurred while deleting the {self.preset.label}.")
            return False

        await self.refresh()
        self._notify(f"{self.preset.label.capitalize()} deleted successfully.", level="success")
        return True

    def set_search(self, term: str) -> None:
        self.state = self.state.model_copy(update={"search_term": term, "page": 1})

    def set_sort(self, sort_key: str, descending: bool = False) -> None:
        self.state = self.state.model_copy(update={"sort_key": sort_key, "descending": descending})

    def set_page(self, page: int) -> None:
        self.state = self.state.model_copy(update={"page": max(1, page)})

    def dismiss(self, notification: Notification) -> None:
        self.notifications = [n for n in self.notifications if n.id != notification.id]

    def _notify(self, message: str, level: str = "error") -> None:
        self.notifications = self.notifications + [
            Notification(id=next(self._notification_ids), message=message, level=level)
        ]
