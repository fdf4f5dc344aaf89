from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from portfolio.client.render import PortfolioRenderer
from portfolio.client.store import Confirm, ProjectStore
from portfolio.models.project.project import ALL_CATEGORIES, LocalProject
from portfolio.utils.errors import PortfolioError
from portfolio.utils.logger_utils import logger


class Notification(BaseModel):
    message: str
    kind: str = "info"  # success | info | error


def _decline(_message: str) -> bool:
    return False


@dataclass
class PortfolioContext:
    """Everything one page interaction needs, passed explicitly to handlers."""

    store: ProjectStore
    renderer: PortfolioRenderer
    confirm: Confirm = _decline
    active_filter: str = ALL_CATEGORIES
    notifications: List[Notification] = field(default_factory=list)

    def notify(self, message: str, kind: str = "info") -> None:
        self.notifications.append(Notification(message=message, kind=kind))

    def render(self) -> str:
        return self.renderer.render_cards(self.store.projects, self.store.visible_ids(self.active_filter))

    def render_page(self) -> str:
        return self.renderer.render_page(
            self.store.projects, self.store.visible_ids(self.active_filter), self.active_filter
        )

    def page_response(self, request):
        return self.renderer.page_response(
            request, self.store.projects, self.store.visible_ids(self.active_filter), self.active_filter
        )

    def add_project(self, fields: Dict[str, Any]) -> Optional[LocalProject]:
        try:
            record = self.store.add(fields)
        except PortfolioError as e:
            logger.warning(f"Local project add failed: {e}")
            self.notify(f"Could not add project: {e}", "error")
            return None
        self.notify("Project added successfully!", "success")
        return record

    def delete_project(self, project_id: int) -> bool:
        try:
            deleted = self.store.delete(project_id, self.confirm)
        except PortfolioError as e:
            logger.warning(f"Local project delete failed for {project_id}: {e}")
            self.notify(f"Could not delete project: {e}", "error")
            return False
        if deleted:
            self.notify("Project deleted successfully!", "success")
        return deleted

    def apply_filter(self, category: str) -> None:
        self.active_filter = category or ALL_CATEGORIES
