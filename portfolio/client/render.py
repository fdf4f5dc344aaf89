from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from portfolio.models.project.project import ALL_CATEGORIES, Category, LocalProject

VIEWS_DIR = Path(__file__).resolve().parent.parent / "views"


class PortfolioRenderer:
    """Turns store query results into HTML. Holds no project state."""

    def __init__(self, views_dir: Path = VIEWS_DIR):
        self.templates = Jinja2Templates(directory=str(views_dir))

    def render_cards(self, projects: Iterable[LocalProject], visible_ids: Optional[set] = None) -> str:
        """One card per record in list order; cards outside ``visible_ids`` are hidden."""
        template = self.templates.get_template("portfolio/_cards.html")
        return template.render(projects=list(projects), visible_ids=visible_ids)

    def page_context(self, projects: List[LocalProject], visible_ids: Optional[set] = None,
                     active_filter: str = ALL_CATEGORIES) -> Dict[str, Any]:
        return {
            "cards": self.render_cards(projects, visible_ids),
            "filters": [ALL_CATEGORIES] + [c.value for c in Category],
            "categories": [c.value for c in Category],
            "active_filter": active_filter,
        }

    def render_page(self, projects: List[LocalProject], visible_ids: Optional[set] = None,
                    active_filter: str = ALL_CATEGORIES) -> str:
        template = self.templates.get_template("portfolio/index.html")
        return template.render(**self.page_context(projects, visible_ids, active_filter))

    def page_response(self, request: Request, projects: List[LocalProject], visible_ids: Optional[set] = None,
                      active_filter: str = ALL_CATEGORIES):
        return self.templates.TemplateResponse(
            request, "portfolio/index.html", self.page_context(projects, visible_ids, active_filter)
        )
