from typing import Dict, List
from pydantic import Field

from portfolio.models.base import CamelModel
from portfolio.models.contact.contact import ContactSummary


class AnalyticsOut(CamelModel):
    total_projects: int
    total_contacts: int
    unread_contacts: int
    featured_projects: int
    projects_by_category: Dict[str, int] = Field(default_factory=dict)
    recent_contacts: List[ContactSummary] = Field(default_factory=list)
