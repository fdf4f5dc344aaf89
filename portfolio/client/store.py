"""
Local project list: the pure data/query half of the portfolio page.

Nothing here renders or touches HTTP; the presentation adapter in
``portfolio.client.render`` consumes what this module returns.
"""
from __future__ import annotations
import time
from typing import Any, Callable, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError

from config import client_store_config
from portfolio.client.storage import LocalStorage
from portfolio.models.base import describe_validation_error
from portfolio.models.project.project import ALL_CATEGORIES, Category, LocalProject
from portfolio.utils.errors import NotFoundError, StorageUnavailableError, ValidationFailedError
from portfolio.utils.logger_utils import logger

_project_list = TypeAdapter(List[LocalProject])

SEED_PROJECTS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "title": "Pacman Game",
        "description": (
            "A single-player Pac-Man style arcade game implemented in Java using Swing. "
            "The game includes tile-based maze rendering, player movement and animation, "
            "pellet collection, basic ghost movement, collision detection, and score tracking."
        ),
        "technologies": ["Java", "Java Swing", "Git", "GitHub"],
        "githubUrl": "https://github.com/VijayKhokhar111/PacMan.git",
        "imageUrl": "https://github.com/VijayKhokhar111/PacMan/blob/main/PacMan/Screenshot%202025-08-20%20171143.png",
        "category": Category.GAME.value,
    },
]

Confirm = Callable[[str], bool]


def seed_projects() -> List[LocalProject]:
    return _project_list.validate_python(SEED_PROJECTS)


def serialize_projects(projects: List[LocalProject]) -> str:
    return _project_list.dump_json(projects, by_alias=True).decode("utf-8")


def deserialize_projects(raw: str) -> List[LocalProject]:
    projects = _project_list.validate_json(raw)
    ids = [p.id for p in projects]
    if len(ids) != len(set(ids)):
        raise ValueError("duplicate project ids in stored list")
    return projects


class ProjectStore:
    def __init__(self, storage: LocalStorage, key: Optional[str] = None):
        self._storage = storage
        self._key = key or client_store_config["STORAGE_KEY"]
        self.projects: List[LocalProject] = self.load()

    def load(self) -> List[LocalProject]:
        """Read the persisted list; missing or unreadable data yields the seed list."""
        try:
            saved = self._storage.get_item(self._key)
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Unreadable project storage '{self._key}', using seed data: {e}")
            return seed_projects()
        if saved is None:
            return seed_projects()
        try:
            return deserialize_projects(saved)
        except (ValueError, ValidationError) as e:
            logger.warning(f"Malformed stored projects under '{self._key}', using seed data: {e}")
            return seed_projects()

    def save(self) -> None:
        try:
            self._storage.set_item(self._key, serialize_projects(self.projects))
        except OSError as e:
            logger.error(f"Could not persist projects: {e}")
            raise StorageUnavailableError(str(e)) from e

    def get(self, project_id: int) -> LocalProject:
        for project in self.projects:
            if project.id == project_id:
                return project
        raise NotFoundError("Project not found")

    def _next_id(self) -> int:
        now = int(time.time() * 1000)
        highest = max((p.id for p in self.projects), default=0)
        return max(now, highest + 1)

    def add(self, fields: Dict[str, Any]) -> LocalProject:
        try:
            record = LocalProject.model_validate({**fields, "id": self._next_id()})
        except ValidationError as e:
            raise ValidationFailedError(describe_validation_error(e)) from e

        self.projects.append(record)
        try:
            self.save()
        except StorageUnavailableError:
            self.projects.pop()
            raise
        return record

    def delete(self, project_id: int, confirm: Confirm) -> bool:
        """Remove a record once ``confirm`` agrees. Returns False when declined."""
        record = self.get(project_id)
        if not confirm(f"Are you sure you want to delete '{record.title}'?"):
            return False

        previous = self.projects
        self.projects = [p for p in previous if p.id != project_id]
        try:
            self.save()
        except StorageUnavailableError:
            self.projects = previous
            raise
        return True

    def filter(self, category: str = ALL_CATEGORIES) -> List[LocalProject]:
        """Records visible under ``category``, in list order. The list is not modified."""
        if category == ALL_CATEGORIES:
            return list(self.projects)
        return [p for p in self.projects if p.category == category]

    def visible_ids(self, category: str = ALL_CATEGORIES) -> set[int]:
        return {p.id for p in self.filter(category)}
