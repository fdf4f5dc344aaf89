from datetime import datetime
from enum import Enum
from typing import List, Optional, Union

from pydantic import AliasChoices, Field, field_validator

from config import client_store_config
from portfolio.models.base import CamelModel

# ---------- Category ---------- #

class Category(str, Enum):
    WEB = "web"
    MOBILE = "mobile"
    AI = "ai"
    GAME = "game"


# Filter tag meaning "no category filter"
ALL_CATEGORIES = "all"


def parse_technologies(raw: Union[str, List[str], None]) -> List[str]:
    """Split a comma separated string into trimmed, non-empty tokens (order kept)."""
    if raw is None:
        raise ValueError("technologies is required")
    parts = raw.split(",") if isinstance(raw, str) else list(raw)
    tokens = [str(part).strip() for part in parts]
    tokens = [token for token in tokens if token]
    if not tokens:
        raise ValueError("technologies must contain at least one entry")
    return tokens


class _ProjectFields(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    technologies: List[str]
    demo_url: Optional[str] = None
    github_url: Optional[str] = None
    category: Category

    @field_validator("technologies", mode="before")
    @classmethod
    def _split_technologies(cls, value):
        return parse_technologies(value)

    @field_validator("demo_url", "github_url", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


# ---------- Project Models (service) ---------- #

class Project(_ProjectFields):
    image_url: Optional[str] = None
    featured: bool = False


class ProjectOut(Project):
    id: str = Field(..., validation_alias=AliasChoices("_id", "id"), serialization_alias="id")
    created_at: datetime


# ---------- Project Models (local client store) ---------- #

class LocalProject(_ProjectFields):
    id: int
    image_url: str = client_store_config["PLACEHOLDER_IMAGE"]

    @field_validator("image_url", mode="before")
    @classmethod
    def _default_image(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return client_store_config["PLACEHOLDER_IMAGE"]
        return value
