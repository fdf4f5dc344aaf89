from datetime import datetime
from pydantic import AliasChoices, EmailStr, Field

from portfolio.models.base import CamelModel

# ---------- Contact Models ----------

class ContactCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    message: str = Field(..., min_length=1)


class ContactSummary(CamelModel):
    id: str = Field(..., validation_alias=AliasChoices("_id", "id"), serialization_alias="id")
    name: str
    email: str
    created_at: datetime
    read: bool = False


class ContactOut(ContactSummary):
    message: str


class ContactSubmissionOut(CamelModel):
    message: str
    notified: bool
    contact: ContactOut
