from fastapi import APIRouter, Depends, status
from typing import List

from portfolio.models.contact.contact import ContactCreate, ContactOut, ContactSubmissionOut
from portfolio.services.contact_management.contact import (
    create_contact_helper,
    get_contacts_helper,
    mark_contact_read_helper,
    delete_contact_helper,
)
from portfolio.services.notification.mailer import Notifier, get_notifier
from portfolio.utils.errors import PortfolioError
from portfolio.utils.http_errors import to_http_exception


router = APIRouter()


@router.post("/api/contact", response_model=ContactSubmissionOut, status_code=status.HTTP_201_CREATED)
async def submit_contact(payload: ContactCreate, notifier: Notifier = Depends(get_notifier)):
    try:
        return await create_contact_helper(payload, notifier)
    except PortfolioError as e:
        raise to_http_exception(e) from e


@router.get("/api/contacts", response_model=List[ContactOut])
async def list_contacts():
    try:
        return await get_contacts_helper()
    except PortfolioError as e:
        raise to_http_exception(e) from e


@router.put("/api/contacts/{contact_id}/read", response_model=ContactOut)
async def mark_contact_read(contact_id: str):
    try:
        return await mark_contact_read_helper(contact_id)
    except PortfolioError as e:
        raise to_http_exception(e) from e


@router.delete("/api/contacts/{contact_id}", response_model=dict)
async def delete_contact(contact_id: str):
    try:
        return await delete_contact_helper(contact_id)
    except PortfolioError as e:
        raise to_http_exception(e) from e
