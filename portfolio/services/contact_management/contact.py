from portfolio.database.conn import mongo_client
from portfolio.utils.logger_utils import logger
from portfolio.utils.errors import NotFoundError, NotificationFailedError, PortfolioError, StorageUnavailableError
from portfolio.models.contact.contact import ContactCreate, ContactOut, ContactSubmissionOut
from portfolio.services.notification.mailer import Notifier
from bson import ObjectId
from portfolio.utils.time_utils import utc_now
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError
from config import database_config
from typing import Any, Dict, List


def _db():
    return mongo_client.database


def _collection():
    return _db()[database_config["CONTACT_COLLECTION"]]


def _object_id(contact_id: str) -> ObjectId:
    if not ObjectId.is_valid(contact_id):
        raise NotFoundError("Contact not found")
    return ObjectId(contact_id)


def _to_out(doc: Dict[str, Any]) -> ContactOut:
    doc["_id"] = str(doc["_id"])
    return ContactOut.model_validate(doc)


async def create_contact_helper(payload: ContactCreate, notifier: Notifier) -> ContactSubmissionOut:
    """Persist the message, then notify. A failed notification keeps the record."""
    doc = payload.model_dump(by_alias=True)
    doc["read"] = False
    doc["createdAt"] = utc_now()
    try:
        result = await _collection().insert_one(doc)
    except PyMongoError as e:
        logger.error(f"create_contact_helper error: {e}")
        raise StorageUnavailableError(str(e)) from e

    doc["_id"] = result.inserted_id
    contact = _to_out(doc)
    logger.info(f"Saved contact message {contact.id} from {contact.email}")

    try:
        await notifier(contact)
    except NotificationFailedError as e:
        logger.warning(f"Contact {contact.id} saved but notification failed: {e}")
        return ContactSubmissionOut(message="Message saved, notification could not be sent", notified=False, contact=contact)
    except Exception as e:
        # the record is already stored; nothing past this point may report "not saved"
        logger.exception(f"Contact {contact.id} saved but notifier raised unexpectedly: {e}")
        return ContactSubmissionOut(message="Message saved, notification could not be sent", notified=False, contact=contact)

    return ContactSubmissionOut(message="Message sent successfully", notified=True, contact=contact)


async def get_contacts_helper() -> List[ContactOut]:
    try:
        cursor = _collection().find({}, sort=[("createdAt", -1), ("_id", -1)])
        items: List[ContactOut] = []
        async for doc in cursor:
            items.append(_to_out(doc))
        return items
    except PortfolioError:
        raise
    except PyMongoError as e:
        logger.error(f"get_contacts_helper error: {e}")
        raise StorageUnavailableError(str(e)) from e


async def mark_contact_read_helper(contact_id: str) -> ContactOut:
    oid = _object_id(contact_id)
    try:
        doc = await _collection().find_one_and_update(
            {"_id": oid}, {"$set": {"read": True}}, return_document=ReturnDocument.AFTER
        )
    except PyMongoError as e:
        logger.error(f"mark_contact_read_helper error: {e}")
        raise StorageUnavailableError(str(e)) from e
    if doc is None:
        raise NotFoundError("Contact not found")
    return _to_out(doc)


async def delete_contact_helper(contact_id: str) -> dict:
    oid = _object_id(contact_id)
    try:
        res = await _collection().delete_one({"_id": oid})
    except PyMongoError as e:
        logger.error(f"delete_contact_helper error: {e}")
        raise StorageUnavailableError(str(e)) from e
    if res.deleted_count == 0:
        raise NotFoundError("Contact not found")
    return {"detail": "Contact deleted successfully"}
