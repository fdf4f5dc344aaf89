from portfolio.database.conn import mongo_client
from portfolio.utils.logger_utils import logger
from portfolio.utils.errors import NotFoundError, PortfolioError, StorageUnavailableError, ValidationFailedError
from portfolio.models.base import describe_validation_error
from portfolio.models.project.project import ALL_CATEGORIES, Project, ProjectOut
from portfolio.services.uploads.uploads import has_upload, remove_uploaded_image, save_project_image
from bson import ObjectId
from portfolio.utils.time_utils import utc_now
from fastapi import UploadFile
from pydantic import ValidationError
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError
from config import database_config
from typing import Any, Dict, List, Optional


def _db():
    return mongo_client.database


def _collection():
    return _db()[database_config["PROJECT_COLLECTION"]]


def _object_id(project_id: str) -> ObjectId:
    # Malformed ids cannot match any document
    if not ObjectId.is_valid(project_id):
        raise NotFoundError("Project not found")
    return ObjectId(project_id)


def _to_out(doc: Dict[str, Any]) -> ProjectOut:
    doc["_id"] = str(doc["_id"])
    return ProjectOut.model_validate(doc)


def build_project(fields: Dict[str, Any]) -> Project:
    try:
        return Project.model_validate(fields)
    except ValidationError as e:
        raise ValidationFailedError(describe_validation_error(e)) from e


async def get_projects_helper(category: Optional[str] = None, featured: Optional[bool] = None) -> List[ProjectOut]:
    try:
        query: Dict[str, Any] = {}
        if category and category != ALL_CATEGORIES:
            query["category"] = category
        # false means "no restriction", not "non-featured only"
        if featured:
            query["featured"] = True

        cursor = _collection().find(query, sort=[("createdAt", -1), ("_id", -1)])
        items: List[ProjectOut] = []
        async for doc in cursor:
            items.append(_to_out(doc))
        return items
    except PortfolioError:
        raise
    except PyMongoError as e:
        logger.error(f"get_projects_helper error: {e}")
        raise StorageUnavailableError(str(e)) from e


async def get_project_helper(project_id: str) -> ProjectOut:
    oid = _object_id(project_id)
    try:
        doc = await _collection().find_one({"_id": oid})
    except PyMongoError as e:
        logger.error(f"get_project_helper error: {e}")
        raise StorageUnavailableError(str(e)) from e
    if not doc:
        raise NotFoundError("Project not found")
    return _to_out(doc)


async def create_project_helper(fields: Dict[str, Any], image: Optional[UploadFile] = None) -> ProjectOut:
    project = build_project(fields)
    collection = _collection()

    if has_upload(image):
        project.image_url = await save_project_image(image)

    doc = project.model_dump(by_alias=True)
    doc["createdAt"] = utc_now()
    try:
        result = await collection.insert_one(doc)
    except PyMongoError as e:
        logger.error(f"create_project_helper error: {e}")
        remove_uploaded_image(project.image_url)
        raise StorageUnavailableError(str(e)) from e

    doc["_id"] = result.inserted_id
    logger.info(f"Created project {result.inserted_id} ({project.category})")
    return _to_out(doc)


async def update_project_helper(project_id: str, fields: Dict[str, Any], image: Optional[UploadFile] = None) -> ProjectOut:
    """Replace every editable field; the image changes only when a new one is uploaded."""
    oid = _object_id(project_id)
    project = build_project(fields)
    collection = _collection()

    update = project.model_dump(by_alias=True, exclude={"image_url"})
    new_image = None
    if has_upload(image):
        new_image = await save_project_image(image)
        update["imageUrl"] = new_image

    try:
        previous = await collection.find_one_and_update(
            {"_id": oid}, {"$set": update}, return_document=ReturnDocument.BEFORE
        )
    except PyMongoError as e:
        logger.error(f"update_project_helper error: {e}")
        remove_uploaded_image(new_image)
        raise StorageUnavailableError(str(e)) from e

    if previous is None:
        remove_uploaded_image(new_image)
        raise NotFoundError("Project not found")

    if new_image and previous.get("imageUrl") != new_image:
        remove_uploaded_image(previous.get("imageUrl"))

    logger.info(f"Updated project {project_id}")
    return _to_out({**previous, **update})


async def delete_project_helper(project_id: str) -> dict:
    """Delete the record, then its uploaded image.

    The image removal is best-effort. If the process dies between the two
    steps the file stays behind as an orphan.
    """
    oid = _object_id(project_id)
    try:
        doc = await _collection().find_one_and_delete({"_id": oid})
    except PyMongoError as e:
        logger.error(f"delete_project_helper error: {e}")
        raise StorageUnavailableError(str(e)) from e
    if doc is None:
        raise NotFoundError("Project not found")

    image_removed = remove_uploaded_image(doc.get("imageUrl"))
    logger.info(f"Deleted project {project_id} (image removed: {image_removed})")
    return {"detail": "Project deleted successfully", "imageRemoved": image_removed}
