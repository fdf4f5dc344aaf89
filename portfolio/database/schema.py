from typing import Any, Dict

from portfolio.database.conn import mongo_client
from portfolio.models.project.project import Category
from portfolio.utils.logger_utils import logger
from config import database_config


def _project_validator() -> Dict[str, Any]:
    return {
        "$jsonSchema": {
            "bsonType": "object",
            "required": ["title", "description", "technologies", "category", "featured", "createdAt"],
            "properties": {
                "title": {"bsonType": "string"},
                "description": {"bsonType": "string"},
                "technologies": {"bsonType": "array", "minItems": 1, "items": {"bsonType": "string"}},
                "demoUrl": {"bsonType": ["string", "null"]},
                "githubUrl": {"bsonType": ["string", "null"]},
                "imageUrl": {"bsonType": ["string", "null"]},
                "category": {"enum": [c.value for c in Category]},
                "featured": {"bsonType": "bool"},
                "createdAt": {"bsonType": "date"},
            },
        }
    }


def _contact_validator() -> Dict[str, Any]:
    return {
        "$jsonSchema": {
            "bsonType": "object",
            "required": ["name", "email", "message", "read", "createdAt"],
            "properties": {
                "name": {"bsonType": "string"},
                "email": {"bsonType": "string"},
                "message": {"bsonType": "string"},
                "read": {"bsonType": "bool"},
                "createdAt": {"bsonType": "date"},
            },
        }
    }


async def ensure_collections_and_indexes() -> None:
    """Create collections with validators and ensure indexes exist.

    This is idempotent and safe to call on every startup.
    """
    db = mongo_client.database

    collections: Dict[str, Dict[str, Any]] = {
        database_config["PROJECT_COLLECTION"]: _project_validator(),
        database_config["CONTACT_COLLECTION"]: _contact_validator(),
    }

    existing = await db.list_collection_names()

    for name, validator in collections.items():
        try:
            if name not in existing:
                await db.create_collection(name, validator=validator)
                logger.info(f"Created collection {name} with validator")
            else:
                try:
                    await db.command({
                        "collMod": name,
                        "validator": validator,
                        "validationLevel": "moderate",
                    })
                    logger.info(f"Updated validator for collection {name}")
                except Exception as e:
                    logger.warning(f"Could not update validator for {name}: {e}")
        except Exception as e:
            logger.error(f"Error ensuring collection {name}: {e}")

    projects = db[database_config["PROJECT_COLLECTION"]]
    try:
        await projects.create_index([("createdAt", -1)], name="idx_project_created_at")
        await projects.create_index("category", name="idx_project_category")
        await projects.create_index("featured", name="idx_project_featured")
    except Exception as e:
        logger.warning(f"Create index on projects failed or exists: {e}")

    contacts = db[database_config["CONTACT_COLLECTION"]]
    try:
        await contacts.create_index([("createdAt", -1)], name="idx_contact_created_at")
        await contacts.create_index("read", name="idx_contact_read")
    except Exception as e:
        logger.warning(f"Create index on contacts failed or exists: {e}")
