from portfolio.database.conn import mongo_client
from portfolio.utils.logger_utils import logger
from portfolio.utils.errors import StorageUnavailableError
from portfolio.models.analytics.analytics import AnalyticsOut
from portfolio.models.contact.contact import ContactSummary
from pymongo.errors import PyMongoError
from config import database_config

RECENT_CONTACTS_LIMIT = 5


async def get_analytics_helper() -> AnalyticsOut:
    db = mongo_client.database
    projects = db[database_config["PROJECT_COLLECTION"]]
    contacts = db[database_config["CONTACT_COLLECTION"]]
    try:
        total_projects = await projects.count_documents({})
        total_contacts = await contacts.count_documents({})
        unread_contacts = await contacts.count_documents({"read": False})
        featured_projects = await projects.count_documents({"featured": True})

        by_category = {}
        async for row in projects.aggregate([{"$group": {"_id": "$category", "count": {"$sum": 1}}}]):
            by_category[str(row["_id"])] = row["count"]

        # message bodies stay out of the summary view
        recent = []
        cursor = contacts.find(
            {},
            {"name": 1, "email": 1, "createdAt": 1, "read": 1},
            sort=[("createdAt", -1), ("_id", -1)],
            limit=RECENT_CONTACTS_LIMIT,
        )
        async for doc in cursor:
            doc["_id"] = str(doc["_id"])
            recent.append(ContactSummary.model_validate(doc))
    except PyMongoError as e:
        logger.error(f"get_analytics_helper error: {e}")
        raise StorageUnavailableError(str(e)) from e

    return AnalyticsOut(
        total_projects=total_projects,
        total_contacts=total_contacts,
        unread_contacts=unread_contacts,
        featured_projects=featured_projects,
        projects_by_category=by_category,
        recent_contacts=recent,
    )
