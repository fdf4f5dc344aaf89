import os
from dotenv import load_dotenv
load_dotenv()

PORT = int(os.getenv("PORT", "3000"))

log_config = {
    "LEVEL": os.getenv("LOG_LEVEL", "INFO"),
    "TO_FILE": os.getenv("LOG_TO_FILE", "true").lower() == "true",
    "FILE_PATH": os.getenv("LOG_FILE", os.path.join("logs", "portfolio.log")),
    "ROTATION": "10 MB",
    "RETENTION": "30 days",
}

database_config = {
    "MONGO_URI": os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
    "DB_NAME": os.getenv("DB_NAME", "portfolio"),
    "SERVER_SELECTION_TIMEOUT_MS": int(os.getenv("MONGO_TIMEOUT_MS", "5000")),
    "PROJECT_COLLECTION": "projects",
    "CONTACT_COLLECTION": "contacts",
}

upload_config = {
    "UPLOAD_ROOT": os.getenv("UPLOAD_ROOT", "uploads"),
    "PROJECT_SUBDIR": "projects",
    "URL_PREFIX": "/uploads",
    "MAX_UPLOAD_BYTES": 5 * 1024 * 1024,  # 5MB
    "ALLOWED_EXTENSIONS": ("jpeg", "jpg", "png", "gif"),
}

email_config = {
    "EMAIL_HOST": os.getenv("EMAIL_HOST", "smtp.gmail.com"),
    "EMAIL_PORT": int(os.getenv("EMAIL_PORT", "587")),
    "EMAIL_USER": os.getenv("EMAIL_USER"),
    "EMAIL_PASS": os.getenv("EMAIL_PASS"),
    "ADMIN_EMAIL": os.getenv("ADMIN_EMAIL") or os.getenv("EMAIL_USER"),
    "TIMEOUT_SECONDS": 20,
}

client_store_config = {
    "DATA_DIR": os.getenv("CLIENT_DATA_DIR", ".portfolio_data"),
    "STORAGE_KEY": "portfolio-projects",
    "PLACEHOLDER_IMAGE": "https://via.placeholder.com/400x250",
}
