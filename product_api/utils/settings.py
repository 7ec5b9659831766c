# product_api/utils/settings.py
import os
from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


def build_database_url(user: str, password: str, dbname: str) -> str:
    #host zostaje pusty, libpq bierze domyslny; bez TLS
    return URL.create(
        "postgresql",
        username=user,
        password=password,
        database=dbname,
        query={"sslmode": "disable"},
    ).render_as_string(hide_password=False)


APP_DB_USERNAME = os.getenv("APP_DB_USERNAME", "postgres")
APP_DB_PASSWORD = os.getenv("APP_DB_PASSWORD", "")
APP_DB_NAME = os.getenv("APP_DB_NAME", "postgres")

DATABASE_URL = os.getenv("DATABASE_URL") or build_database_url(
    APP_DB_USERNAME, APP_DB_PASSWORD, APP_DB_NAME
)
DB_CONNECT_ATTEMPTS = int(os.getenv("DB_CONNECT_ATTEMPTS", 3))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

APP_PORT = 8010
