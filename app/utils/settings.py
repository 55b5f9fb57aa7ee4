# app/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

DB_USERNAME = os.getenv("APP_DB_USERNAME", "postgres")
DB_PASSWORD = os.getenv("APP_DB_PASSWORD", "postgres")
DB_NAME = os.getenv("APP_DB_NAME", "postgres")
DB_HOST = "localhost"

HOST = "0.0.0.0"
PORT = 8010

MAX_PAGE_SIZE = 10
# products.id is a 32-bit SERIAL
MAX_PRODUCT_ID = 2**31 - 1
INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)
