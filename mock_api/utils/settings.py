# mock_api/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8081))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOOKUP_SERVICE_URL = os.getenv("LOOKUP_SERVICE_URL", "http://localhost:8081")
LOOKUP_CLIENT_TIMEOUT = float(os.getenv("LOOKUP_CLIENT_TIMEOUT", 2))
