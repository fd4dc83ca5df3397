import os
from dotenv import load_dotenv

load_dotenv()  # Carga las variables de entorno

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Origin", "Content-Type", "Accept", "Authorization"]
CORS_EXPOSE_HEADERS = ["Content-Length"]
CORS_MAX_AGE = 60 * 60 * 12  # 12 horas

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

SEED_DATA = os.getenv("SEED_DATA", "true").lower() in ("1", "true", "yes")
