import os

# Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./apitranslate.db")
# Lock wait (SQLite) or connection checkout wait (pooled backends) before a store call fails
STORE_TIMEOUT_SECONDS = float(os.getenv("STORE_TIMEOUT_SECONDS", "5"))

# Translation provider
TRANSLATOR_ENDPOINT = os.getenv("TRANSLATOR_ENDPOINT", "https://api.cognitive.microsofttranslator.com")
TRANSLATOR_API_KEY = os.getenv("TRANSLATOR_API_KEY", "")
TRANSLATOR_REGION = os.getenv("TRANSLATOR_REGION", "")
TRANSLATOR_TIMEOUT_SECONDS = float(os.getenv("TRANSLATOR_TIMEOUT_SECONDS", "10"))

# Upper bound for the provider call made while serving a request
REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "15"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
