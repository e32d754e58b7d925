from fastapi.security import APIKeyCookie

from laptopdesk.core.config import settings

# This tells FastAPI how to extract the session token from the httponly cookie
cookie_scheme = APIKeyCookie(name=settings.COOKIE_NAME, auto_error=False)
