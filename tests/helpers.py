from app.core.security import create_access_token
from app.models.user import User

API = "/api/v1"


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}
