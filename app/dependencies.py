# app/dependencies.py

from app.db.courses_likes_dal import CoursesLikesDAL
from app.db.supabase_client import get_supabase_client_for_user
from app.policy.courses_likes import Caller, PolicyEnforcedLikesDAL
from app.utils.logging import get_logger
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from supabase import AuthApiError

logger = get_logger(__name__)

security = HTTPBearer()


def get_client(credentials: HTTPAuthorizationCredentials = Depends(security)):
    if not credentials:
        raise HTTPException(status_code=401, detail="Missing token")
    jwt = credentials.credentials
    return get_supabase_client_for_user(jwt)


# Resolves the authenticated user behind the bearer token.
# Only rejections from the Auth API become 401, transport faults propagate as 500.
def get_caller(credentials: HTTPAuthorizationCredentials = Depends(security), client=Depends(get_client)) -> Caller:
    try:
        response = client.auth.get_user(credentials.credentials)
    except AuthApiError as e:
        logger.info("Token rejected by Supabase Auth: %s", type(e).__name__)
        raise HTTPException(status_code=401, detail="Invalid token")
    if response is None or response.user is None:
        raise HTTPException(status_code=401, detail="Invalid token")
    return Caller.user(response.user.id)


# User-scoped DAL. RLS applies in the database, the policy applies here as well.
def get_likes_dal(client=Depends(get_client), caller: Caller = Depends(get_caller)) -> PolicyEnforcedLikesDAL:
    return PolicyEnforcedLikesDAL(CoursesLikesDAL(client), caller)
