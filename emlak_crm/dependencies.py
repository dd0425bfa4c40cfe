from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from emlak_crm.core.security import extract_user_id
from emlak_crm.core.exceptions import UnauthorizedException
from emlak_crm.database import get_db
from emlak_crm.repositories.user_repository import UserRepository
from emlak_crm.models.user import User

security = HTTPBearer()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security), db: Session = Depends(get_db)
) -> User:
    """
    FastAPI dependency to validate JWT and get/create user.

    Flow:
    1. Extract token from Authorization: Bearer <token>
    2. Validate JWT using shared SECRET_KEY
    3. Extract auth_user_id from 'sub' claim
    4. Get or auto-create the agent's User record
    5. Return User object; every repository query is scoped by its id

    Raises:
        HTTPException 401: If token invalid or expired
    """
    try:
        auth_user_id = extract_user_id(credentials.credentials)
    except UnauthorizedException as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_repo = UserRepository(db)
    return user_repo.get_or_create_by_auth_id(auth_user_id)
