from fastapi import Depends
from sqlmodel import Session

from app.core.database import get_session
from app.services.users import UserStore


def get_user_store(session: Session = Depends(get_session)) -> UserStore:
    return UserStore(session)
