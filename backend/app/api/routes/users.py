from typing import List

from fastapi import APIRouter, Depends, Path

from app.api.deps import get_user_store
from app.schemas.user import UserCreate, UserDeleted, UserRead, UserUpdate
from app.services.users import UserStore

router = APIRouter(prefix="/users", tags=["users"])

# largest id a BIGINT primary key can hold
MAX_USER_ID = 2**63 - 1


@router.get("", response_model=List[UserRead])
def list_users(store: UserStore = Depends(get_user_store)):
    return store.list_users()


@router.post("", response_model=UserRead, status_code=201)
def create_user(data: UserCreate, store: UserStore = Depends(get_user_store)):
    return store.create_user(data)


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int = Path(gt=0, le=MAX_USER_ID), store: UserStore = Depends(get_user_store)):
    return store.get_user(user_id)


@router.put("/{user_id}", response_model=UserRead)
@router.patch("/{user_id}", response_model=UserRead)
def update_user(data: UserUpdate, user_id: int = Path(gt=0, le=MAX_USER_ID), store: UserStore = Depends(get_user_store)):
    return store.update_user(user_id, data)


@router.delete("/{user_id}", response_model=UserDeleted)
def delete_user(user_id: int = Path(gt=0, le=MAX_USER_ID), store: UserStore = Depends(get_user_store)):
    return UserDeleted(id=store.delete_user(user_id))
