# ========================================
# app/routes/users.py
# ========================================

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.database import get_db
from app.schemas.common import CreatedResponse, MessageResponse
from app.schemas.user import SetPasswordRequest, TokenResponse, UserCreate, UserLogin, UserResponse
from app.services import users as user_service
from app.utils.auth import create_access_token, get_current_user

router = APIRouter(prefix="/api/users", tags=["Users"])


# ✅ 1. LIST USERS
@router.get("", response_model=List[UserResponse])
async def list_users(db=Depends(get_db)):
    return await user_service.list_users(db)


# ✅ 2. REGISTER (sends the set-password email)
@router.post("/register", response_model=CreatedResponse, status_code=201)
async def register_user(user: UserCreate, db=Depends(get_db)):
    """Create an account and email the user a one-hour set-password link."""
    insert_id = await user_service.register_user(db, user.name, user.email, user.role)
    return {"message": "User created successfully! A setup email has been sent.", "insert_id": insert_id}


# ✅ 3. SET PASSWORD FROM EMAILED TOKEN
@router.post("/set-password", response_model=MessageResponse)
async def set_password(request: SetPasswordRequest, db=Depends(get_db)):
    await user_service.set_password(db, request.token, request.password)
    return {"message": "Password has been set successfully."}


# ✅ 4. LOGIN
@router.post("/login", response_model=TokenResponse)
async def login(user_credentials: UserLogin, db=Depends(get_db)):
    """Login and get JWT access token."""
    user = await user_service.authenticate(db, user_credentials.email, user_credentials.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    access_token = create_access_token(data={"sub": str(user["_id"]), "role": user.get("role")})
    return {"access_token": access_token, "token_type": "bearer"}


# ✅ 5. CURRENT USER
@router.get("/me", response_model=UserResponse)
async def get_me(current_user: dict = Depends(get_current_user)):
    current_user["id"] = str(current_user["_id"])
    return current_user
