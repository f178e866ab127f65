from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy import or_
from sqlalchemy.orm import Session
from app.schemas.user import UserCreate, UserLogin, UserOut, Availability
from app.db.models.user import User
from app.core.security import hash_password, verify_password, create_access_token, validate_password
from app.core.deps import get_current_user, get_db

router = APIRouter(prefix="/auth", tags=["Auth"])

@router.post("/register", response_model=UserOut, status_code=201)
def register(user: UserCreate, db: Session = Depends(get_db)):
    # 1. Validar contraseña
    password_error = validate_password(user.password)
    if password_error:
        raise HTTPException(status_code=400, detail=password_error)

    # 2. Validar que no exista email o username
    if db.query(User).filter(User.email == user.email).first():
        raise HTTPException(status_code=409, detail="Email already registered")

    if db.query(User).filter(User.username == user.username).first():
        raise HTTPException(status_code=409, detail="Username already taken")

    # 3. Crear usuario
    new_user = User(
        name=user.name,
        email=user.email,
        username=user.username,
        hashed_password=hash_password(user.password),
        is_admin=False # Por defecto
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    return new_user

@router.post("/login")
def login(user: UserLogin, db: Session = Depends(get_db)):
    db_user = db.query(User).filter(
        or_(User.email == user.identifier, User.username == user.identifier)
    ).first()
    if not db_user or not verify_password(user.password, db_user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token({
        "sub": str(db_user.id),
        "username": db_user.username,
        "is_admin": db_user.is_admin,
    })

    return {"access_token": token, "token_type": "bearer"}

@router.get("/me", response_model=UserOut)
def get_current_user_data(current_user: User = Depends(get_current_user)):
    return current_user

@router.get("/check-email", response_model=Availability)
def check_email(email: str = "", db: Session = Depends(get_db)):
    if not email.strip():
        raise HTTPException(status_code=400, detail="Email parameter is required")

    existing = db.query(User).filter(User.email == email.strip()).first()
    return {"available": existing is None}

@router.get("/check-username", response_model=Availability)
def check_username(username: str = "", db: Session = Depends(get_db)):
    if not username.strip():
        raise HTTPException(status_code=400, detail="Username parameter is required")

    existing = db.query(User).filter(User.username == username.strip()).first()
    return {"available": existing is None}
