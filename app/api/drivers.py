from typing import List
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session
from app.db.models.driver import Driver
from app.schemas.driver import DriverCreate, DriverOut
from app.core.deps import get_db, require_admin

router = APIRouter(prefix="/drivers", tags=["Drivers"])

@router.get("", response_model=List[DriverOut])
def list_drivers(db: Session = Depends(get_db)):
    return (
        db.query(Driver)
        .filter(Driver.is_active.is_(True))
        .order_by(Driver.name)
        .all()
    )

@router.post("", response_model=DriverOut, status_code=201)
def create_driver(
    driver: DriverCreate,
    db: Session = Depends(get_db),
    current_user = Depends(require_admin)
):
    code = driver.code.upper()
    if db.query(Driver).filter(Driver.code == code).first():
        raise HTTPException(status_code=400, detail="Driver with this code already exists")

    new_driver = Driver(
        name=driver.name,
        number=driver.number,
        team=driver.team,
        code=code,
        is_active=driver.is_active,
    )
    db.add(new_driver)
    db.commit()
    db.refresh(new_driver)

    return new_driver
