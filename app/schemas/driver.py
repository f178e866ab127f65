from pydantic import BaseModel, ConfigDict, Field

class DriverCreate(BaseModel):
    name: str = Field(min_length=1)
    number: int
    team: str = Field(min_length=1)
    code: str = Field(min_length=2, max_length=3)
    is_active: bool = True

class DriverOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    number: int
    team: str
    code: str
    is_active: bool
