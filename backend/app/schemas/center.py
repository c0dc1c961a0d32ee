from pydantic import BaseModel
from typing import Optional


class CenterBase(BaseModel):
    name: str
    address: Optional[str] = None
    location_id: Optional[str] = None
    owner_name: Optional[str] = None
    owner_contact: Optional[str] = None
    maintenance_contact: Optional[str] = None
    gps_coordinates: Optional[str] = None


class CenterCreate(CenterBase):
    pass


class CenterUpdate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    location_id: Optional[str] = None
    owner_name: Optional[str] = None
    owner_contact: Optional[str] = None
    maintenance_contact: Optional[str] = None
    gps_coordinates: Optional[str] = None


class CenterOut(CenterBase):
    id: int

    model_config = {"from_attributes": True}
