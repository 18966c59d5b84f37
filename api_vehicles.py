# api_vehicles.py
from typing import Any, Dict, Sequence

from fastapi import APIRouter, Depends

from api_trips import get_catalogue
from services.catalogue import VehicleRecord

vehicles_router = APIRouter()


@vehicles_router.get("/vehicles")
def list_vehicles(catalogue: Sequence[VehicleRecord] = Depends(get_catalogue)) -> Dict[str, Any]:
    # Catalogue order, raw numbers (the UI fills its selectors from this)
    return {"vehicles": [v.to_dict() for v in catalogue]}
