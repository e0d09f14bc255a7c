from typing import Any, Optional, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict

from ..services import catalog
from .deps import get_settings

router = APIRouter(prefix="/api", tags=["services"])


class EstimateBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    serviceId: Optional[Union[str, int]] = None
    durationMinutes: Optional[Any] = None


@router.get("/services")
def list_services():
    return {"success": True, "services": catalog.list_services()}


@router.post("/booking/estimate")
def estimate(body: EstimateBody, settings=Depends(get_settings)):
    return {"success": True, **catalog.estimate(body.serviceId, body.durationMinutes, settings.currency)}
