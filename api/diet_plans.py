"""Diet plan endpoints."""

from datetime import datetime
from fastapi import APIRouter, Depends
from typing import List

from database.deps import get_diet_plan_service
from schemas import DietPlanIn, DietPlanOut
from services.diet_plan_service import DietPlanService

router = APIRouter(prefix="/api/diet-plans", tags=["diet plans"])


@router.get("", response_model=List[DietPlanOut])
def list_plans(service: DietPlanService = Depends(get_diet_plan_service)):
    return [DietPlanOut.from_domain(p) for p in service.list()]


@router.post("", response_model=DietPlanOut, status_code=201)
def create_plan(payload: DietPlanIn, service: DietPlanService = Depends(get_diet_plan_service)):
    return DietPlanOut.from_domain(service.create(payload.to_domain()))


@router.get("/active", response_model=DietPlanOut)
def get_active_plan(service: DietPlanService = Depends(get_diet_plan_service)):
    """Return the active plan, or 404 when none is active."""
    return DietPlanOut.from_domain(service.get_active())


@router.post("/{plan_id}/activate", response_model=DietPlanOut)
def activate_plan(plan_id: int, service: DietPlanService = Depends(get_diet_plan_service)):
    """End the current plan and make `plan_id` active as of now."""
    return DietPlanOut.from_domain(service.switch_to(plan_id, datetime.utcnow()))
