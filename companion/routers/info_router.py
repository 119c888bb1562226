# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter
from fastapi.responses import JSONResponse

from companion.models.resources import ConditionInfo
from companion.schemas.info_schemas import CrisisResourceList, ErrorResponse
from companion.utils.mental_health_info import CRISIS_RESOURCES, get_condition_info

router = APIRouter(prefix="/api", tags=["Info"])


@router.get(
    "/mental-health-info/{condition}",
    response_model=ConditionInfo,
    responses={404: {"model": ErrorResponse}},
)
def mental_health_info(condition: str):
    info = get_condition_info(condition)
    if info is None:
        return JSONResponse(status_code=404, content={"error": "Condition not found"})
    return info


@router.get("/crisis-resources", response_model=CrisisResourceList)
def crisis_resources():
    return CrisisResourceList(resources=list(CRISIS_RESOURCES))
