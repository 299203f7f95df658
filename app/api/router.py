from fastapi import APIRouter, Depends

from app.api.v1.exercise_classes import router as exercise_classes_router
from app.api.v1.exercises import router as exercises_router
from app.api.v1.health import router as health_router
from app.api.v1.sessions import router as sessions_router
from app.api.v1.workouts import router as workouts_router
from app.core.dependencies import verify_api_key

# health e debug ficam fora do X-API-Key
public_router = APIRouter()
public_router.include_router(health_router)

api_router = APIRouter(dependencies=[Depends(verify_api_key)])

api_router.include_router(exercise_classes_router)
api_router.include_router(exercises_router)
api_router.include_router(workouts_router)
api_router.include_router(sessions_router)
