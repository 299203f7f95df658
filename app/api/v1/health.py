import firebase_admin
from fastapi import APIRouter

from app.core.firebase import UNKNOWN_PROJECT_ID, get_project_id

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {"ok": True}


@router.get("/_debug/project")
async def debug_project():
    try:
        app = firebase_admin.get_app()
    except ValueError:
        return {"projectId": UNKNOWN_PROJECT_ID}
    return {"projectId": get_project_id(app)}
