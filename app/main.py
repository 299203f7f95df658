import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router, public_router
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.firebase import create_firestore_client, initialize_firebase

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Onemorerep API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(public_router)
app.include_router(api_router)


@app.on_event("startup")
async def startup_event():
    firebase_app = initialize_firebase(settings)
    app.state.db = create_firestore_client(firebase_app)
    logger.info(f"Onemorerep API rodando em http://localhost:{settings.PORT}")
