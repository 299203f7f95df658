import base64
import binascii
import json
import logging

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.cloud.firestore import AsyncClient

from app.core.config import Settings

logger = logging.getLogger(__name__)

UNKNOWN_PROJECT_ID = "(desconhecido)"


class FirebaseConfigError(RuntimeError):
    """Credenciais do Firebase presentes no ambiente, mas ilegíveis."""


def load_credential(settings: Settings) -> credentials.Base:
    """Escolhe a credencial do Firebase Admin a partir das variáveis de ambiente.

    Ordem: JSON da Service Account, o mesmo JSON em Base64, o trio
    project id / client email / private key e, por fim, Application Default.
    """
    if settings.FIREBASE_SERVICE_ACCOUNT:
        try:
            parsed = json.loads(settings.FIREBASE_SERVICE_ACCOUNT)
        except ValueError:
            raise FirebaseConfigError(
                "FIREBASE_SERVICE_ACCOUNT inválido. Garanta que o valor seja um JSON da Service Account."
            )
        return credentials.Certificate(parsed)

    if settings.FIREBASE_SERVICE_ACCOUNT_BASE64:
        try:
            raw = base64.b64decode(settings.FIREBASE_SERVICE_ACCOUNT_BASE64, validate=True)
            parsed = json.loads(raw.decode("utf-8"))
        except (binascii.Error, UnicodeDecodeError, ValueError):
            raise FirebaseConfigError(
                "FIREBASE_SERVICE_ACCOUNT_BASE64 inválido. O valor deve ser um JSON codificado em Base64."
            )
        return credentials.Certificate(parsed)

    if settings.FIREBASE_PROJECT_ID and settings.FIREBASE_CLIENT_EMAIL and settings.FIREBASE_PRIVATE_KEY:
        return credentials.Certificate({
            "type": "service_account",
            "project_id": settings.FIREBASE_PROJECT_ID,
            "client_email": settings.FIREBASE_CLIENT_EMAIL,
            "private_key": settings.FIREBASE_PRIVATE_KEY.replace("\\n", "\n"),
            "token_uri": "https://oauth2.googleapis.com/token",
        })

    return credentials.ApplicationDefault()


def initialize_firebase(settings: Settings) -> firebase_admin.App:
    """Inicializa o app padrão do Firebase Admin uma única vez."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    try:
        credential = load_credential(settings)
        app = firebase_admin.initialize_app(credential)
    except Exception as e:
        logger.error(f"Erro ao inicializar o Firebase Admin: {e}")
        raise

    logger.info("[Firestore] conectado com Service Account JSON")
    logger.info(f"Firestore Project ID em uso: {get_project_id(app)}")
    return app


def get_project_id(app: firebase_admin.App) -> str:
    # App.project_id consulta as opções, a credencial e GOOGLE_CLOUD_PROJECT
    return app.project_id or UNKNOWN_PROJECT_ID


def create_firestore_client(app: firebase_admin.App) -> AsyncClient:
    return firestore_async.client(app)
