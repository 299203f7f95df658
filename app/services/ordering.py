from datetime import datetime
from typing import Any, Dict, List

from app.services.dates import parse_datetime


def _created_at_key(doc: Dict[str, Any]) -> float:
    created_at = doc.get("createdAt")
    if isinstance(created_at, datetime):
        return created_at.timestamp()
    return 0.0


def newest_first(docs: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Ordena por createdAt desc; sem timestamp vai para o fim."""
    return sorted(docs, key=_created_at_key, reverse=True)


def _date_key(doc: Dict[str, Any]) -> float:
    parsed = parse_datetime(doc.get("date"))
    return parsed.timestamp() if parsed else 0.0


def latest_date_first(docs: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return sorted(docs, key=_date_key, reverse=True)
