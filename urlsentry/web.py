# urlsentry/web.py

from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel

from urlsentry.analyzers.url_analyzer import classify
from urlsentry.errors import FetchError, MalformedURLError
from urlsentry.fetch.content_fetcher import fetch_content
from urlsentry.history.storage import DiskCacheStorage
from urlsentry.history.store import HistoryStore, entry_from_assessment

app = FastAPI(
    title="URL Sentry API",
    version="1.0.0",
    description="Heuristic reputation and threat classification for URLs"
)


class ExternalAssessment(BaseModel):
    scoreMin: float
    scoreMax: float
    label: Optional[str] = None
    category: Optional[str] = None
    threatDescription: str = ""
    reputationDescription: str = ""


class ClassifyRequest(BaseModel):
    url: str
    assessment: Optional[ExternalAssessment] = None
    save: bool = True


@lru_cache(maxsize=1)
def get_store() -> HistoryStore:
    return HistoryStore(DiskCacheStorage())


@app.get("/api/v1/fetch-content")
def fetch_content_route(url: Optional[str] = Query(None, description="Page to fetch")):
    if not url:
        raise HTTPException(status_code=400, detail="URL parameter is missing")
    try:
        return {"content": fetch_content(url)}
    except FetchError as e:
        raise HTTPException(status_code=e.status or 500, detail=e.message)


@app.post("/api/v1/classify")
def classify_route(request: ClassifyRequest, store: HistoryStore = Depends(get_store)):
    external = request.assessment.model_dump() if request.assessment else None
    try:
        result = classify(request.url, external)
    except MalformedURLError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if request.save:
        store.insert(entry_from_assessment(result))
    return result.to_dict()


@app.get("/api/v1/history")
def history_route(store: HistoryStore = Depends(get_store)):
    return [entry.to_dict() for entry in store.list()]


@app.delete("/api/v1/history")
def clear_history_route(store: HistoryStore = Depends(get_store)):
    store.clear()
    return {"cleared": True}
