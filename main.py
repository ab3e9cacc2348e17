import logging
from typing import Any, Dict, List

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import settings
from pages import PAGES, PageMeta, UnknownPageError, lookup
from schemas import COLLECTIONS, UnknownCollectionError, get_collection
from validation import ContentValidationError, to_data

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ==================
# FastAPI app config
# ==================
app = FastAPI(title="Portfolio Content API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =========
# Utilities
# =========

def collection_or_404(name: str):
    try:
        return get_collection(name)
    except UnknownCollectionError:
        raise HTTPException(status_code=404, detail=f"Unknown collection: {name}")


# ======
# Routes
# ======
@app.get("/")
def root():
    return {"status": "ok", "service": "portfolio-content"}

# Collections
@app.get("/api/collections")
def list_collections() -> List[Dict[str, Any]]:
    return [c.describe() for c in COLLECTIONS.values()]

@app.get("/api/collections/{name}")
def get_collection_schema(name: str):
    return collection_or_404(name).describe()

@app.post("/api/collections/{name}/validate")
def validate_entry(name: str, raw: Dict[str, Any] = Body(...)):
    collection = collection_or_404(name)
    try:
        record = collection.validate(raw)
    except ContentValidationError as exc:
        logger.info("Validation failed for %s: %s", name, ", ".join(exc.fields))
        return JSONResponse(
            status_code=422,
            content={"detail": [issue.model_dump() for issue in exc.issues]},
        )
    return {"valid": True, "data": to_data(record)}

# Pages
@app.get("/api/pages")
def list_pages() -> Dict[str, PageMeta]:
    return {page.value: meta for page, meta in PAGES.items()}

@app.get("/api/pages/{page_id}", response_model=PageMeta)
def get_page(page_id: str):
    try:
        return lookup(page_id)
    except UnknownPageError:
        raise HTTPException(status_code=404, detail=f"Unknown page: {page_id}")
