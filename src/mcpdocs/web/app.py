"""FastAPI application exposing search, browsing and document reads."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from mcpdocs.config import AppConfig
from mcpdocs.corpus.scanner import CorpusScanner
from mcpdocs.errors import InvalidIdentifier, IOFailure, NotFound
from mcpdocs.index.categories import CategoryBrowser
from mcpdocs.index.search import Searcher
from mcpdocs.models import OVERVIEW, Category
from mcpdocs.render import (
    category_values,
    format_category,
    format_overview,
    format_search_results,
)
from mcpdocs.resources import ResourceCatalog

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="mcpdocs", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

SearchCategory = Literal[
    "all",
    "getting_started",
    "concepts",
    "development",
    "specification",
    "tools",
    "community",
]


class SearchPayload(BaseModel):
    query: str
    category: SearchCategory = "all"


def _resolve_docs_dir() -> Path:
    docs_dir = getattr(app.state, "docs_dir", None)
    config = AppConfig(docs_dir=docs_dir if docs_dir is not None else AppConfig().docs_dir)
    return config.resolve_docs_dir(Path.cwd())


def _build_scanner() -> CorpusScanner:
    return CorpusScanner(_resolve_docs_dir(), extension=AppConfig().extension)


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.post("/search")
def search_documents(payload: SearchPayload) -> dict[str, Any]:
    config = AppConfig()
    searcher = Searcher(_build_scanner(), scheme=config.uri_scheme)
    results = searcher.search(payload.query, category=payload.category)
    return {
        "query": payload.query,
        "category": payload.category,
        "results": results,
        "text": format_search_results(
            payload.query, results, category=payload.category, limit=config.display_limit
        ),
    }


@app.get("/categories/{category}")
def browse_category(category: str) -> dict[str, Any]:
    browser = CategoryBrowser(_build_scanner(), scheme=AppConfig().uri_scheme)

    if category == OVERVIEW:
        groups = browser.overview()
        return {
            "category": OVERVIEW,
            "groups": [
                {
                    "category": group.category,
                    "total": group.total,
                    "documents": group.documents,
                    "remaining": group.remaining,
                }
                for group in groups
            ],
            "text": format_overview(groups),
        }

    try:
        wanted = Category(category)
    except ValueError:
        wanted = None
    if wanted is None or wanted is Category.OTHER:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown category: {category}. Choose overview, {category_values()}",
        )

    documents = browser.browse(wanted)
    return {
        "category": wanted,
        "empty": not documents,
        "documents": documents,
        "text": format_category(wanted, documents),
    }


@app.get("/resources")
def list_resources() -> dict[str, Any]:
    """List every document as a resource descriptor."""
    config = AppConfig()
    catalog = ResourceCatalog(_build_scanner(), scheme=config.uri_scheme, mime_type=config.mime_type)
    return {"resources": catalog.list_resources()}


@app.get("/resources/read")
def read_resource(uri: str) -> dict[str, Any]:
    """Fetch one document by reference."""
    config = AppConfig()
    catalog = ResourceCatalog(_build_scanner(), scheme=config.uri_scheme, mime_type=config.mime_type)
    try:
        content = catalog.read_resource(uri)
    except InvalidIdentifier as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except NotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except IOFailure as exc:
        LOGGER.error("Unable to read %s: %s", uri, exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return {
        "uri": content.uri,
        "mimeType": content.mime_type,
        "text": content.text,
        "lastModified": content.last_modified,
    }
