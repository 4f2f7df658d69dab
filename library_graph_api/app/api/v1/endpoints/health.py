"""
Health check endpoint.

Reports that the process is up together with the current size of the
two collections, which is handy when poking at a running instance
after a few mutations.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def get_health(request: Request) -> Dict[str, Any]:
    store = request.app.state.store
    return {
        "status": "ok",
        "authors": len(store.authors),
        "books": len(store.books),
    }
