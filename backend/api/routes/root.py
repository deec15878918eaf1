"""
Root and health check endpoints
"""

from fastapi import APIRouter

router = APIRouter(tags=["root"])


@router.get("/")
async def root():
    """API root endpoint - returns API information"""
    return {
        "name": "Pinecone Relevance API",
        "version": "0.1.0",
        "docs": "/docs",
        "endpoints": {
            "query": "/api/v1/query",
            "tools": "/api/v1/tools",
        }
    }


@router.get("/health")
async def health():
    """Liveness check"""
    return {"status": "ok"}
