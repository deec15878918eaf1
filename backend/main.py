"""
App setup, middleware, lifespan
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import query, root
from core.config import settings
from core.logging_config import setup_logging
from core.startup import initialize_rag_system, cleanup_rag_system

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic"""
    await initialize_rag_system(app)
    try:
        yield
    finally:
        # shutdown
        await cleanup_rag_system(app)


app = FastAPI(title="Pinecone Relevance API", lifespan=lifespan)


# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allows all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)

# Include routes
app.include_router(root.router)
app.include_router(query.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
