import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import PORT, configure_logging, get_cors_origins
from .routers import attributes, matches

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Super Trunfo API",
    description="API for comparing two city cards on two attributes.",
    version="0.1.0"
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
# --- End CORS Middleware ---


app.include_router(attributes.router) # Handles /attributes/
app.include_router(matches.router) # Handles /matches/


@app.get("/")
async def read_root():
    """
    Root endpoint providing a welcome message.
    Useful for basic connectivity checks.
    """
    return {"message": "Super Trunfo API"}

@app.get("/health")
async def health_check():
    """
    Health check endpoint to ensure the API is running.
    """
    return {"status": "ok"}


def run():
    import uvicorn
    configure_logging()
    logger.info("Starting Super Trunfo API on port %s", PORT)
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    run()
