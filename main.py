from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.structured_logging import RequestCorrelationMiddleware, configure_structured_logging
from env_config import Config
from models.api_models import HealthResponse
from routers import sync_six_router

configure_structured_logging()
Config.log_status()
Config.validate_required()

app = FastAPI(title="Sync Six API", version=Config.API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestCorrelationMiddleware)

app.include_router(sync_six_router)


@app.get("/")
def root():
    return {
        "status": "online",
        "message": "Sync Six Gematria + Numerology API",
        "version": Config.API_VERSION,
    }


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(
        engine_version=Config.ENGINE_VERSION,
        api_sports_configured=bool(Config.API_SPORTS_KEY),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=Config.PORT)
