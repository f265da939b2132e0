from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prepmind.api import ai, catalog, execution, health, interview, sessions
from prepmind.config import settings
from prepmind.logging_config import setup_logging
from prepmind.services.gateway import ai_gateway

setup_logging(settings.LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await ai_gateway.aclose()

app = FastAPI(
    title="PrepMind API",
    description="Backend API for AI-powered mock interviews",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for frontend communication
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(ai.router, prefix="/api", tags=["ai"])
app.include_router(execution.router, prefix="/api", tags=["code"])
app.include_router(interview.router, prefix="/api/interview", tags=["interview"])
app.include_router(sessions.router, prefix="/api", tags=["history"])
app.include_router(catalog.router, prefix="/api/catalog", tags=["catalog"])

@app.get("/")
async def root():
    return {"message": "PrepMind API is running!"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
