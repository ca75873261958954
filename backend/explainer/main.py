import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from .errors import register_error_handlers
from .settings import settings
from .routers import health, explain

logging.basicConfig(
	level=settings.log_level.upper(),
	format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("explainer")

app = FastAPI(title="Explain Like I'm Busy API")
app.include_router(health.router)
app.include_router(explain.router)
register_error_handlers(app)

# The Streamlit page runs on its own origin
app.add_middleware(
	CORSMiddleware,
	allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
	allow_methods=["GET", "POST"],
	allow_headers=["*"],
)

@app.get("/", include_in_schema=False)
async def redirect_root_to_docs():
	return RedirectResponse(url="/docs")

@app.get("/info")
def root():
	return {"status": "ok", "openai_configured": bool(settings.openai_api_key), "model": settings.openai_model}

@app.on_event("startup")
async def startup_event():
	if not settings.openai_api_key:
		logger.warning("OPENAI_API_KEY is not set; /api/explain will answer 500 until it is configured")
	logger.info("Explainer API ready (model=%s)", settings.openai_model)
