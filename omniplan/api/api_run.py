from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from omniplan.domain.Week import WeekEditError

# Routers
from omniplan.api.routes import data, weeks
from omniplan.api.api_ai import router as ai_router

# Logging
logger = logging.getLogger("omniplan_app")

# Initialize FastAPI app
app = FastAPI(title="OmniPlan Executive Planner API")

# Include routers
app.include_router(weeks.router)
app.include_router(data.router)
app.include_router(ai_router)


# -------------------- Error mapping --------------------
@app.exception_handler(WeekEditError)
async def _week_edit_error(request: Request, exc: WeekEditError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(ValueError)
async def _value_error(request: Request, exc: ValueError):
    logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/api/health")
def health():
    return {"status": "ok"}
