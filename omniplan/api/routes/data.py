from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
import logging

from omniplan.api.dependencies import get_store
from omniplan.domain.Email import Email
from omniplan.domain.LifeGoals import LifeGoals
from omniplan.infra.Week_Store import WeekStore
from omniplan.utilities.export_import import BackupImportError, DataExporter, DataImporter, backup_file_name

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


# -------------------- Backup --------------------
@router.get("/backup")
def export_backup(store: WeekStore = Depends(get_store)):
    """Full backup document, offered as a dated download."""
    return JSONResponse(
        content=DataExporter(store).export_backup(),
        headers={"Content-Disposition": f'attachment; filename="{backup_file_name()}"'},
    )


@router.post("/backup")
async def import_backup(request: Request, store: WeekStore = Depends(get_store)):
    """Replace all data with the posted backup file (current or legacy format)."""
    raw = await request.body()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Backup must be UTF-8 encoded JSON")
    try:
        data = DataImporter(store).import_backup(text)
    except BackupImportError as e:
        logger.warning(f"Backup rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "imported": True,
        "weeks": len(data.all_weeks),
        "emails": len(data.emails),
    }


# -------------------- Life goals --------------------
@router.get("/goals")
def read_life_goals(store: WeekStore = Depends(get_store)):
    return store.life_goals.to_dict()


@router.put("/goals")
def write_life_goals(goals: Dict[str, Any] = Body(...), store: WeekStore = Depends(get_store)):
    life_goals = LifeGoals.from_dict(goals)
    store.set_life_goals(life_goals)
    return life_goals.to_dict()


@router.put("/goals/{horizon}/{key}")
def write_life_goal_entry(horizon: str, key: str, value: Any = Body(..., embed=True),
                          store: WeekStore = Depends(get_store)):
    life_goals = store.life_goals.with_entry(horizon, key, value)
    store.set_life_goals(life_goals)
    return life_goals.to_dict()


# -------------------- Inbox --------------------
@router.get("/emails")
def read_emails(store: WeekStore = Depends(get_store)):
    return [e.to_dict() for e in store.emails]


@router.put("/emails")
def write_emails(emails: List[Dict[str, Any]] = Body(...), store: WeekStore = Depends(get_store)):
    parsed = [Email.from_dict(e) for e in emails]
    store.set_emails(parsed)
    return [e.to_dict() for e in parsed]
