from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Path

from omniplan.api.dependencies import get_store
from omniplan.domain.Week import Week
from omniplan.infra.Week_Store import WeekStore
from omniplan.logic.habits.activity import (
    add_habit,
    archive_stale_habits,
    delete_habit_from_week,
    get_visible_habits,
    toggle_habit,
)
from omniplan.logic.habits.streaks import calculate_habit_streak
from omniplan.logic.planning.editing import (
    add_todo,
    delete_event,
    remove_todo,
    save_event,
    set_day_notes,
    set_focus,
    set_goals,
    set_week_notes,
    toggle_todo,
)
from omniplan.logic.weeks.lifecycle import get_month_weeks, get_or_create_week, get_week_summary
from omniplan.utilities.dates import get_week_days, get_week_storage_key
from omniplan.utilities.validators import (
    EventInput,
    FocusInput,
    GoalsInput,
    HabitCreateInput,
    HabitToggleInput,
    NotesInput,
    TodoInput,
    WeekInput,
)

router = APIRouter(prefix="/api")


def _week_payload(week: Week) -> dict:
    return {"weekKey": week.storage_key, "week": week.to_dict()}


def _commit(store: WeekStore, week: Week) -> dict:
    return _week_payload(store.update_week(week.storage_key, week))


# -------------------- Weeks --------------------
@router.get("/weeks/{day}")
def read_week(day: date, store: WeekStore = Depends(get_store)):
    """Week containing ``day``; a week not stored yet is derived but not saved."""
    return _week_payload(get_or_create_week(day, store))


@router.put("/weeks/{day}")
def write_week(day: date, payload: WeekInput, store: WeekStore = Depends(get_store)):
    try:
        week = Week.from_dict(payload.week)
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid week record: {e}")
    if week.storage_key != get_week_storage_key(day):
        raise HTTPException(status_code=400, detail=f"Week {week.week_start_date} does not contain {day}")
    return _commit(store, week)


@router.get("/weeks/{day}/summary")
def read_week_summary(day: date, store: WeekStore = Depends(get_store)):
    return get_week_summary(get_or_create_week(day, store))


@router.put("/weeks/{day}/goals")
def update_goals(day: date, payload: GoalsInput, store: WeekStore = Depends(get_store)):
    week = get_or_create_week(day, store)
    return _commit(store, set_goals(week, business=payload.business, personal=payload.personal))


@router.put("/weeks/{day}/notes")
def update_week_notes(day: date, payload: NotesInput, store: WeekStore = Depends(get_store)):
    return _commit(store, set_week_notes(get_or_create_week(day, store), payload.notes))


@router.get("/months/{year}/{month}")
def read_month(year: int = Path(..., ge=1, le=9999), month: int = Path(..., ge=1, le=12),
               store: WeekStore = Depends(get_store)):
    weeks = get_month_weeks(year, month, store)
    return {"year": year, "month": month, "weeks": [w.to_dict() for w in weeks]}


# -------------------- Habits --------------------
@router.get("/weeks/{day}/habits")
def read_habits(day: date, store: WeekStore = Depends(get_store)):
    """Visible habits of the week with their streaks over the week's days."""
    week = get_or_create_week(day, store)
    dates = get_week_days(day)
    today = date.today()
    return {
        "weekKey": week.storage_key,
        "habits": [
            {"habit": h.to_dict(), "streak": calculate_habit_streak(h, dates, today=today).to_dict()}
            for h in get_visible_habits(week)
        ],
    }


@router.post("/weeks/{day}/habits", status_code=201)
def create_habit(day: date, payload: HabitCreateInput, store: WeekStore = Depends(get_store)):
    return _commit(store, add_habit(get_or_create_week(day, store), payload.name))


@router.post("/weeks/{day}/habits/archive-stale")
def archive_habits(day: date, store: WeekStore = Depends(get_store)):
    week = get_or_create_week(day, store)
    archived = archive_stale_habits(week)
    if archived is week:
        return _week_payload(week)
    return _commit(store, archived)


@router.post("/weeks/{day}/habits/{habit_id}/toggle")
def toggle_habit_day(day: date, habit_id: str, payload: HabitToggleInput, store: WeekStore = Depends(get_store)):
    return _commit(store, toggle_habit(get_or_create_week(day, store), habit_id, payload.day_key))


@router.delete("/weeks/{day}/habits/{habit_id}")
def remove_habit(day: date, habit_id: str, store: WeekStore = Depends(get_store)):
    return _commit(store, delete_habit_from_week(get_or_create_week(day, store), habit_id))


# -------------------- Days --------------------
@router.put("/weeks/{day}/days/{day_key}/focus")
def update_focus(day: date, day_key: str, payload: FocusInput, store: WeekStore = Depends(get_store)):
    return _commit(store, set_focus(get_or_create_week(day, store), day_key, payload.focus))


@router.put("/weeks/{day}/days/{day_key}/notes")
def update_day_notes(day: date, day_key: str, payload: NotesInput, store: WeekStore = Depends(get_store)):
    return _commit(store, set_day_notes(get_or_create_week(day, store), day_key, payload.notes))


@router.post("/weeks/{day}/days/{day_key}/todos", status_code=201)
def create_todo(day: date, day_key: str, payload: TodoInput, store: WeekStore = Depends(get_store)):
    return _commit(store, add_todo(get_or_create_week(day, store), day_key, payload.text))


@router.post("/weeks/{day}/days/{day_key}/todos/{todo_id}/toggle")
def toggle_day_todo(day: date, day_key: str, todo_id: str, store: WeekStore = Depends(get_store)):
    return _commit(store, toggle_todo(get_or_create_week(day, store), day_key, todo_id))


@router.delete("/weeks/{day}/days/{day_key}/todos/{todo_id}")
def delete_day_todo(day: date, day_key: str, todo_id: str, store: WeekStore = Depends(get_store)):
    return _commit(store, remove_todo(get_or_create_week(day, store), day_key, todo_id))


@router.post("/weeks/{day}/meetings", status_code=201)
def create_meeting(day: date, payload: TodoInput, store: WeekStore = Depends(get_store)):
    return _commit(store, add_todo(get_or_create_week(day, store), None, payload.text))


@router.post("/weeks/{day}/meetings/{todo_id}/toggle")
def toggle_meeting(day: date, todo_id: str, store: WeekStore = Depends(get_store)):
    return _commit(store, toggle_todo(get_or_create_week(day, store), None, todo_id))


@router.put("/weeks/{day}/days/{day_key}/events")
def upsert_event(day: date, day_key: str, payload: EventInput, store: WeekStore = Depends(get_store)):
    week = save_event(
        get_or_create_week(day, store),
        day_key,
        title=payload.title,
        start_hour=payload.start_hour,
        duration=payload.duration,
        event_id=payload.id,
        repeating=payload.repeating,
        color=payload.color,
        description=payload.description,
    )
    return _commit(store, week)


@router.delete("/weeks/{day}/days/{day_key}/events/{event_id}")
def remove_event(day: date, day_key: str, event_id: str, store: WeekStore = Depends(get_store)):
    return _commit(store, delete_event(get_or_create_week(day, store), day_key, event_id))
