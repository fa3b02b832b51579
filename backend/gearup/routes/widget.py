"""
Widget Routes - Read-only home-screen widget state
"""
from fastapi import APIRouter, Depends

from gearup.core.dependencies import get_record_store
from gearup.services.progress import build_widget_state
from gearup.storage import RecordStore

router = APIRouter(tags=["widget"])


@router.get("/widget")
async def get_widget_state(store: RecordStore = Depends(get_record_store)):
    """Today's progress as rendered by the widget"""
    return build_widget_state(store)
