from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from student_api.api.deps import get_context
from student_api.core.context import AppContext
from student_api.core.database import check_database_connection

router = APIRouter()


@router.get("/", summary="Service info")
async def root(context: AppContext = Depends(get_context)):
    """
    Health check endpoint
    """
    return {
        "message": f"Welcome to {context.settings.PROJECT_NAME}",
        "docs": context.settings.DOCS_URL,
        "version": context.settings.APP_VERSION
    }


@router.get("/health", summary="Database readiness")
async def health(context: AppContext = Depends(get_context)):
    if await check_database_connection(context.engine):
        return {"status": "ok"}
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"status": "unavailable"})
