from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from student_api.api.deps import get_remote_function
from student_api.services.proxy.remote_function import DEFAULT_KEYWORD, RemoteFunctionService

router = APIRouter()


@router.get("/say", summary="Relay a keyword to the remote function")
async def say(
    keyword: str = Query(DEFAULT_KEYWORD, description="Text for the remote function to echo"),
    remote: RemoteFunctionService = Depends(get_remote_function),
):
    """
    Returns the remote function's response body unchanged.
    """
    upstream = await remote.say(keyword)
    return Response(
        content=upstream.content,
        media_type=upstream.headers.get("content-type", "text/plain"),
    )
