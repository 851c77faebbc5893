from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from student_api.core.context import AppContext
from student_api.services.proxy.remote_function import RemoteFunctionService


def get_context(request: Request) -> AppContext:
    return request.app.state.context


async def get_db(context: AppContext = Depends(get_context)) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides one database session per request.

    The session checks a connection out of the pool on its first statement
    and gives it back when closed, whether the request succeeded or not.
    """
    async with context.session_factory() as db:
        yield db


def get_remote_function(context: AppContext = Depends(get_context)) -> RemoteFunctionService:
    return RemoteFunctionService(context.http_client, context.settings.REMOTE_FUNCTION_URL)
