from fastapi import APIRouter
from student_api.api.endpoints import health
from student_api.api.endpoints import proxy
from student_api.api.endpoints import students

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])

api_router.include_router(
    students.router,
    prefix="/students",
    tags=["students"]
)

api_router.include_router(proxy.router, tags=["proxy"])
