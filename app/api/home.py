"""
Home/Root API endpoint
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def root():
    """Health check confirming the service is up"""
    return "Client Service Running"
