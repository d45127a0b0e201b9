"""
Dependency injection for the Client service
"""

import json
from decimal import Decimal

from fastapi import Depends, Request

from app.core.bootstrap import ServiceContext
from app.schemas.client import ClientCreate
from app.services.client import ClientService


def get_service_context(request: Request) -> ServiceContext:
    """Service context built at startup and attached to the application"""
    return request.app.state.context


def get_client_service(
    context: ServiceContext = Depends(get_service_context),
) -> ClientService:
    """Get client service instance"""
    return ClientService(context.store, context.publisher)


async def get_client_body(request: Request) -> ClientCreate:
    """
    Client fields read from the request body.

    A body that is missing, not JSON or not a JSON object yields an empty
    client, which the store then rejects. Non-integer numbers are parsed as
    Decimal so DynamoDB accepts them.
    """
    raw = await request.body()
    try:
        data = json.loads(raw, parse_float=Decimal)
    except ValueError:
        data = {}

    if not isinstance(data, dict):
        data = {}

    return ClientCreate.model_validate(data)
