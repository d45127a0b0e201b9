"""
Client API endpoints
"""

from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.core.errors import ClientErrorResponseModel, describe_error
from app.core.logger import logger
from app.dependencies.client import get_client_body, get_client_service
from app.schemas.client import ClientCreate, ClientResponse
from app.services.client import ClientService

router = APIRouter()


@router.post(
    "/clients",
    summary="Create a new client",
    description="Create a new client with required details",
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"model": ClientResponse, "description": "Client created"},
        500: {"model": ClientErrorResponseModel, "description": "Error creating client"},
    },
    # The body is read by get_client_body, so document it here
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ClientCreate.model_json_schema()}},
        }
    },
)
def create_client(
    client: ClientCreate = Depends(get_client_body),
    service: ClientService = Depends(get_client_service),
):
    logger.info(
        "Received request to create client",
        metadata={"event": "create_client_request", "body": client.model_dump(exclude_unset=True)},
    )

    try:
        item = service.create_client(client)
    except Exception as e:
        logger.error("Error creating client", error=e, metadata={"event": "create_client_error"})
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Error creating client", "error": describe_error(e)},
        )

    return JSONResponse(status_code=status.HTTP_201_CREATED, content=jsonable_encoder(item))
