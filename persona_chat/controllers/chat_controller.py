"""Controllers for chat endpoints."""

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from loguru import logger

from ..models.chat_request import ChatRequest
from ..models.chat_response import ChatResponse
from ..services.chat_service import ChatService, get_chat_service

router = APIRouter(prefix="", tags=["Chat"])


def status_code_for(response: ChatResponse) -> int:
    """Map a pipeline outcome to an HTTP status code."""
    if response.success:
        return status.HTTP_200_OK
    if response.error_kind is not None and not response.error_kind.is_client_error:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ChatResponse}, 500: {"model": ChatResponse}},
)
async def chat_endpoint(
    request: ChatRequest,
    service: ChatService = Depends(get_chat_service),
) -> JSONResponse:
    """Accept a chat request and return the persona's reply.

    The pipeline blocks on the model call, so it runs in the worker
    threadpool.  Business rule violations are returned with status 400
    and internal faults with status 500; both carry a ``ChatResponse``
    body with ``success`` set to false.
    """
    logger.info("Received chat request for persona {}", request.persona_id)
    response = await run_in_threadpool(service.process_chat_request, request)
    code = status_code_for(response)
    if response.success:
        logger.info("Answer generated successfully")
    else:
        logger.warning("Chat request failed with status {}: {}", code, response.error)
    return JSONResponse(
        status_code=code,
        content=response.model_dump(mode="json", by_alias=True),
    )
