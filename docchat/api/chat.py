"""Chat endpoint: one message in, one reply out.

Dispatch errors propagate to the handler registered in create_app.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from docchat.agent.dispatcher import RequestDispatcher, get_dispatcher
from docchat.models.schemas import ChatRequest, ChatResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post(
    "",
    response_model=ChatResponse,
    responses={
        401: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def chat(
    request: ChatRequest,
    dispatcher: Annotated[RequestDispatcher, Depends(get_dispatcher)],
) -> ChatResponse:
    """Answer a message, grounded in ``context`` when one is given.

    Raises:
        401: No API key supplied.
        429: Still rate limited after every retry.
        502: Provider error or malformed provider response.
        504: Provider unreachable or timed out.
    """
    logger.info(
        f"Chat request ({len(request.message)} chars, "
        f"context={'yes' if request.context is not None else 'no'})"
    )
    reply = await dispatcher.dispatch(
        request.message,
        context=request.context,
        api_key=request.api_key,
    )
    return ChatResponse(response=reply)
