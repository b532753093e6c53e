"""Parse endpoints for the API."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from server.document_processor import process_parse, process_text
from server.models import ErrorResponse, ParseRequest, ParseSuccessResponse, TextRequest, TextResponse

router = APIRouter()

COMMON_RESPONSES: dict[int | str, dict] = {
    status.HTTP_200_OK: {"model": ParseSuccessResponse, "description": "Successful parse"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Processing failed"},
}


def _to_response(response: ParseSuccessResponse | TextResponse | ErrorResponse) -> JSONResponse:
    if isinstance(response, ErrorResponse):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=response.model_dump(),
        )
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump(by_alias=True))


@router.post("/api/parse", responses=COMMON_RESPONSES)
async def api_parse(parse_request: ParseRequest) -> JSONResponse:
    """Parse a markdown document.

    **Returns**

    - **JSONResponse**: ``meta``, ``html`` and ``tree`` (children under ``nodes``),
      or an error body with status 500

    """
    response = await process_parse(parse_request.content, math=parse_request.math)
    return _to_response(response)


@router.post("/api/text")
async def api_text(text_request: TextRequest) -> JSONResponse:
    """Reduce a markdown document to lowercase search tokens."""
    response = await process_text(text_request.content)
    return _to_response(response)
