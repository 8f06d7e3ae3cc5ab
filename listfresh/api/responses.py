from fastapi.responses import JSONResponse
from pydantic import BaseModel

from listfresh.constants import API_RESPONSE_HEADERS, JSON_CONTENT_TYPE
from listfresh.enums import ErrorCode
from listfresh.schemas import ErrorResponse


def json_response(payload: BaseModel, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        content=payload.model_dump(mode="json", by_alias=True),
        status_code=status_code,
        headers=dict(API_RESPONSE_HEADERS),
        media_type=JSON_CONTENT_TYPE,
    )


def error_response(code: ErrorCode, message: str, status_code: int) -> JSONResponse:
    return json_response(ErrorResponse(error=code.value, message=message), status_code=status_code)
