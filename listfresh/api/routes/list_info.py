import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from listfresh.api.deps import get_gateway
from listfresh.api.responses import error_response, json_response
from listfresh.constants import FETCH_FAILED_MESSAGE, LIST_INFO_PATH, MISSING_URI_MESSAGE
from listfresh.enums import ErrorCode
from listfresh.schemas import ListInfoRequest
from listfresh.services.connectors import ListGateway
from listfresh.services.resolver import get_list_info
from listfresh.services.validation import LocatorError, ResolutionError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["list-info"])


@router.post(LIST_INFO_PATH)
def list_info(request: ListInfoRequest, gateway: ListGateway = Depends(get_gateway)) -> JSONResponse:
    if not request.uri or not request.uri.strip():
        return error_response(ErrorCode.bad_request, MISSING_URI_MESSAGE, 400)
    try:
        summary = get_list_info(request.uri, gateway)
    except LocatorError as exc:
        logger.info("Rejected list locator %r: %s", request.uri, exc.code.value)
        return error_response(ErrorCode.bad_request, exc.message, 400)
    except ResolutionError as exc:
        return error_response(exc.code, exc.message, exc.status_code)
    except Exception:
        logger.exception("Unexpected error handling %s", LIST_INFO_PATH)
        return error_response(ErrorCode.fetch_failed, FETCH_FAILED_MESSAGE, 500)
    return json_response(summary)
