""" Exception handlers: convert pagination errors into responses """

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pagewise import exc


# Message to report when the store fails. No internal details.
STORAGE_FAILURE_MESSAGE = 'An error occurred while processing your request.'


async def invalid_request_handler(request: Request, e: exc.InvalidRequestError) -> JSONResponse:
    """ Invalid request: client error """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': e.err},
    )


async def storage_failure_handler(request: Request, e: exc.StorageFailure) -> JSONResponse:
    """ Storage failure: server error

    The paginator has already logged it; the client gets a generic message.
    """
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'detail': STORAGE_FAILURE_MESSAGE},
    )


def register_exception_handlers(app: FastAPI):
    """ Register pagination exception handlers with the application

    Example:
        app = FastAPI()
        register_exception_handlers(app)
    """
    app.add_exception_handler(exc.InvalidRequestError, invalid_request_handler)  # type: ignore[arg-type]
    app.add_exception_handler(exc.StorageFailure, storage_failure_handler)  # type: ignore[arg-type]
