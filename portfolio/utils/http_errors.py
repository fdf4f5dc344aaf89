from fastapi import HTTPException, status

from portfolio.utils.errors import (
    NotFoundError,
    PortfolioError,
    StorageUnavailableError,
    ValidationFailedError,
)

_STATUS_BY_ERROR = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationFailedError, status.HTTP_400_BAD_REQUEST),
    (StorageUnavailableError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def to_http_exception(error: PortfolioError) -> HTTPException:
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=code, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
