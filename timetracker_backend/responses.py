from rest_framework import status
from rest_framework.response import Response

from .results import (
    KIND_NOT_FOUND, KIND_UNAUTHORIZED, ServiceResult
)

FAILURE_STATUS = {
    KIND_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    KIND_UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
}


def failure_payload(result: ServiceResult) -> dict:
    payload = {
        'error': result.error,
        'errors': result.errors,
    }
    if result.validation_errors:
        payload['validation_errors'] = result.validation_errors
    return payload


def failure_status(result: ServiceResult) -> int:
    return FAILURE_STATUS.get(result.kind, status.HTTP_400_BAD_REQUEST)


def failure_response(result: ServiceResult) -> Response:
    """Translate a failed service result into a DRF response"""
    return Response(failure_payload(result), status=failure_status(result))


def success_response(result: ServiceResult, payload: dict, status_code=status.HTTP_200_OK) -> Response:
    body = dict(payload)
    if result.message:
        body['message'] = result.message
    return Response(body, status=status_code)
