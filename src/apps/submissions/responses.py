"""Uniform JSON envelopes for API errors."""

from http import HTTPStatus

from django.http import JsonResponse


def error_response(message: str, status: HTTPStatus) -> JsonResponse:
    return JsonResponse({"success": False, "message": message}, status=status)


def bad_request(message: str) -> JsonResponse:
    return error_response(message, HTTPStatus.BAD_REQUEST)


def unauthorized(message: str) -> JsonResponse:
    return error_response(message, HTTPStatus.UNAUTHORIZED)


def forbidden(message: str) -> JsonResponse:
    return error_response(message, HTTPStatus.FORBIDDEN)


def not_found(message: str) -> JsonResponse:
    return error_response(message, HTTPStatus.NOT_FOUND)


def internal_error(message: str = "Database error") -> JsonResponse:
    return error_response(message, HTTPStatus.INTERNAL_SERVER_ERROR)
