import json
import logging

from django.contrib.auth import login, logout
from django.http import JsonResponse
from django.middleware.csrf import get_token
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from timetracker_backend.responses import failure_payload, failure_status
from timetracker_backend.results import KIND_UNAUTHORIZED

from .serializers import UserSerializer
from .services import login_user, register_user

logger = logging.getLogger(__name__)


def parse_json_body(request):
    """Return the decoded JSON object, or None when the body is not one"""
    try:
        data = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


@csrf_exempt
@require_http_methods(["POST"])
def register_view(request):
    """Register a new user"""
    data = parse_json_body(request)
    if data is None:
        return JsonResponse({'error': 'Invalid JSON body'}, status=400)

    result = register_user(data)
    if not result.success:
        return JsonResponse(failure_payload(result), status=failure_status(result))

    return JsonResponse({
        'message': result.message,
        'user': UserSerializer(result.data).data
    }, status=201)


@csrf_exempt
@require_http_methods(["POST"])
def login_view(request):
    """Log the user in and start a session"""
    data = parse_json_body(request)
    if data is None:
        return JsonResponse({'error': 'Invalid JSON body'}, status=400)

    result = login_user(data)
    if not result.success:
        status_code = 401 if result.kind == KIND_UNAUTHORIZED else failure_status(result)
        return JsonResponse(failure_payload(result), status=status_code)

    user = result.data
    login(request, user)
    logger.info("User %s logged in", user.email)
    return JsonResponse({
        'message': result.message,
        'user': UserSerializer(user).data
    }, status=200)


@csrf_exempt
@require_http_methods(["POST"])
def logout_view(request):
    """Log out the current user"""
    if not request.user.is_authenticated:
        return JsonResponse({'error': 'Not authenticated'}, status=401)

    email = request.user.email
    logout(request)
    logger.info("User %s logged out", email)
    return JsonResponse({'message': 'Logout successful'}, status=200)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_profile(request):
    """Get current user profile"""
    return Response({
        'user': UserSerializer(request.user).data
    }, status=status.HTTP_200_OK)


@require_http_methods(["GET"])
def csrf_token(request):
    """Get CSRF token for frontend"""
    return JsonResponse({
        'csrfToken': get_token(request)
    })
