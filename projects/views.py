from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from timetracker_backend.responses import failure_response, success_response

from .serializers import ProjectSerializer, WorkTypeSerializer
from .services import projects, work_types


def parse_bool(value, default=True):
    if value is None:
        return default
    return value.lower() in ('1', 'true', 'yes')


def list_or_create(request, catalog, serializer_class, list_key, item_key):
    if request.method == 'GET':
        active_only = parse_bool(request.GET.get('active_only'))
        result = catalog.list(active_only=active_only)
        items = serializer_class(result.data, many=True).data
        return Response({
            'count': len(items),
            list_key: items,
        })

    result = catalog.create(request.data)
    if not result.success:
        return failure_response(result)
    return success_response(
        result,
        {item_key: serializer_class(result.data).data},
        status_code=status.HTTP_201_CREATED
    )


def retrieve_or_update(request, catalog, serializer_class, key, code):
    if request.method == 'GET':
        result = catalog.get(code)
    else:
        result = catalog.update(code, request.data)

    if not result.success:
        return failure_response(result)
    return success_response(result, {key: serializer_class(result.data).data})


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def project_list_create(request):
    """
    GET: List projects (?active_only=false to include inactive ones)
    POST: Create new project
    """
    return list_or_create(request, projects, ProjectSerializer, 'projects', 'project')


@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated])
def project_detail(request, code):
    """
    GET: Retrieve project by code
    PUT: Update project name, description or active flag
    """
    return retrieve_or_update(request, projects, ProjectSerializer, 'project', code)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def work_type_list_create(request):
    """
    GET: List work types (?active_only=false to include inactive ones)
    POST: Create new work type
    """
    return list_or_create(request, work_types, WorkTypeSerializer, 'work_types', 'work_type')


@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated])
def work_type_detail(request, code):
    """
    GET: Retrieve work type by code
    PUT: Update work type name, description or active flag
    """
    return retrieve_or_update(request, work_types, WorkTypeSerializer, 'work_type', code)
