from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from projects.serializers import ReferenceChoiceSerializer
from projects.services import projects, work_types
from timetracker_backend.responses import failure_response, success_response
from timetracker_backend.results import ServiceResult

from . import services
from .serializers import TimeEntrySerializer, TimeSheetRequestSerializer, TimeSheetSerializer
from .utils import parse_date


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def timesheet_list_create(request):
    """
    GET: List the current user's timesheets, newest period first
    POST: Get or create the timesheet for the period containing ``date``
          (defaults to today). 201 when created, 200 when it already existed.
    """
    if request.method == 'GET':
        result = services.get_user_timesheets(request.user)
        timesheets = TimeSheetSerializer(result.data, many=True).data
        return Response({
            'count': len(timesheets),
            'timesheets': timesheets,
        })

    serializer = TimeSheetRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return failure_response(ServiceResult.validation_failure(serializer.errors))

    result = services.get_or_create_timesheet(request.user, serializer.validated_data['date'])
    if not result.success:
        return failure_response(result)

    timesheet, created = result.data
    return success_response(
        result,
        {'timesheet': TimeSheetSerializer(timesheet).data, 'created': created},
        status_code=status.HTTP_201_CREATED if created else status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def timesheet_for_date(request):
    """Get the current user's timesheet covering ?date=YYYY-MM-DD"""
    for_date = parse_date(request.GET.get('date'))
    if for_date is None:
        return Response({'error': 'Invalid or missing date. Use YYYY-MM-DD'}, status=400)

    result = services.get_timesheet_for_date(request.user, for_date)
    if not result.success:
        return failure_response(result)
    return Response({'timesheet': TimeSheetSerializer(result.data).data})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def timesheet_detail(request, pk):
    """Timesheet with its entries and the active projects/work types for new entries"""
    result = services.get_timesheet(request.user, pk)
    if not result.success:
        return failure_response(result)

    entries = services.get_timesheet_entries(request.user, pk).data
    return Response({
        'timesheet': TimeSheetSerializer(result.data).data,
        'entries': TimeEntrySerializer(entries, many=True).data,
        'available_projects': ReferenceChoiceSerializer(projects.list(active_only=True).data, many=True).data,
        'available_work_types': ReferenceChoiceSerializer(work_types.list(active_only=True).data, many=True).data,
    })


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def close_timesheet(request, pk):
    result = services.close_timesheet(request.user, pk)
    if not result.success:
        return failure_response(result)
    return success_response(result, {'timesheet': TimeSheetSerializer(result.data).data})


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def timesheet_entries(request, pk):
    """
    GET: List entries of a timesheet ordered by date and start time
    POST: Add an entry to an open timesheet
    """
    if request.method == 'GET':
        result = services.get_timesheet_entries(request.user, pk)
        if not result.success:
            return failure_response(result)
        entries = TimeEntrySerializer(result.data, many=True).data
        return Response({
            'count': len(entries),
            'entries': entries,
        })

    result = services.create_time_entry(request.user, pk, request.data)
    if not result.success:
        return failure_response(result)

    entry = result.data
    return success_response(result, {
        'entry': TimeEntrySerializer(entry).data,
        'timesheet': TimeSheetSerializer(entry.timesheet).data,
    }, status_code=status.HTTP_201_CREATED)


@api_view(['PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def time_entry_detail(request, pk):
    """
    PUT: Replace an entry's fields
    DELETE: Remove an entry
    Both refresh the owning timesheet's total hours.
    """
    if request.method == 'PUT':
        result = services.update_time_entry(request.user, pk, request.data)
        if not result.success:
            return failure_response(result)
        entry = result.data
        return success_response(result, {
            'entry': TimeEntrySerializer(entry).data,
            'timesheet': TimeSheetSerializer(entry.timesheet).data,
        })

    result = services.delete_time_entry(request.user, pk)
    if not result.success:
        return failure_response(result)
    return success_response(result, {'timesheet': TimeSheetSerializer(result.data).data})
