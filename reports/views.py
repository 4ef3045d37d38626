from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from timetracker_backend.responses import failure_response
from timetracker_backend.results import ServiceResult

from .serializers import ReportQuerySerializer, TimeSheetReportSerializer
from .services import build_project_time_report


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def project_time_report(request):
    """
    Hours per project for the current user's timesheets
    GET /api/reports/project-time/?timesheet_id=1
    GET /api/reports/project-time/?start_date=2024-01-01&end_date=2024-01-31
    """
    query = ReportQuerySerializer(data=request.GET)
    if not query.is_valid():
        return failure_response(ServiceResult.validation_failure(query.errors))

    result = build_project_time_report(request.user, **query.validated_data)
    if not result.success:
        return failure_response(result)

    return Response({
        'timesheets': TimeSheetReportSerializer(result.data, many=True).data,
        'filters_applied': {
            key: request.GET.get(key) for key in ('timesheet_id', 'start_date', 'end_date')
        },
    })
