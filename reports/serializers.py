from rest_framework import serializers


class TimeEntryDetailSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    entry_date = serializers.DateField()
    hours = serializers.DecimalField(max_digits=5, decimal_places=2)
    work_type_code = serializers.CharField()
    work_type_name = serializers.CharField()
    notes = serializers.CharField(allow_blank=True)


class DailyTotalSerializer(serializers.Serializer):
    date = serializers.DateField()
    hours = serializers.DecimalField(max_digits=6, decimal_places=2)


class ProjectSummarySerializer(serializers.Serializer):
    """Hours booked against one project within a timesheet"""
    project_code = serializers.CharField()
    project_name = serializers.CharField()
    total_hours = serializers.DecimalField(max_digits=7, decimal_places=2)
    time_entries = TimeEntryDetailSerializer(many=True)
    daily_totals = DailyTotalSerializer(many=True)


class TimeSheetReportSerializer(serializers.Serializer):
    timesheet_id = serializers.IntegerField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    status = serializers.CharField()
    total_hours = serializers.DecimalField(max_digits=7, decimal_places=2)
    reported_hours = serializers.DecimalField(max_digits=7, decimal_places=2)
    projects = ProjectSummarySerializer(many=True)


class ReportQuerySerializer(serializers.Serializer):
    timesheet_id = serializers.IntegerField(required=False, min_value=1)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, data):
        start_date = data.get('start_date')
        end_date = data.get('end_date')
        if start_date and end_date and end_date < start_date:
            raise serializers.ValidationError({'end_date': 'End date must not be before start date'})
        return data
