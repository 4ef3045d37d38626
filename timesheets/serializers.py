from decimal import Decimal

from django.utils import timezone
from rest_framework import serializers

from projects.models import Project, WorkType

from .models import TimeEntry, TimeSheet

HOURS_RANGE_MESSAGE = 'Hours must be greater than 0 and at most 24'


class TimeSheetSerializer(serializers.ModelSerializer):
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    period_range = serializers.ReadOnlyField()
    is_open = serializers.ReadOnlyField()

    class Meta:
        model = TimeSheet
        fields = [
            'id', 'start_date', 'end_date', 'period_range', 'status', 'status_display',
            'is_open', 'total_hours', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class TimeEntrySerializer(serializers.ModelSerializer):
    """Read serializer for entries, with reference names for display"""
    project_code = serializers.CharField(source='project_id', read_only=True)
    project_name = serializers.CharField(source='project.name', read_only=True)
    work_type_code = serializers.CharField(source='work_type_id', read_only=True)
    work_type_name = serializers.CharField(source='work_type.name', read_only=True)

    class Meta:
        model = TimeEntry
        fields = [
            'id', 'timesheet', 'project_code', 'project_name', 'work_type_code', 'work_type_name',
            'entry_date', 'hours', 'start_time', 'end_time', 'notes', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class TimeEntryWriteSerializer(serializers.Serializer):
    """
    Field-level validation for creating or updating a time entry.

    Pass ``require_active=True`` in the context when creating: new entries
    may only reference active projects and work types, while updates only
    need the codes to exist.
    """
    project_code = serializers.CharField(
        max_length=50,
        error_messages={'required': 'Project code is required', 'blank': 'Project code is required',
                        'null': 'Project code is required'}
    )
    work_type_code = serializers.CharField(
        max_length=50,
        error_messages={'required': 'Work type code is required', 'blank': 'Work type code is required',
                        'null': 'Work type code is required'}
    )
    entry_date = serializers.DateField(error_messages={'required': 'Entry date is required'})
    hours = serializers.DecimalField(
        max_digits=5, decimal_places=2,
        error_messages={'required': 'Hours are required', 'max_whole_digits': HOURS_RANGE_MESSAGE,
                        'max_digits': HOURS_RANGE_MESSAGE}
    )
    start_time = serializers.TimeField(required=False, allow_null=True, default=None)
    end_time = serializers.TimeField(required=False, allow_null=True, default=None)
    notes = serializers.CharField(max_length=1000, required=False, allow_blank=True, allow_null=True, default='')

    def _lookup(self, model, value, label):
        code = value.strip().upper()
        instance = model.objects.filter(code=code).first()
        if instance is None:
            raise serializers.ValidationError(f'Invalid {label.lower()} code')
        if self.context.get('require_active') and not instance.is_active:
            raise serializers.ValidationError(f'{label} is inactive')
        return instance

    def validate_project_code(self, value):
        self._project = self._lookup(Project, value, 'Project')
        return self._project.code

    def validate_work_type_code(self, value):
        self._work_type = self._lookup(WorkType, value, 'Work type')
        return self._work_type.code

    def validate_hours(self, value):
        if value <= Decimal('0') or value > Decimal('24'):
            raise serializers.ValidationError(HOURS_RANGE_MESSAGE)
        return value

    def validate_notes(self, value):
        return value or ''

    def validate(self, data):
        start_time = data.get('start_time')
        end_time = data.get('end_time')
        if start_time and end_time and end_time <= start_time:
            raise serializers.ValidationError({'end_time': 'End time must be after start time'})

        data['project'] = self._project
        data['work_type'] = self._work_type
        return data


class TimeSheetRequestSerializer(serializers.Serializer):
    """Input for get-or-create: the date whose period should be opened"""
    date = serializers.DateField(required=False)

    def validate(self, data):
        data.setdefault('date', timezone.localdate())
        return data
