from django.contrib import admin
from .models import TimeEntry, TimeSheet


class TimeEntryInline(admin.TabularInline):
    model = TimeEntry
    extra = 0
    fields = ['entry_date', 'project', 'work_type', 'hours', 'start_time', 'end_time', 'notes']
    ordering = ['entry_date', 'start_time']

    def _editable(self, obj):
        return obj is None or obj.is_open

    # Entries of a closed timesheet are shown read-only
    def has_add_permission(self, request, obj=None):
        return self._editable(obj) and super().has_add_permission(request, obj)

    def has_change_permission(self, request, obj=None):
        return self._editable(obj) and super().has_change_permission(request, obj)

    def has_delete_permission(self, request, obj=None):
        return self._editable(obj) and super().has_delete_permission(request, obj)


@admin.register(TimeSheet)
class TimeSheetAdmin(admin.ModelAdmin):
    list_display = ['user', 'start_date', 'end_date', 'status', 'total_hours', 'updated_at']
    list_filter = ['status', 'start_date']
    search_fields = ['user__email', 'user__first_name', 'user__last_name']
    ordering = ['-start_date']
    date_hierarchy = 'start_date'
    list_select_related = ['user']
    readonly_fields = ['total_hours', 'created_at', 'updated_at']
    inlines = [TimeEntryInline]

    def save_formset(self, request, form, formset, change):
        super().save_formset(request, form, formset, change)
        form.instance.recalculate_total_hours()


@admin.register(TimeEntry)
class TimeEntryAdmin(admin.ModelAdmin):
    list_display = ['entry_date', 'created_by', 'project', 'work_type', 'hours', 'timesheet']
    list_filter = ['entry_date', 'project', 'work_type', 'timesheet__status']
    search_fields = [
        'created_by__email', 'created_by__first_name', 'created_by__last_name',
        'project__name', 'work_type__name', 'notes'
    ]
    ordering = ['-entry_date', '-created_at']
    date_hierarchy = 'entry_date'

    list_select_related = ['created_by', 'project', 'work_type', 'timesheet']

    fieldsets = (
        ('Basic Information', {
            'fields': ('timesheet', 'created_by', 'project', 'work_type', 'entry_date', 'hours')
        }),
        ('Details', {
            'fields': ('start_time', 'end_time', 'notes')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    readonly_fields = ['created_at', 'updated_at']

    def save_model(self, request, obj, form, change):
        previous_timesheet_id = None
        if change:
            previous_timesheet_id = TimeEntry.objects.filter(
                pk=obj.pk
            ).values_list('timesheet_id', flat=True).first()

        super().save_model(request, obj, form, change)
        obj.timesheet.recalculate_total_hours()

        # An entry moved between timesheets leaves the old total stale
        if previous_timesheet_id and previous_timesheet_id != obj.timesheet_id:
            TimeSheet.objects.get(pk=previous_timesheet_id).recalculate_total_hours()

    def delete_model(self, request, obj):
        timesheet = obj.timesheet
        super().delete_model(request, obj)
        timesheet.recalculate_total_hours()

    def delete_queryset(self, request, queryset):
        timesheets = {entry.timesheet for entry in queryset.select_related('timesheet')}
        super().delete_queryset(request, queryset)
        for timesheet in timesheets:
            timesheet.recalculate_total_hours()

    actions = ['recalculate_timesheet_totals']

    @admin.action(description="Refresh total hours of the selected entries' timesheets")
    def recalculate_timesheet_totals(self, request, queryset):
        timesheets = TimeSheet.objects.filter(pk__in=queryset.values('timesheet_id'))
        for timesheet in timesheets:
            timesheet.recalculate_total_hours()
        self.message_user(request, f"Refreshed totals of {len(timesheets)} timesheet(s)")
