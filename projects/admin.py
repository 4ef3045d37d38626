from django.contrib import admin
from .models import Project, WorkType


class ReferenceCodeAdmin(admin.ModelAdmin):
    list_display = ['code', 'name', 'is_active', 'created_at']
    list_filter = ['is_active']
    search_fields = ['code', 'name', 'description']
    ordering = ['code']
    readonly_fields = ['created_at']

    def get_readonly_fields(self, request, obj=None):
        """Codes are referenced by time entries and cannot change once saved"""
        if obj is not None:
            return self.readonly_fields + ['code']
        return self.readonly_fields

    actions = ['activate', 'deactivate']

    def activate(self, request, queryset):
        updated = queryset.update(is_active=True)
        self.message_user(request, f"Activated {updated} entries")
    activate.short_description = "Mark selected as active"

    def deactivate(self, request, queryset):
        updated = queryset.update(is_active=False)
        self.message_user(request, f"Deactivated {updated} entries")
    deactivate.short_description = "Mark selected as inactive"


admin.site.register(Project, ReferenceCodeAdmin)
admin.site.register(WorkType, ReferenceCodeAdmin)
