from django.contrib import admin
from .models import User

@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ['email', 'first_name', 'last_name', 'is_active', 'is_staff', 'created_at']
    list_filter = ['is_active', 'is_staff', 'created_at']
    search_fields = ['email', 'first_name', 'last_name']
    ordering = ['email']

    fieldsets = (
        ('Account', {
            'fields': ('email', 'first_name', 'last_name')
        }),
        ('Status', {
            'fields': ('is_active', 'is_staff', 'is_superuser')
        }),
        ('Metadata', {
            'fields': ('last_login', 'created_at'),
            'classes': ('collapse',)
        }),
    )

    readonly_fields = ['last_login', 'created_at']
