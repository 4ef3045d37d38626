from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('authentication.urls')),
    path('api/', include('projects.urls')),  # projects and work types
    path('api/timesheets/', include('timesheets.urls')),
    path('api/reports/', include('reports.urls')),
]
