from django.urls import path
from . import views

urlpatterns = [
    path('project-time/', views.project_time_report, name='project-time-report'),
]
