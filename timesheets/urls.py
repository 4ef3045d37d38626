from django.urls import path
from . import views

urlpatterns = [
    path('', views.timesheet_list_create, name='timesheet-list-create'),
    path('for-date/', views.timesheet_for_date, name='timesheet-for-date'),
    path('<int:pk>/', views.timesheet_detail, name='timesheet-detail'),
    path('<int:pk>/close/', views.close_timesheet, name='timesheet-close'),
    path('<int:pk>/entries/', views.timesheet_entries, name='timesheet-entries'),
    path('entries/<int:pk>/', views.time_entry_detail, name='time-entry-detail'),
]
