from django.urls import path
from . import views

urlpatterns = [
    path('projects/', views.project_list_create, name='project-list-create'),
    path('projects/<str:code>/', views.project_detail, name='project-detail'),
    path('work-types/', views.work_type_list_create, name='work-type-list-create'),
    path('work-types/<str:code>/', views.work_type_detail, name='work-type-detail'),
]
