from django.urls import path
from . import views

app_name = 'headcount'

urlpatterns = [
    path('', views.dashboard, name='dashboard'),
    path('reports/new/', views.report_create, name='report_create'),
    path('reports/<int:pk>/', views.report_detail, name='report_detail'),
    path('reports/<int:pk>/edit/', views.report_edit, name='report_edit'),
    path('reports/select/<int:pk>/', views.selection_toggle, name='selection_toggle'),
    path('reports/select-all/', views.selection_all, name='selection_all'),
    path('reports/delete/', views.delete_request, name='delete_request'),
    path('reports/delete/confirm/', views.delete_confirm, name='delete_confirm'),
    path('reports/delete/cancel/', views.delete_cancel, name='delete_cancel'),
]
