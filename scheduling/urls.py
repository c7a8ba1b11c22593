from django.urls import path
from . import views

app_name = 'scheduling'

urlpatterns = [
    # Public client view
    path('', views.client_view, name='client'),
    path('api/events/', views.api_events, name='api_events'),
    path('api/requests/create/', views.api_create_request, name='api_create_request'),

    # Admin panel
    path('painel/', views.admin_panel, name='admin_panel'),
    path('painel/day/', views.admin_day_events, name='admin_day_events'),
    path('painel/requests/', views.requests_panel, name='requests_panel'),
    path('api/requests/', views.api_requests, name='api_requests'),
    path('api/requests/<int:request_id>/approve/', views.api_approve_request, name='api_approve_request'),
    path('api/requests/<int:request_id>/reject/', views.api_reject_request, name='api_reject_request'),
    path('api/events/create/', views.api_create_event, name='api_create_event'),
    path('api/events/<int:event_id>/', views.api_event_detail, name='api_event_detail'),
    path('api/events/<int:event_id>/update/', views.api_update_event, name='api_update_event'),
    path('api/events/<int:event_id>/delete/', views.api_delete_event, name='api_delete_event'),
]
