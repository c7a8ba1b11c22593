"""
URL configuration for the school agenda project.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('django-admin/', admin.site.urls),
    path('accounts/', include('allauth.urls')),
    path('', include('scheduling.urls', namespace='scheduling')),
]
