"""Core app URL configuration."""

from django.urls import re_path

from . import views

app_name = "core"

urlpatterns = [
    re_path(r"^api/health/?$", views.HealthView.as_view(), name="health"),
    re_path(r"^admin/?$", views.AdminPageView.as_view(), name="admin"),
]
