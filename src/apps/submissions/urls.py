"""Submissions API URL configuration."""

from django.urls import re_path

from . import views

app_name = "submissions"

# A trailing slash is optional on every API route.
urlpatterns = [
    re_path(r"^admin/login/?$", views.AdminLoginView.as_view(), name="admin_login"),
    re_path(r"^contact/?$", views.ContactSubmitView.as_view(), name="contact"),
    re_path(r"^submissions/?$", views.SubmissionListView.as_view(), name="list"),
    re_path(r"^submissions/(?P<submission_id>[^/]+)/?$", views.SubmissionDeleteView.as_view(), name="delete"),
]
