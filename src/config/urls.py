"""
URL configuration for the MarketBloom lead-capture backend.

API and admin routes are registered ahead of the front-end catch-all.
"""

from django.conf import settings
from django.urls import include, path, re_path

from apps.core.views import FrontendAppView

urlpatterns = [
    path("", include("apps.core.urls")),
    path("api/", include("apps.submissions.urls")),
]

if settings.DEBUG:
    import debug_toolbar

    urlpatterns = [
        path("__debug__/", include(debug_toolbar.urls)),
        *urlpatterns,
    ]

# Anything unmatched falls through to the single-page app's entry document.
urlpatterns += [
    re_path(r"^.*$", FrontendAppView.as_view(), name="frontend"),
]
