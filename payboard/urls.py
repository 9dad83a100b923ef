from django.contrib import admin
from django.urls import path, include
from dashboard import health

handler404 = "dashboard.views.error_views.custom_404_view"
handler500 = "dashboard.views.error_views.custom_500_view"

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health/live/", health.liveness_check, name="liveness_check"),
    path("health/ready/", health.readiness_check, name="readiness_check"),
    path("api/v1/", include("dashboard.api.urls")),
    path("", include("dashboard.urls", namespace="dashboard")),
]
