from django.urls import path

from modules.core.views import health_check, metrics_snapshot

urlpatterns = [
    path("health", health_check, name="health_check"),
    path("metrics", metrics_snapshot, name="metrics"),
]
