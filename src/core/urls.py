"""Root URL configuration."""
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView

from articles.views import DashboardView

urlpatterns = [
    path("auth/", include("accounts.urls")),
    path("dashboard/", DashboardView.as_view(), name="dashboard"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("", include("articles.urls")),
]
