from django.urls import path

from .views import HealthView, IdentifyView

app_name = "linkman"

urlpatterns = [
    path("", HealthView.as_view(), name="health"),
    path("identify", IdentifyView.as_view(), name="identify"),
]
