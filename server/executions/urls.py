from django.urls import path

from .views import EnterPathView, ExecutionDetailView

urlpatterns = [
    path("path", EnterPathView.as_view(), name="enter-path"),
    path("executions/<int:pk>", ExecutionDetailView.as_view(), name="execution-detail"),
]
