from django.urls import path

from . import views

app_name = "payments"

urlpatterns = [
    path("payments", views.PaymentListCreateView.as_view(), name="list"),  # GET list, POST record
    path("payments/<uuid:pk>", views.PaymentDetailView.as_view(), name="detail"),  # GET, DELETE
]
