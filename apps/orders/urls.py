from django.urls import path

from . import views

app_name = "orders"

urlpatterns = [
    path("orders", views.OrderListCreateView.as_view(), name="list"),  # GET list, POST place
    path("orders/walk-in", views.WalkInOrderView.as_view(), name="walk_in"),
    path("orders/<uuid:pk>", views.OrderDetailView.as_view(), name="detail"),  # GET, DELETE
    path("orders/<uuid:pk>/status", views.OrderStatusView.as_view(), name="status"),
    path("orders/<uuid:pk>/cancel", views.OrderCancelView.as_view(), name="cancel"),
    path("orders/<uuid:pk>/confirm-payment", views.OrderConfirmPaymentView.as_view(), name="confirm_payment"),
]
