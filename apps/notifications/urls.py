from django.urls import path

from . import views

app_name = "notifications"

urlpatterns = [
    path("notifications", views.NotificationListView.as_view(), name="list"),
    path("notifications/mark-all", views.NotificationMarkAllView.as_view(), name="mark_all"),
    path("notifications/unread-count", views.UnreadCountView.as_view(), name="unread_count"),
    path("notifications/<uuid:pk>/read", views.NotificationReadView.as_view(), name="read"),
]
