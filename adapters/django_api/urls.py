"""
Staffgate Django adapter URL routing.
"""

from django.urls import path

from adapters.django_api import views


urlpatterns = [
    path("agent/permissions", views.agent_permissions_view),
    path(
        "agent/permissions/deactivate",
        views.agent_permissions_deactivate_view,
    ),
    path("agent/sidebar-permissions", views.sidebar_permissions_view),
    path("agent/module-permissions", views.module_permissions_view),
    path("agent/check-permission", views.check_permission_view),
    path("navigation/seed", views.navigation_seed_view),
]
