"""
URL configuration for team API endpoints.
"""

from django.urls import path

from api.v1.team import views

urlpatterns = [
    path("invite", views.InviteMemberView.as_view(), name="invite-team-member"),
    path("remove", views.RemoveMemberView.as_view(), name="remove-team-member"),
    path("members", views.ListMembersView.as_view(), name="list-team-members"),
]
