from django.urls import path
from . import views

app_name = "ratings"

urlpatterns = [
    path("users/", views.users, name="users"),
    path("users/<str:user_id>/similar/", views.similar_users, name="similar_users"),
    path(
        "users/<str:user_id>/recommendations/",
        views.recommendations,
        name="recommendations",
    ),
]
