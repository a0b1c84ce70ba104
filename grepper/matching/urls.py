from django.urls import path
from . import views

urlpatterns = [
    path("match", views.match_api, name="api-match"),
    path("search", views.search_api, name="api-search"),
]
