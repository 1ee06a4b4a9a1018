from django.urls import path
from . import views

app_name = "protected_pages"

urlpatterns = [
    path("protected-page", views.login_view, name="login"),
    path("protected-page/lock", views.lock_view, name="lock"),
]
