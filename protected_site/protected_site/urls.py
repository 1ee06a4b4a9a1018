from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),

    # Password screen + relock
    path('', include('protected_pages.urls')),
]
