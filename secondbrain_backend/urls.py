from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/v1/users/", include("users.urls")),
    # sharing first: "content/share" must win over "content/<content_id>"
    path("api/v1/", include("sharing.urls")),
    path("api/v1/", include("content.urls")),
]

handler404 = "core.views.not_found"
handler500 = "core.views.server_error"
