"""
URL configuration for Restock inventory system.
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.views.generic import RedirectView
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    # Django admin
    path('admin/', admin.site.urls),

    # API
    path('api/', include('apps.api.urls')),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),

    # Screens
    path('', include('apps.inventory.urls')),
    path('', include('apps.requests.urls')),

    # Health check
    path('health/', include('apps.core.urls')),

    # Default redirect to the request screen
    path('', RedirectView.as_view(pattern_name='requests:request_page', permanent=False)),
]

# Serve static files in development
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)

# Admin site customization
admin.site.site_header = "Restock"
admin.site.site_title = "Restock Admin"
admin.site.index_title = "Inventory Administration"
