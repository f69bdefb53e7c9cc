"""
Health check views for Restock.
"""
import logging
from django.core.cache import cache
from django.db import connection, DatabaseError
from django.http import JsonResponse, HttpResponse
from django.utils import timezone
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_http_methods

logger = logging.getLogger(__name__)

VERSION = '1.0.0'


@never_cache
@require_http_methods(["GET"])
def health_check(request):
    """
    Health check endpoint for monitoring.
    Returns JSON with database and cache status.
    """
    status = {
        'status': 'healthy',
        'version': VERSION,
        'timestamp': timezone.now().isoformat(),
        'checks': {}
    }

    overall_healthy = True

    # Database check
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        status['checks']['database'] = {'status': 'healthy'}
    except DatabaseError as e:
        logger.error("Database health check failed", exc_info=True)
        status['checks']['database'] = {'status': 'unhealthy', 'error': str(e)}
        overall_healthy = False

    # Cache check
    try:
        cache.set('health_check', 'ok', 10)
        if cache.get('health_check') != 'ok':
            raise ValueError('cache round trip returned a different value')
        status['checks']['cache'] = {'status': 'healthy'}
    except Exception as e:
        logger.error("Cache health check failed", exc_info=True)
        status['checks']['cache'] = {'status': 'unhealthy', 'error': str(e)}
        overall_healthy = False

    if not overall_healthy:
        status['status'] = 'unhealthy'

    return JsonResponse(status, status=200 if overall_healthy else 503)


@never_cache
@require_http_methods(["GET"])
def readiness_check(request):
    """Readiness probe."""
    return HttpResponse("Ready", content_type="text/plain")


@never_cache
@require_http_methods(["GET"])
def liveness_check(request):
    """Liveness probe."""
    return HttpResponse("Alive", content_type="text/plain")
