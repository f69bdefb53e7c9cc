"""
Request logging and security header middleware for Restock.
"""
import logging
import time
import uuid

from django.http import HttpRequest, HttpResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


def get_client_ip(request: HttpRequest) -> str:
    """Extract client IP address from request."""
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        return x_forwarded_for.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR', '')


class SecurityHeadersMiddleware(MiddlewareMixin):
    """
    Adds security headers to every response.
    """

    CSP_DIRECTIVES = [
        "default-src 'self'",
        "script-src 'self' 'unsafe-inline'",  # toast dismissal script
        "style-src 'self' 'unsafe-inline'",
        "img-src 'self' data:",
        "connect-src 'self'",
        "object-src 'none'",
        "base-uri 'self'",
        "form-action 'self'",
        "frame-ancestors 'none'",
    ]

    def process_response(self, request: HttpRequest, response: HttpResponse) -> HttpResponse:
        if not response.get('Content-Security-Policy'):
            response['Content-Security-Policy'] = '; '.join(self.CSP_DIRECTIVES)

        response['X-Content-Type-Options'] = 'nosniff'
        response['X-Frame-Options'] = 'DENY'
        response['Referrer-Policy'] = 'strict-origin-when-cross-origin'

        if 'Server' in response:
            del response['Server']

        return response


class RequestLoggingMiddleware(MiddlewareMixin):
    """
    Structured logging of every request with a correlation id and timing.
    """

    def process_request(self, request: HttpRequest) -> None:
        request._start_time = time.time()
        request._request_id = str(uuid.uuid4())

        logger.info("Request started", extra={
            'request_id': request._request_id,
            'method': request.method,
            'path': request.path,
            'ip_address': get_client_ip(request),
            'user_agent': request.META.get('HTTP_USER_AGENT', '')[:200],
            'event_type': 'request_start'
        })

    def process_response(self, request: HttpRequest, response: HttpResponse) -> HttpResponse:
        if hasattr(request, '_start_time'):
            duration = time.time() - request._start_time
            response['X-Request-ID'] = request._request_id

            logger.info("Request completed", extra={
                'request_id': request._request_id,
                'method': request.method,
                'path': request.path,
                'status_code': response.status_code,
                'duration_ms': round(duration * 1000, 2),
                'event_type': 'request_end'
            })

        return response
