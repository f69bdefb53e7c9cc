"""
Tests for the request logging and security header middleware.
"""
from unittest.mock import Mock
from django.http import HttpResponse
from django.urls import reverse
from apps.core.middleware import (
    SecurityHeadersMiddleware, RequestLoggingMiddleware, get_client_ip
)


class TestClientIP:

    def test_forwarded_for_takes_first_address(self, rf):
        request = rf.get('/', HTTP_X_FORWARDED_FOR='203.0.113.7, 10.0.0.1')

        assert get_client_ip(request) == '203.0.113.7'

    def test_remote_addr_fallback(self, rf):
        request = rf.get('/', REMOTE_ADDR='192.0.2.10')

        assert get_client_ip(request) == '192.0.2.10'


class TestSecurityHeadersMiddleware:
    """Test security middleware functionality."""

    def test_security_headers_added(self, rf):
        middleware = SecurityHeadersMiddleware(Mock())
        request = rf.get('/request/')
        response = HttpResponse('ok')
        response['Server'] = 'gunicorn'

        result = middleware.process_response(request, response)

        assert "default-src 'self'" in result['Content-Security-Policy']
        assert "frame-ancestors 'none'" in result['Content-Security-Policy']
        assert result['X-Content-Type-Options'] == 'nosniff'
        assert result['X-Frame-Options'] == 'DENY'
        assert result['Referrer-Policy'] == 'strict-origin-when-cross-origin'
        assert 'Server' not in result

    def test_existing_csp_kept(self, rf):
        middleware = SecurityHeadersMiddleware(Mock())
        response = HttpResponse('ok')
        response['Content-Security-Policy'] = "default-src 'none'"

        result = middleware.process_response(rf.get('/'), response)

        assert result['Content-Security-Policy'] == "default-src 'none'"

    def test_screens_carry_headers(self, client):
        response = client.get(reverse('inventory:admin_dashboard'))

        assert response['X-Frame-Options'] == 'DENY'
        assert 'Content-Security-Policy' in response


class TestRequestLoggingMiddleware:

    def test_request_id_and_timing_logged(self, rf, monkeypatch):
        logger = Mock()
        monkeypatch.setattr('apps.core.middleware.logger', logger)
        middleware = RequestLoggingMiddleware(Mock())
        request = rf.get('/request/', HTTP_USER_AGENT='pytest')

        middleware.process_request(request)
        response = middleware.process_response(request, HttpResponse(status=201))

        assert response['X-Request-ID'] == request._request_id

        start, end = [call.kwargs['extra'] for call in logger.info.call_args_list]
        assert start['event_type'] == 'request_start'
        assert start['user_agent'] == 'pytest'
        assert end['event_type'] == 'request_end'
        assert end['request_id'] == request._request_id
        assert end['status_code'] == 201
        assert end['duration_ms'] >= 0

    def test_response_without_start_time_untouched(self, rf):
        middleware = RequestLoggingMiddleware(Mock())
        response = middleware.process_response(rf.get('/'), HttpResponse())

        assert 'X-Request-ID' not in response
