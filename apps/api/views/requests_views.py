"""
Restock request API views.
"""
from rest_framework import generics, status
from rest_framework.decorators import api_view
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.requests.models import RequestStatus
from apps.requests.services.request_service import RequestService, RequestServiceError, RequestNotFound
from apps.api.serializers import (
    RestockRequestSerializer, SubmitRequestSerializer, RequestStatusSerializer
)


class RestockRequestListView(generics.ListCreateAPIView):
    """
    List requests (filter with ``?status=``).
    Submit a new request.
    """
    serializer_class = RestockRequestSerializer
    filter_backends = []

    def get_queryset(self):
        try:
            return RequestService.list_requests(self.request.query_params.get('status'))
        except RequestServiceError as e:
            raise ValidationError({'error': str(e)})

    @extend_schema(
        parameters=[OpenApiParameter('status', str, enum=RequestStatus.values)],
        responses=RestockRequestSerializer(many=True),
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    @extend_schema(request=SubmitRequestSerializer, responses={201: RestockRequestSerializer})
    def post(self, request, *args, **kwargs):
        serializer = SubmitRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            restock_request = RequestService.submit_request(
                item_id=serializer.validated_data.get('item_id'),
                quantity=serializer.validated_data['quantity'],
                notes=serializer.validated_data['notes'],
            )
        except RequestServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            RestockRequestSerializer(restock_request).data,
            status=status.HTTP_201_CREATED
        )


@extend_schema(request=RequestStatusSerializer, responses=RestockRequestSerializer)
@api_view(['POST'])
def set_request_status(request, request_id):
    """
    Move a request to a new status.
    """
    serializer = RequestStatusSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        restock_request = RequestService.set_status(request_id, serializer.validated_data['status'])
    except RequestNotFound as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except RequestServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(RestockRequestSerializer(restock_request).data)
