"""
Gateway API Views

The gateway keeps no state: it answers with a fixed payload for each
downstream route when that service cannot be reached, and exposes its own
liveness probe.
"""
import logging

from django.http import HttpResponse
from django.views.decorators.http import require_GET
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status, serializers
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema

from .fallbacks import FALLBACKS

logger = logging.getLogger(__name__)


class FallbackSerializer(serializers.Serializer):
    status = serializers.CharField()
    message = serializers.CharField()
    service = serializers.CharField()


class FallbackView(APIView):
    """
    Served in place of a downstream route while that service is down.
    """
    permission_classes = [AllowAny]
    route = None

    @extend_schema(
        responses={503: FallbackSerializer},
        description="Fallback payload for an unavailable downstream service"
    )
    def get(self, request):
        fallback = FALLBACKS[self.route]
        logger.warning(f"Serving fallback for {fallback.service}")
        return Response(fallback.payload(), status=status.HTTP_503_SERVICE_UNAVAILABLE)


@require_GET
def health(request):
    return HttpResponse("API Gateway is UP", content_type="text/plain")
