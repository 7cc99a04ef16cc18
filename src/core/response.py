"""Response helpers and base classes for the ``{data, errors}`` envelope."""

from typing import Any

from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import GenericViewSet


def api_response(data: Any, status: int = 200) -> Response:
    """Return ``data`` wrapped as ``{"data": data, "errors": []}``."""

    return Response({"data": data, "errors": []}, status=status)


def _is_enveloped(payload: Any) -> bool:
    return isinstance(payload, dict) and "data" in payload and "errors" in payload


class EnvelopeMixin:
    """Wrap successful DRF responses that are not enveloped yet.

    Redirects and streamed downloads carry no ``data`` attribute and pass
    through untouched.
    """

    def finalize_response(self, request, response, *args, **kwargs):  # type: ignore[override]
        if hasattr(response, "data") and response.status_code and response.status_code < 400:
            if response.status_code != 204 and not _is_enveloped(response.data):
                response.data = {"data": response.data, "errors": []}
        return super().finalize_response(request, response, *args, **kwargs)  # type: ignore[attr-defined]


class BaseAPIView(EnvelopeMixin, APIView):
    """APIView whose successful responses use the envelope."""


class BaseViewSet(EnvelopeMixin, GenericViewSet):
    """GenericViewSet whose successful responses use the envelope."""
