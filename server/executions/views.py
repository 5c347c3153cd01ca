import logging

from django.conf import settings
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import APIView

from vacuum_core.domain.errors import StorageFailure
from vacuum_core.services import execution as execution_service

from .gateway import DjangoExecutionGateway
from .serializers import PathRequestSerializer, SavedExecutionSerializer

logger = logging.getLogger(__name__)


class StorageUnavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Execution could not be stored."
    default_code = "storage_failure"


class ExecutionViewMixin:
    gateway_class = DjangoExecutionGateway

    def get_gateway(self):
        return self.gateway_class()

    def render_saved(self, saved):
        context = {"response_tz": settings.RESPONSE_TIME_ZONE}
        return SavedExecutionSerializer(saved, context=context).data


class EnterPathView(ExecutionViewMixin, APIView):
    def post(self, request):
        serializer = PathRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        path_request = serializer.to_path_request()

        unsaved = execution_service.run_execution(path_request.commands, path_request.start)
        try:
            saved = execution_service.persist_execution(unsaved, self.get_gateway())
        except StorageFailure as exc:
            logger.exception("Failed to store execution")
            raise StorageUnavailable() from exc

        return Response(self.render_saved(saved), status=status.HTTP_200_OK)


class ExecutionDetailView(ExecutionViewMixin, APIView):
    def get(self, request, pk: int):
        try:
            saved = self.get_gateway().get(pk)
        except StorageFailure as exc:
            logger.exception("Failed to read execution %s", pk)
            raise StorageUnavailable() from exc
        if saved is None:
            raise Http404
        return Response(self.render_saved(saved))
