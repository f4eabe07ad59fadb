# apps/core/views.py

import logging

from rest_framework import generics, status
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from apps.core.serializers import (
    UserSerializer,
    RegisterSerializer,
    ProfileSerializer,
)
from libs.s3_client import upload_file

logger = logging.getLogger(__name__)


# --------------------------------------------------
# Auth: /core/register/
# --------------------------------------------------

class RegisterView(generics.CreateAPIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    serializer_class = RegisterSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("user registered: id=%s username=%s", user.id, user.username)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


# --------------------------------------------------
# Auth: /core/me/
# --------------------------------------------------

class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)

    def patch(self, request):
        """username/email 수정 + image 업로드 시 profile_image 교체."""
        serializer = ProfileSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        image = serializer.validated_data.pop("image", None)
        if image is not None:
            serializer.validated_data["profile_image"] = upload_file(image, "profiles")
        user = serializer.save()
        return Response(UserSerializer(user).data)
