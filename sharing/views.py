from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from content.serializers import ContentSerializer
from . import services
from .serializers import ShareLinkSerializer, ShareToggleSerializer


class ShareToggleView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = ShareToggleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        enabled = serializer.validated_data["share"]

        share_link, created = services.set_sharing(request.user, enabled)
        if not enabled:
            return Response({"msg": "Share link removed"})

        data = ShareLinkSerializer(share_link).data
        if created:
            data["msg"] = "Share link created"
            return Response(data, status=status.HTTP_201_CREATED)
        return Response(data)


class PublicBrainView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, share_hash):
        username, content = services.resolve_public(share_hash)
        return Response(
            {
                "username": username,
                "content": ContentSerializer(content, many=True).data,
            }
        )
