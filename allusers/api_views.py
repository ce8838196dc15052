# FC/allusers/api_views.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: FC/allusers/api_views.py
# Назначение: API-вью для токенов DRF, которыми фронтенд ходит в /api/tasks/
# ─────────────────────────────────────────────────────────────────────────────

import logging
from typing import Any, Dict  # подсказки типов

from rest_framework.views import APIView  # базовый API-класс
from rest_framework.response import Response  # ответ DRF
from rest_framework import status, permissions, authentication  # статусы, права, аутентификация
from rest_framework.authtoken.models import Token  # модель токена
from rest_framework.authtoken.serializers import AuthTokenSerializer  # стандартный сериализатор логина

logger = logging.getLogger(__name__)


def _token_payload(token: Token) -> Dict[str, Any]:
    user = token.user
    return {"token": token.key, "user_id": user.id, "username": user.username, "plan": user.plan}


class ObtainOrCreateTokenView(APIView):
    """Создать/получить токен по логин/паролю.

    Ожидает POST с полями username, password.
    Возвращает { "token", "user_id", "username", "plan" }.
    """
    authentication_classes = [authentication.SessionAuthentication]  # допускаем вызов из Browsable API
    permission_classes = [permissions.AllowAny]  # любой может попытаться залогиниться

    def post(self, request, *args, **kwargs):
        serializer = AuthTokenSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]

        token, created = Token.objects.get_or_create(user=user)
        if created:
            logger.info("api token issued for user=%s", user.pk)
        return Response(_token_payload(token), status=status.HTTP_200_OK)


class RotateTokenView(APIView):
    """Пересоздать токен текущего пользователя (сессия или заголовок Authorization: Token <ключ>)."""
    authentication_classes = [authentication.SessionAuthentication, authentication.TokenAuthentication]
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, *args, **kwargs):
        Token.objects.filter(user=request.user).delete()  # старый токен больше не действует
        new_token = Token.objects.create(user=request.user)
        logger.info("api token rotated for user=%s", request.user.pk)
        return Response(_token_payload(new_token), status=status.HTTP_200_OK)
