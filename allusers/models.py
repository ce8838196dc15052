# Расширяем стандартного пользователя: добавляем тариф и отображаемое имя.
from django.contrib.auth.models import AbstractUser
from django.db import models

class User(AbstractUser):
    class Plan(models.TextChoices):
        FREE = "free", "Бесплатный"
        PRO = "pro", "Pro (без лимитов)"

    plan = models.CharField(
        max_length=20, choices=Plan.choices, default=Plan.FREE,
        help_text="Тариф определяет лимиты генерации."
    )
    display_name = models.CharField(max_length=100, blank=True, default="")

    def __str__(self) -> str:
        # В админке и шаблонах покажем понятное имя (если задано)
        return self.display_name or self.username

    @property
    def is_pro(self) -> bool:
        return self.plan == self.Plan.PRO
