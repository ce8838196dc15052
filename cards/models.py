from django.db import models
from django.utils import timezone
from django.conf import settings


# --- БАЗА ДЛЯ ВСЕХ МОДЕЛЕЙ ---
class TimeStampedModel(models.Model):
    """Абстрактная база с датами создания/изменения."""
    created_at = models.DateTimeField(default=timezone.now, editable=False, verbose_name="Создано")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Изменено")

    class Meta:
        abstract = True


class AliveManager(models.Manager):
    """Менеджер по умолчанию: скрывает мягко удалённые записи."""
    def get_queryset(self):
        return super().get_queryset().filter(deleted_at__isnull=True)


class SoftDeleteModel(TimeStampedModel):
    deleted_at = models.DateTimeField(null=True, blank=True, default=None, verbose_name="Удалено")

    objects = AliveManager()
    all_objects = models.Manager()

    class Meta:
        abstract = True

    def soft_delete(self):
        self.deleted_at = timezone.now()
        self.save(update_fields=["deleted_at", "updated_at"])

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class QuizGenerationTask(SoftDeleteModel):
    """Задача генерации набора карточек из текста/файла пользователя."""

    class Status(models.TextChoices):
        PENDING = "PENDING", "В очереди"
        IN_PROGRESS = "IN_PROGRESS", "Генерируется"
        COMPLETED = "COMPLETED", "Готово"
        FAILED = "FAILED", "Ошибка"

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE,
        related_name="quiz_tasks", verbose_name="Владелец"
    )
    title = models.CharField(max_length=200, blank=True, default="")
    text_content = models.TextField(verbose_name="Исходный текст")
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING, db_index=True)
    generated_at = models.DateTimeField(null=True, blank=True, default=None)
    source_file = models.FileField(upload_to="sources/%Y/%m/", blank=True, default="")

    class Meta:
        verbose_name = "Задача генерации"
        verbose_name_plural = "Задачи генерации"
        ordering = ["-created_at", "-id"]
        indexes = [models.Index(fields=["user", "created_at"], name="cards_task_user_created_idx")]

    def save(self, *args, **kwargs):
        if self.title:
            self.title = self.title.strip()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.title or f"Задача #{self.pk}"

    @property
    def display_title(self) -> str:
        # без заголовка показываем начало текста
        if self.title:
            return self.title
        text = " ".join(self.text_content.split())
        return text[:60] + ("…" if len(text) > 60 else "")


class Question(SoftDeleteModel):
    """Вопрос (карточка) внутри задачи."""
    task = models.ForeignKey(QuizGenerationTask, on_delete=models.CASCADE, related_name="questions")
    content = models.TextField()

    class Meta:
        verbose_name = "Вопрос"
        verbose_name_plural = "Вопросы"
        ordering = ["created_at", "id"]

    def __str__(self) -> str:
        return self.content[:80]


class Answer(TimeStampedModel):
    """Вариант ответа на вопрос."""
    question = models.ForeignKey(Question, on_delete=models.CASCADE, related_name="answers")
    content = models.CharField(max_length=500)
    is_correct = models.BooleanField(default=False)

    class Meta:
        verbose_name = "Ответ"
        verbose_name_plural = "Ответы"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.content}{' ✓' if self.is_correct else ''}"
