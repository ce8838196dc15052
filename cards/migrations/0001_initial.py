import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="QuizGenerationTask",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Изменено")),
                ("deleted_at", models.DateTimeField(blank=True, default=None, null=True, verbose_name="Удалено")),
                ("title", models.CharField(blank=True, default="", max_length=200)),
                ("text_content", models.TextField(verbose_name="Исходный текст")),
                ("status", models.CharField(choices=[("PENDING", "В очереди"), ("IN_PROGRESS", "Генерируется"), ("COMPLETED", "Готово"), ("FAILED", "Ошибка")], db_index=True, default="PENDING", max_length=16)),
                ("generated_at", models.DateTimeField(blank=True, default=None, null=True)),
                ("source_file", models.FileField(blank=True, default="", upload_to="sources/%Y/%m/")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="quiz_tasks", to=settings.AUTH_USER_MODEL, verbose_name="Владелец")),
            ],
            options={
                "verbose_name": "Задача генерации",
                "verbose_name_plural": "Задачи генерации",
                "ordering": ["-created_at", "-id"],
                "indexes": [models.Index(fields=["user", "created_at"], name="cards_task_user_created_idx")],
            },
        ),
        migrations.CreateModel(
            name="Question",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Изменено")),
                ("deleted_at", models.DateTimeField(blank=True, default=None, null=True, verbose_name="Удалено")),
                ("content", models.TextField()),
                ("task", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="questions", to="cards.quizgenerationtask")),
            ],
            options={
                "verbose_name": "Вопрос",
                "verbose_name_plural": "Вопросы",
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="Answer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Изменено")),
                ("content", models.CharField(max_length=500)),
                ("is_correct", models.BooleanField(default=False)),
                ("question", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="answers", to="cards.question")),
            ],
            options={
                "verbose_name": "Ответ",
                "verbose_name_plural": "Ответы",
                "ordering": ["id"],
            },
        ),
    ]
