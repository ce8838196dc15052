# allusers/apps.py
from django.apps import AppConfig
from django.db.models.signals import post_migrate


def setup_groups(sender, **kwargs):
    """
    Создаём/обновляем группу «learners» и её права.
    Запускаем логику ТОЛЬКО когда отрабатывает post_migrate приложения cards,
    т.к. именно тогда гарантированно созданы model-permissions для задач и вопросов.
    """
    if sender.label != "cards":
        return  # ждём, пока не мигрирует наше доменное приложение

    from django.contrib.auth.models import Group, Permission
    from django.contrib.contenttypes.models import ContentType
    from django.apps import apps

    Task = apps.get_model("cards", "QuizGenerationTask")
    Question = apps.get_model("cards", "Question")

    task_ct = ContentType.objects.get_for_model(Task)
    question_ct = ContentType.objects.get_for_model(Question)

    learners, _ = Group.objects.get_or_create(name="learners")

    # учащиеся: полный доступ к своим задачам и вопросам
    learners.permissions.set(
        Permission.objects.filter(content_type__in=[task_ct, question_ct])
    )


class AllusersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "allusers"
    verbose_name = "Пользователи"

    def ready(self):
        # Подписываемся без sender, а внутри фильтруем по sender.label == "cards"
        post_migrate.connect(setup_groups)
