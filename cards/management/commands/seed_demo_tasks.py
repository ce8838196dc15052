import logging

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError, CommandParser
from django.db import transaction
from django.utils import timezone

from cards.models import QuizGenerationTask, Question, Answer

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Создаёт демонстрационные наборы карточек для пользователя (проверка пагинации)."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("username", type=str)
        parser.add_argument("--tasks", type=int, default=25, help="Сколько наборов создать")
        parser.add_argument("--questions", type=int, default=12, help="Вопросов в каждом наборе")
        parser.add_argument("--batch", type=int, default=10, help="Печать прогресса каждые N наборов")

    @transaction.atomic
    def handle(self, *args, **opts):
        username: str = opts["username"]
        tasks: int = max(0, int(opts.get("tasks") or 0))
        questions: int = max(0, int(opts.get("questions") or 0))
        batch: int = max(1, int(opts.get("batch") or 10))

        User = get_user_model()
        try:
            user = User.objects.get(username=username)
        except User.DoesNotExist:
            raise CommandError(f"Пользователь {username} не найден")

        self.stdout.write(f"→ Создаём {tasks} наборов по {questions} вопросов для {username} ...")
        now = timezone.now()
        for i in range(1, tasks + 1):
            task = QuizGenerationTask.objects.create(
                user=user,
                title=f"Демо-набор {i}",
                text_content=f"Демонстрационный конспект №{i}",
                status=QuizGenerationTask.Status.COMPLETED,
                generated_at=now,
            )
            for n in range(1, questions + 1):
                q = Question.objects.create(task=task, content=f"Вопрос {n} набора {i}?")
                Answer.objects.bulk_create([
                    Answer(question=q, content=f"Вариант {k}", is_correct=(k == 1))
                    for k in range(1, 5)
                ])
            if i % batch == 0:
                self.stdout.write(f"  ...создано {i}")

        msg = f"Готово: создано {tasks} наборов, {tasks * questions} вопросов."
        logger.info(msg)
        self.stdout.write(self.style.SUCCESS(msg))
