# FC/cards/tests/conftest.py
import pytest
from rest_framework.test import APIClient

from allusers.models import User
from cards.models import QuizGenerationTask, Question, Answer


@pytest.fixture
def mixer():
    """Удобный алиас, чтобы писать mixer.blend(...) в тестах."""
    from mixer.backend.django import mixer as _mixer
    return _mixer


@pytest.fixture
def learner(db) -> User:
    return User.objects.create_user(username="learner", password="p", email="l@example.com")


@pytest.fixture
def stranger(db) -> User:
    return User.objects.create_user(username="stranger", password="p", email="s@example.com")


@pytest.fixture
def logged_client(client, learner):
    client.force_login(learner)
    return client


@pytest.fixture
def api_client(learner):
    c = APIClient()
    c.force_authenticate(user=learner)
    return c


@pytest.fixture
def make_tasks(db):
    """Фабрика: n задач пользователя, у каждой k вопросов с двумя ответами."""
    def _make(user, n, questions=0, **fields):
        tasks = []
        for i in range(n):
            task = QuizGenerationTask.objects.create(
                user=user, title=fields.get("title", f"Набор {i + 1}"), text_content=f"текст {i + 1}",
            )
            for j in range(questions):
                q = Question.objects.create(task=task, content=f"Вопрос {j + 1}")
                Answer.objects.create(question=q, content="да", is_correct=True)
                Answer.objects.create(question=q, content="нет")
            tasks.append(task)
        return tasks
    return _make
