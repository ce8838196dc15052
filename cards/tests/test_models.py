import pytest
from cards.models import QuizGenerationTask, Question


@pytest.mark.django_db
def test_task_defaults_and_str(learner):
    """Новая задача: статус PENDING, без даты генерации, title очищается от пробелов."""
    task = QuizGenerationTask.objects.create(user=learner, title="  Клетка  ", text_content="Митохондрии")
    assert task.status == QuizGenerationTask.Status.PENDING
    assert task.generated_at is None
    assert task.title == "Клетка"
    assert str(task) == "Клетка"
    assert task.created_at is not None and task.updated_at is not None


@pytest.mark.django_db
def test_display_title_falls_back_to_text(learner):
    task = QuizGenerationTask.objects.create(user=learner, text_content="слово " * 30)
    assert task.display_title.endswith("…")
    assert len(task.display_title) == 61
    assert str(task) == f"Задача #{task.pk}"


@pytest.mark.django_db
def test_soft_delete_hides_from_default_manager(learner, make_tasks):
    task, other = make_tasks(learner, 2)
    task.soft_delete()

    assert task.is_deleted
    assert list(QuizGenerationTask.objects.filter(user=learner)) == [other]
    assert QuizGenerationTask.all_objects.filter(user=learner).count() == 2


@pytest.mark.django_db
def test_deleted_questions_are_hidden_from_task(learner, make_tasks):
    (task,) = make_tasks(learner, 1, questions=3)
    q = task.questions.first()
    q.soft_delete()
    assert task.questions.count() == 2
    assert Question.all_objects.filter(task=task).count() == 3


@pytest.mark.django_db
def test_ordering_newest_first(learner, make_tasks):
    first, second = make_tasks(learner, 2)
    assert list(QuizGenerationTask.objects.filter(user=learner)) == [second, first]


def test_task_blend_with_mixer(learner, mixer):
    task = mixer.blend("cards.QuizGenerationTask", user=learner, title="Mixer")
    assert task.pk and task.user == learner
