# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: FC/cards/serializers.py
# Назначение: DRF-сериализаторы для задач генерации, вопросов и ответов
# ─────────────────────────────────────────────────────────────────────────────

from rest_framework import serializers  # импорт базового сериализатора
from .models import QuizGenerationTask, Question, Answer  # импорт нужных моделей


class AnswerSerializer(serializers.ModelSerializer):
    """Вариант ответа."""
    text = serializers.CharField(source="content")
    isCorrect = serializers.BooleanField(source="is_correct")

    class Meta:
        model = Answer
        fields = ["id", "text", "isCorrect"]


class QuestionSerializer(serializers.ModelSerializer):
    """Вопрос вместе с вариантами ответа."""
    text = serializers.CharField(source="content")
    answers = AnswerSerializer(many=True, read_only=True)

    class Meta:
        model = Question
        fields = ["id", "text", "answers"]


class TaskSummarySerializer(serializers.ModelSerializer):
    """Строка списка задач: без текста и вопросов, только их количество."""
    title = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    questionsCount = serializers.SerializerMethodField()

    class Meta:
        model = QuizGenerationTask
        fields = ["id", "status", "title", "createdAt", "updatedAt", "questionsCount"]

    def get_title(self, obj) -> str | None:
        return obj.title or None

    def get_questionsCount(self, obj) -> int:
        # в списке счётчик приходит аннотацией, в детальном — считаем
        count = getattr(obj, "questions_count", None)
        return count if count is not None else obj.questions.count()


class TaskDetailSerializer(TaskSummarySerializer):
    """Детальный просмотр: добавляем дату генерации и вопросы с ответами."""
    generatedAt = serializers.DateTimeField(source="generated_at", read_only=True)
    questions = QuestionSerializer(many=True, read_only=True)

    class Meta(TaskSummarySerializer.Meta):
        fields = [f for f in TaskSummarySerializer.Meta.fields if f != "questionsCount"] + ["generatedAt", "questions"]
