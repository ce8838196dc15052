from django.contrib import admin
from .models import QuizGenerationTask, Question, Answer


class AnswerInline(admin.TabularInline):
    model = Answer
    extra = 0


@admin.register(QuizGenerationTask)
class QuizGenerationTaskAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "user", "status", "created_at", "deleted_at")
    list_filter = ("status",)
    search_fields = ("title", "user__username")
    date_hierarchy = "created_at"

    def get_queryset(self, request):
        # в админке видны и мягко удалённые
        return QuizGenerationTask.all_objects.select_related("user")


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ("task", "content", "created_at")
    search_fields = ("content", "task__title")
    inlines = [AnswerInline]
