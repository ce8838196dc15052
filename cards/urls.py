from django.urls import path, include
from . import views

app_name = "cards"

urlpatterns = [
    path("", views.HomeView.as_view(), name="home"),

    # API
    path("api/", include(("cards.api_urls", "cards_api"), namespace="cards_api")),

    # Наборы карточек
    path("flash-cards/", views.TaskListView.as_view(), name="task_list"),
    path("flash-cards/new/", views.TaskCreateView.as_view(), name="task_create"),
    path("flash-cards/<int:pk>/", views.TaskDetailView.as_view(), name="task_detail"),
    path("flash-cards/<int:pk>/delete/", views.TaskDeleteView.as_view(), name="task_delete"),

    # Вопросы
    path("flash-cards/<int:pk>/questions/", views.QuestionCreateView.as_view(), name="question_create"),
]
