# FC/cards/views.py
import logging
from typing import Any, Dict

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.paginator import Paginator
from django.db import transaction
from django.http import HttpResponseRedirect
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views import View
from django.views.generic import TemplateView, FormView

from django.conf import settings

from .forms import TaskCreateForm, QuestionForm
from .models import QuizGenerationTask
from .services.pager import ItemPager, build_page_links
from .services.tasks import tasks_for_user
from .services.upload_flow import UploadFlow, UploadFlowError
from .services.validation import Ok, validate_limit, validate_page

logger = logging.getLogger(__name__)

QUESTIONS_PER_PAGE = 5


def _page_from(request, param: str = "page") -> int:
    # кривой ?page= не роняет страницу — просто первая
    result = validate_page(request.GET.get(param))
    return result.value if isinstance(result, Ok) else 1


# ---------- MIXINS ----------
class OwnTaskMixin:
    """Достаёт задачу текущего пользователя по pk; чужая/удалённая — редирект на список."""
    task_context_name = "task"

    def dispatch(self, request, *args, **kwargs):
        try:
            self.task = QuizGenerationTask.objects.get(pk=kwargs.get("pk"), user=request.user)
        except QuizGenerationTask.DoesNotExist:
            messages.error(request, "Набор карточек не найден")
            return redirect("cards:task_list")
        return super().dispatch(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx[self.task_context_name] = self.task
        return ctx


# ---------- PAGES ----------
class HomeView(TemplateView):
    template_name = "cards/index.html"

    def get_context_data(self, **kwargs):
        return {"title": "FlashCards — старт"}


class TaskListView(LoginRequiredMixin, TemplateView):
    """Мои карточки: серверная пагинация ссылками ?page=N."""
    template_name = "cards/tasks.html"

    def get_context_data(self, **kwargs: Any) -> Dict[str, Any]:
        ctx = super().get_context_data(**kwargs)

        per_result = validate_limit(self.request.GET.get("per"), settings.TASKS_PAGE_SIZE)
        per = per_result.value if isinstance(per_result, Ok) else settings.TASKS_PAGE_SIZE

        paginator = Paginator(tasks_for_user(self.request.user), per)
        page_obj = paginator.get_page(_page_from(self.request))

        ctx.update(
            title="Мои карточки",
            tasks=page_obj.object_list,
            paginator=paginator,
            page_obj=page_obj,
            per=per,
            base_path=self.request.path,
            # нестандартный размер страницы переносим во все ссылки панели
            page_query={"per": per} if per != settings.TASKS_PAGE_SIZE else None,
        )
        return ctx


class TaskDetailView(LoginRequiredMixin, OwnTaskMixin, TemplateView):
    """Задача и её вопросы, по QUESTIONS_PER_PAGE на странице (?qpage=N)."""
    template_name = "cards/task_detail.html"

    def get_context_data(self, **kwargs: Any) -> Dict[str, Any]:
        ctx = super().get_context_data(**kwargs)
        questions = list(self.task.questions.prefetch_related("answers"))
        pager = ItemPager(questions, QUESTIONS_PER_PAGE)
        pager.navigate_to_page(min(_page_from(self.request, "qpage"), max(1, pager.total_pages)))

        ctx.update(
            title=self.task.display_title,
            questions=pager.current_items,
            question_pager=pager,
            question_links=build_page_links(
                pager.current_page, pager.total_pages, self.request.path, page_param="qpage"
            ),
            question_form=kwargs.get("question_form") or QuestionForm(),
        )
        return ctx


class QuestionCreateView(LoginRequiredMixin, OwnTaskMixin, View):
    """POST: добавить вопрос и перейти на страницу, где он оказался."""

    def post(self, request, *args, **kwargs):
        form = QuestionForm(request.POST)
        if not form.is_valid():
            view = TaskDetailView()
            view.setup(request, *args, **kwargs)
            view.task = self.task
            ctx = view.get_context_data(question_form=form, **kwargs)
            return render(request, view.template_name, ctx, status=400)

        questions = list(self.task.questions.all())
        target = {}
        pager = ItemPager(questions, QUESTIONS_PER_PAGE,
                          page=max(1, -(-len(questions) // QUESTIONS_PER_PAGE)),
                          on_page_change=lambda p: target.update(page=p))
        pager.handle_item_added()
        form.save(self.task)
        messages.success(request, "Вопрос добавлен")

        page = target.get("page", pager.current_page)
        url = reverse("cards:task_detail", kwargs={"pk": self.task.pk})
        return HttpResponseRedirect(f"{url}?qpage={page}")


class TaskCreateView(LoginRequiredMixin, FormView):
    """Создание задачи; загрузка исходника идёт через UploadFlow."""
    template_name = "cards/task_form.html"
    form_class = TaskCreateForm

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["title"] = "Новый набор карточек"
        return ctx

    def form_valid(self, form):
        upload = form.cleaned_data.get("source_file")
        flow = UploadFlow()
        flow.prepare(getattr(upload, "name", "") or "")
        try:
            with transaction.atomic():
                task = form.save(user=self.request.user, commit=False)
                if upload:
                    # сначала фиксируем задачу без файла, затем прикрепляем файл
                    task.source_file = ""
                    task.save()
                    flow.start_upload(task.pk)
                    task.source_file = upload
                    task.save(update_fields=["source_file", "updated_at"])
                else:
                    task.save()
                flow.complete(task.pk)
        except (OSError, UploadFlowError) as exc:
            flow.fail(str(exc))
            form.add_error("source_file", "Не удалось сохранить файл. Попробуйте ещё раз.")
            return self.form_invalid(form)

        logger.info("task %s created by user=%s (file=%s)", task.pk, self.request.user.pk, bool(upload))
        messages.success(self.request, "Набор карточек создан")
        return redirect("cards:task_detail", pk=flow.state.task_id)


class TaskDeleteView(LoginRequiredMixin, OwnTaskMixin, View):
    """POST: мягкое удаление задачи."""

    def post(self, request, *args, **kwargs):
        self.task.soft_delete()
        messages.success(request, "Набор карточек удалён")
        return redirect("cards:task_list")


def custom_permission_denied(request, exception=None):
    """
    Кастомный обработчик 403 Forbidden.
    Вызывается, когда у пользователя нет прав на действие/страницу.
    """
    context = {
        "title": "Недостаточно прав",
        "message": "У вас нет разрешения на просмотр этой страницы.",
    }
    # используем шаблон templates/cards/403.html
    return render(request, "cards/403.html", context=context, status=403)
