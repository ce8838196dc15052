from django.contrib import messages
from django.contrib.auth import login
from django.contrib.auth.mixins import LoginRequiredMixin
from django.contrib.auth.models import Group
from django.urls import reverse_lazy
from django.views.generic import FormView, TemplateView
from .forms import RegisterForm
from .models import User

class RegisterView(FormView):
    template_name = "allusers/register.html"
    form_class = RegisterForm
    success_url = reverse_lazy("cards:task_list")

    def form_valid(self, form):
        user: User = form.save(commit=False)
        user.plan = User.Plan.FREE           # по умолчанию — бесплатный тариф
        user.save()
        grp = Group.objects.filter(name="learners").first()
        if grp:
            user.groups.add(grp)
        login(self.request, user)
        messages.success(self.request, "Регистрация выполнена. Добро пожаловать!")
        return super().form_valid(form)

class ProfileView(LoginRequiredMixin, TemplateView):
    template_name = "allusers/profile.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["title"] = "Профиль"
        return ctx
