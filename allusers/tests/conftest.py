import pytest
from django.contrib.auth.models import Group
from django.test import Client

# Все тесты используют кастомную модель
@pytest.fixture
def UserModel(django_user_model):
    # django_user_model уже указывает на allusers.User
    return django_user_model

@pytest.fixture
def learners_group(db):
    """Группа «learners» создаётся сигналом post_migrate — берём готовую."""
    group, _ = Group.objects.get_or_create(name="learners")
    return group

@pytest.fixture
def pro_user(UserModel):
    """Пользователь на платном тарифе."""
    return UserModel.objects.create_user(
        username="pro",
        password="pass1234",
        plan=UserModel.Plan.PRO,
        email="pro@example.com",
    )

@pytest.fixture
def auth_client_pro(pro_user):
    """Отдельный клиент, залогиненный как pro-пользователь (фикстура client остаётся анонимной)."""
    c = Client()
    c.force_login(pro_user)
    return c
