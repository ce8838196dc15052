from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import User

@admin.register(User)
class CustomUserAdmin(UserAdmin):
    fieldsets = UserAdmin.fieldsets + (
        ("Профиль", {"fields": ("plan", "display_name")}),
    )
    list_display = ("username", "email", "plan", "is_staff", "is_active")
    list_filter = ("plan", "is_staff", "is_superuser", "is_active")
