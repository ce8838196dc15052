from django import forms
from .models import QuizGenerationTask, Question, Answer
from .services.upload_flow import check_file_size


class TaskCreateForm(forms.ModelForm):
    """Форма создания задачи: текст и/или файл-исходник."""

    class Meta:
        model = QuizGenerationTask
        fields = ["title", "text_content", "source_file"]
        widgets = {
            "title": forms.TextInput(attrs={"class": "fc-input", "placeholder": "Например, Биология: клетка"}),
            "text_content": forms.Textarea(attrs={"class": "fc-input", "rows": 10,
                                                  "placeholder": "Вставьте текст конспекта"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["text_content"].required = False

    def clean_source_file(self):
        f = self.cleaned_data.get("source_file")
        if f and getattr(f, "size", 0):
            error = check_file_size(f.size)
            if error:
                raise forms.ValidationError(error)
        return f

    def clean(self):
        cleaned = super().clean()
        text = (cleaned.get("text_content") or "").strip()
        f = cleaned.get("source_file")
        if not text and not f:
            raise forms.ValidationError("Добавьте текст или загрузите файл.")
        # простой текстовый файл сразу превращаем в исходный текст
        if not text and f and f.name.lower().endswith(".txt"):
            text = f.read().decode("utf-8", errors="replace").strip()
            f.seek(0)
        if not text:
            # из прочих файлов текст здесь не извлекаем — конспект обязателен
            raise forms.ValidationError("Для файла этого типа вставьте текст конспекта.")
        cleaned["text_content"] = text
        return cleaned

    def save(self, user=None, commit=True):
        obj: QuizGenerationTask = super().save(commit=False)
        if user is not None and getattr(obj, "user_id", None) is None:
            obj.user = user
        if commit:
            obj.save()
        return obj


class QuestionForm(forms.Form):
    """Ручное добавление вопроса: текст, четыре варианта, номер верного."""
    content = forms.CharField(label="Вопрос", widget=forms.Textarea(attrs={"rows": 3}))
    answer_1 = forms.CharField(label="Ответ 1", max_length=500)
    answer_2 = forms.CharField(label="Ответ 2", max_length=500)
    answer_3 = forms.CharField(label="Ответ 3", max_length=500, required=False)
    answer_4 = forms.CharField(label="Ответ 4", max_length=500, required=False)
    correct = forms.TypedChoiceField(
        label="Верный ответ", coerce=int,
        choices=[(i, str(i)) for i in range(1, 5)], initial=1,
    )

    def clean_content(self):
        c = (self.cleaned_data.get("content") or "").strip()
        if not c:
            raise forms.ValidationError("Вопрос не может быть пустым.")
        return c

    def clean(self):
        cleaned = super().clean()
        correct = cleaned.get("correct")
        if correct and not (cleaned.get(f"answer_{correct}") or "").strip():
            self.add_error("correct", "Верный ответ должен быть заполнен.")
        return cleaned

    def save(self, task: QuizGenerationTask) -> Question:
        q = Question.objects.create(task=task, content=self.cleaned_data["content"])
        correct = self.cleaned_data["correct"]
        Answer.objects.bulk_create([
            Answer(question=q, content=text.strip(), is_correct=(i == correct))
            for i, text in (
                (i, self.cleaned_data.get(f"answer_{i}") or "") for i in range(1, 5)
            )
            if text.strip()
        ])
        return q
