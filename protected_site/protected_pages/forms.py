from django import forms

from .login import InvalidPassword


class ProtectedPageLoginForm(forms.Form):
    password = forms.CharField(widget=forms.PasswordInput(attrs={"size": 20}))
    # disabled: the value always comes from the query string seen at render time
    protected_page = forms.IntegerField(widget=forms.HiddenInput, disabled=True)

    def __init__(self, *args, handler, config, protected_page, **kwargs):
        kwargs.setdefault("initial", {})["protected_page"] = protected_page
        super().__init__(*args, **kwargs)
        self.handler = handler
        self.config = config
        self.fields["password"].label = config.others.protected_pages_password_label
        self.unlock_key = None

    def clean(self):
        cleaned = super().clean()
        password = cleaned.get("password")
        if password is None:
            return cleaned
        try:
            self.unlock_key = self.handler.validate(password, cleaned["protected_page"], self.config)
        except InvalidPassword as e:
            self.add_error("password", e.message)
        return cleaned
