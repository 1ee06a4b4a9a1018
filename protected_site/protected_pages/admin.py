"""Django admin configuration for protected pages."""

from django import forms
from django.contrib import admin

from .models import PathAlias, ProtectedPage


class ProtectedPageForm(forms.ModelForm):
    raw_password = forms.CharField(
        label='Password', required=False, widget=forms.PasswordInput,
        help_text='Leave blank to keep the current password.'
    )
    clear_password = forms.BooleanField(
        required=False, help_text='Remove the page password so the global one applies.'
    )

    class Meta:
        model = ProtectedPage
        fields = ['path']

    def save(self, commit=True):
        page = super().save(commit=False)
        if self.cleaned_data.get('clear_password'):
            page.set_password('')
        elif self.cleaned_data.get('raw_password'):
            page.set_password(self.cleaned_data['raw_password'])
        if commit:
            page.save()
        return page


@admin.register(ProtectedPage)
class ProtectedPageAdmin(admin.ModelAdmin):
    form = ProtectedPageForm
    list_display = ['id', 'path', 'has_page_password']
    search_fields = ['path']

    @admin.display(boolean=True, description='Own password')
    def has_page_password(self, obj):
        return obj.has_page_password


@admin.register(PathAlias)
class PathAliasAdmin(admin.ModelAdmin):
    list_display = ['alias', 'path']
    search_fields = ['alias', 'path']
