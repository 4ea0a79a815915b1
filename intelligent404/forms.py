"""Forms for the intelligent404 app."""

from __future__ import annotations

from django import forms


class SearchForm(forms.Form):
    """Site search, prefilled with the phrase suggested on not-found pages."""

    q = forms.CharField(
        required=False,
        max_length=200,
        label='Search',
        widget=forms.TextInput(attrs={'placeholder': 'Search this site...'}),
    )

    def clean_q(self) -> str:
        return ' '.join(self.cleaned_data.get('q', '').split())
