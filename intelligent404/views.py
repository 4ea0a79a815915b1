"""Django views for the intelligent404 app.

These views serve the page hierarchy and a simple site search. Unknown
paths raise ``Http404``; the middleware then decides whether to redirect
the visitor or to suggest alternatives.
"""

from __future__ import annotations

from django.db import models
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET

from .forms import SearchForm
from .models import Page, PageType

UNLISTED_PAGE_TYPES = (PageType.ERROR, PageType.REDIRECTOR, PageType.VIRTUAL)


def _render_page(request: HttpRequest, page: Page) -> HttpResponse:
    if page.page_type == PageType.REDIRECTOR and page.redirect_url:
        return redirect(page.redirect_url)

    source = page.copy_of if page.page_type == PageType.VIRTUAL and page.copy_of else page
    status = page.error_code if page.page_type == PageType.ERROR and page.error_code else 200
    return render(
        request,
        'intelligent404/page.html',
        {'page': page, 'content': source.content},
        status=status,
    )


@require_GET
def home(request: HttpRequest) -> HttpResponse:
    """Render the home page, or a 404 if none has been created yet."""

    try:
        page = Page.objects.get_by_path('')
    except Page.DoesNotExist:
        raise Http404('No home page has been created.')
    return _render_page(request, page)


@require_GET
def page_detail(request: HttpRequest, url_path: str) -> HttpResponse:
    """Resolve ``url_path`` against the page tree and render the page."""

    try:
        page = Page.objects.get_by_path(url_path)
    except Page.DoesNotExist:
        raise Http404(f'No page found at /{url_path}/')
    return _render_page(request, page)


@require_GET
def search(request: HttpRequest) -> HttpResponse:
    """List pages whose title or slug contains the query."""

    form = SearchForm(request.GET or None)
    query = ''
    results = Page.objects.none()
    if form.is_valid():
        query = form.cleaned_data['q']
    if query:
        results = (
            Page.objects
            .exclude(page_type__in=UNLISTED_PAGE_TYPES)
            .filter(models.Q(title__icontains=query) | models.Q(slug__icontains=query))
            .select_related('parent')
        )
    return render(
        request,
        'intelligent404/search.html',
        {
            'form': form,
            'query': query,
            'results': results,
        },
    )
