from __future__ import annotations

import logging
import re
from typing import Callable

from bs4 import BeautifulSoup, FeatureNotFound  # type: ignore
from django.http import HttpRequest, HttpResponse, HttpResponsePermanentRedirect
from django.template.loader import render_to_string
from django.urls import NoReverseMatch, reverse

from .engine.types import Present, Redirect
from .services import guess_for_request

logger = logging.getLogger(__name__)

OPTIONS_TEMPLATE = 'intelligent404/options.html'

_BODY_TAG_RE = re.compile(r'<body[\s>]', re.IGNORECASE)


class Intelligent404Middleware:
    """Redirect or suggest pages for requests that end in a 404."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        response = self.get_response(request)
        if response.status_code != 404 or getattr(response, 'streaming', False):
            return response

        decision = guess_for_request(request)

        if isinstance(decision, Redirect):
            logger.info('Redirecting %s to %s', request.path, decision.link)
            return HttpResponsePermanentRedirect(decision.link)

        if isinstance(decision, Present) and self._is_html(response):
            logger.debug(
                'Suggesting %d group(s) for %s',
                len(decision.groups),
                request.path,
            )
            self._add_options(request, response, decision)

        return response

    @staticmethod
    def _is_html(response: HttpResponse) -> bool:
        return response.get('Content-Type', '').lower().startswith('text/html')

    def _add_options(self, request: HttpRequest, response: HttpResponse, decision: Present) -> None:
        charset = response.charset or 'utf-8'
        original = response.content.decode(charset, errors='replace')
        options_html = render_to_string(
            OPTIONS_TEMPLATE,
            {
                'groups': decision.groups,
                'search_query': decision.search_query,
                'search_url': self._search_url(),
            },
            request=request,
        )

        response.intelligent404 = {
            'content_without_options': original,
            'options': options_html,
            'search_query': decision.search_query,
        }
        response.content = inject_options(original, options_html)

    @staticmethod
    def _search_url() -> str | None:
        try:
            return reverse('intelligent404:search')
        except NoReverseMatch:
            return None


def inject_options(html: str, options_html: str) -> str:
    """Insert ``options_html`` at the end of the document body."""

    if not _BODY_TAG_RE.search(html):
        return html + options_html

    try:
        soup = BeautifulSoup(html, 'lxml')
    except FeatureNotFound:
        soup = BeautifulSoup(html, 'html.parser')

    if soup.body is None:
        return html + options_html

    soup.body.append(BeautifulSoup(options_html, 'html.parser'))
    return str(soup)


def intelligent_404(get_response: Callable[[HttpRequest], HttpResponse]) -> Intelligent404Middleware:
    return Intelligent404Middleware(get_response)
