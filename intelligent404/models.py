"""Database models for the intelligent404 app.

The site is a tree of pages. Each page has a slug, and its URL is built from
the slugs of its ancestors. Besides regular content pages there are error
pages (rendered with their error code), redirector pages and virtual pages
that mirror another page's content.
"""

from __future__ import annotations

from django.db import models

HOME_SLUG = 'home'


class PageType(models.TextChoices):
    PAGE = 'page', 'Page'
    ERROR = 'error', 'Error page'
    REDIRECTOR = 'redirector', 'Redirector page'
    VIRTUAL = 'virtual', 'Virtual page'


class PageQuerySet(models.QuerySet):
    def get_by_path(self, path: str) -> 'Page':
        """Return the page whose URL is ``path``; raise ``DoesNotExist`` otherwise."""

        slugs = [slug for slug in path.split('/') if slug]
        if not slugs:
            return self.get(parent__isnull=True, slug=HOME_SLUG)

        page = None
        for slug in slugs:
            page = self.get(parent=page, slug=slug)
        return page

    def link_map(self) -> dict[int, str]:
        """Return the URL of every page keyed by primary key, using one query."""

        rows = {pk: (slug, parent_id) for pk, slug, parent_id in self.values_list('pk', 'slug', 'parent_id')}
        links: dict[int, str] = {}
        for pk in rows:
            links[pk] = _build_link(pk, rows)
        return links


def _build_link(pk: int, rows: dict[int, tuple[str, int | None]]) -> str:
    slug, parent_id = rows[pk]
    if parent_id is None and slug == HOME_SLUG:
        return '/'
    slugs = [slug]
    seen = {pk}
    while parent_id is not None and parent_id in rows and parent_id not in seen:
        seen.add(parent_id)
        slug, parent_id = rows[parent_id]
        slugs.append(slug)
    return '/' + '/'.join(reversed(slugs)) + '/'


class Page(models.Model):
    """A node in the site's page hierarchy."""

    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, db_index=True)
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='children',
    )
    page_type = models.CharField(max_length=20, choices=PageType.choices, default=PageType.PAGE)
    error_code = models.PositiveSmallIntegerField(null=True, blank=True)
    redirect_url = models.CharField(max_length=500, blank=True)
    copy_of = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='virtual_copies',
    )
    content = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = PageQuerySet.as_manager()

    class Meta:
        ordering = ['title']
        unique_together = ('parent', 'slug')

    def __str__(self) -> str:  # pragma: no cover - convenience display
        return self.title

    def get_absolute_url(self) -> str:
        if self.parent_id is None and self.slug == HOME_SLUG:
            return '/'
        slugs = [self.slug]
        ancestor = self.parent
        while ancestor is not None:
            slugs.append(ancestor.slug)
            ancestor = ancestor.parent
        return '/' + '/'.join(reversed(slugs)) + '/'
