"""Core app models."""

from typing import ClassVar

from django.db import models

from .content import SECTIONS, default_section

SECTION_CHOICES = [(section, section.title()) for section in SECTIONS]


class SiteContentQuerySet(models.QuerySet):
    async def aresolved(self) -> dict:
        """Return every section, using stored data where present and defaults otherwise."""
        content = {section: default_section(section) for section in SECTIONS}
        async for row in self.filter(section__in=SECTIONS):
            content[row.section] = row.data
        return content

    def resolved(self) -> dict:
        content = {section: default_section(section) for section in SECTIONS}
        for row in self.filter(section__in=SECTIONS):
            content[row.section] = row.data
        return content


class SiteContent(models.Model):
    """Editable landing page content, one JSON document per section."""

    section = models.CharField(max_length=50, unique=True, choices=SECTION_CHOICES)
    data = models.JSONField(default=dict)
    updated_at = models.DateTimeField(auto_now=True)

    objects = SiteContentQuerySet.as_manager()

    class Meta:
        ordering: ClassVar[list[str]] = ["section"]
        verbose_name = "site content section"
        verbose_name_plural = "site content"

    def __str__(self) -> str:
        return self.section
