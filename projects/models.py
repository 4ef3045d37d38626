from django.db import models


class ReferenceCode(models.Model):
    """Small lookup table keyed by an upper-case code"""
    code = models.CharField(max_length=50, primary_key=True)
    name = models.CharField(max_length=200)
    description = models.TextField(max_length=1000, blank=True, default='')
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ['code']

    def __str__(self):
        return f"{self.code} - {self.name}"

    def save(self, *args, **kwargs):
        if self.code:
            self.code = self.code.strip().upper()
        super().save(*args, **kwargs)


class Project(ReferenceCode):
    class Meta(ReferenceCode.Meta):
        indexes = [
            models.Index(fields=['is_active'], name='projects_project_active_idx'),
        ]


class WorkType(ReferenceCode):
    class Meta(ReferenceCode.Meta):
        indexes = [
            models.Index(fields=['is_active'], name='projects_worktype_active_idx'),
        ]
