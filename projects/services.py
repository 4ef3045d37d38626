import logging
from collections.abc import Mapping

from django.db import IntegrityError, transaction
from rest_framework.settings import api_settings

from timetracker_backend.results import ServiceResult

from .models import Project, WorkType
from .serializers import ProjectSerializer, WorkTypeSerializer

logger = logging.getLogger(__name__)


class ReferenceCatalog:
    """Create, update and look up rows of a code-keyed reference table."""

    def __init__(self, model, serializer_class, label):
        self.model = model
        self.serializer_class = serializer_class
        self.label = label

    def find(self, code):
        if not code:
            return None
        return self.model.objects.filter(code=code.strip().upper()).first()

    def create(self, data):
        serializer = self.serializer_class(data=data)
        if not serializer.is_valid():
            return ServiceResult.validation_failure(serializer.errors)

        code = serializer.validated_data['code']
        if self.model.objects.filter(code=code).exists():
            logger.warning("Rejected duplicate %s code %s", self.label.lower(), code)
            return ServiceResult.failure(f'{self.label} code already exists')

        try:
            with transaction.atomic():
                instance = serializer.save()
        except IntegrityError:
            return ServiceResult.failure(f'{self.label} code already exists')

        logger.info("Created %s %s", self.label.lower(), instance.code)
        return ServiceResult.ok(instance, f'{self.label} created successfully')

    def update(self, code, data):
        instance = self.find(code)
        if instance is None:
            if not code or not code.strip():
                return ServiceResult.validation_failure({'code': [f'{self.label} code is required']})
            return ServiceResult.not_found(f'{self.label} not found')

        if not isinstance(data, Mapping):
            return ServiceResult.validation_failure({
                api_settings.NON_FIELD_ERRORS_KEY: [
                    f'Invalid data. Expected a dictionary, but got {type(data).__name__}.'
                ]
            })

        # Fields left out of the payload keep their stored values
        merged = {
            'name': instance.name,
            'description': instance.description,
            'is_active': instance.is_active,
        }
        merged.update({key: value for key, value in data.items() if key in merged})
        merged['code'] = instance.code

        serializer = self.serializer_class(instance, data=merged)
        if not serializer.is_valid():
            return ServiceResult.validation_failure(serializer.errors)

        with transaction.atomic():
            instance = serializer.save()

        logger.info("Updated %s %s", self.label.lower(), instance.code)
        return ServiceResult.ok(instance, f'{self.label} updated successfully')

    def get(self, code):
        instance = self.find(code)
        if instance is None:
            return ServiceResult.not_found(f'{self.label} not found')
        return ServiceResult.ok(instance)

    def list(self, active_only=True):
        queryset = self.model.objects.all()
        if active_only:
            queryset = queryset.filter(is_active=True)
        return ServiceResult.ok(list(queryset.order_by('code')))


projects = ReferenceCatalog(Project, ProjectSerializer, 'Project')
work_types = ReferenceCatalog(WorkType, WorkTypeSerializer, 'Work type')
