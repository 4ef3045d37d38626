from rest_framework import serializers
from .models import Project, WorkType


class ReferenceCodeSerializer(serializers.ModelSerializer):
    """Create/update serializer shared by projects and work types.

    The code is validated here only for presence; uniqueness and existence
    are business rules checked by the service so they surface as general
    failures rather than field errors.
    """
    entity_label = 'Reference'

    code = serializers.CharField(max_length=50)
    name = serializers.CharField(max_length=200)
    description = serializers.CharField(max_length=1000, required=False, allow_blank=True, default='')
    is_active = serializers.BooleanField(required=False, default=True)

    class Meta:
        fields = ['code', 'name', 'description', 'is_active', 'created_at']
        read_only_fields = ['created_at']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field_name, title in (('code', 'code'), ('name', 'name')):
            message = f'{self.entity_label} {title} is required'
            self.fields[field_name].error_messages.update({
                'required': message,
                'blank': message,
                'null': message,
            })

    def validate_code(self, value):
        return value.strip().upper()


class ProjectSerializer(ReferenceCodeSerializer):
    entity_label = 'Project'

    class Meta(ReferenceCodeSerializer.Meta):
        model = Project


class WorkTypeSerializer(ReferenceCodeSerializer):
    entity_label = 'Work type'

    class Meta(ReferenceCodeSerializer.Meta):
        model = WorkType


class ReferenceChoiceSerializer(serializers.Serializer):
    """Minimal code/name pair for dropdowns"""
    code = serializers.CharField()
    name = serializers.CharField()
