import pytest

from projects.models import Project, WorkType
from projects.services import projects, work_types
from timetracker_backend.results import KIND_BUSINESS_RULE, KIND_NOT_FOUND, KIND_VALIDATION

pytestmark = pytest.mark.django_db


def test_seeded_reference_data():
    assert set(Project.objects.values_list('code', flat=True)) >= {'INTERNAL', 'TRAINING', 'PROJECT-A'}
    assert set(WorkType.objects.values_list('code', flat=True)) >= {
        'DEV', 'MEET', 'TEST', 'ADMIN', 'TRAIN', 'SUPPORT'
    }


class TestCreate:

    def test_create_project_uppercases_code(self):
        result = projects.create({'code': ' mars ', 'name': 'Mars Base'})

        assert result.success
        assert result.message == 'Project created successfully'
        project = Project.objects.get(code='MARS')
        assert project.is_active
        assert project.description == ''

    def test_duplicate_code(self, project):
        result = projects.create({'code': 'apollo', 'name': 'Another Apollo'})

        assert not result.success
        assert result.kind == KIND_BUSINESS_RULE
        assert result.error == 'Project code already exists'
        assert Project.objects.get(code='APOLLO').name == 'Apollo'

    def test_missing_fields(self):
        result = work_types.create({'code': '', 'name': ''})

        assert result.kind == KIND_VALIDATION
        assert result.validation_errors['code'] == ['Work type code is required']
        assert result.validation_errors['name'] == ['Work type name is required']

    def test_create_inactive_work_type(self):
        result = work_types.create({'code': 'RND', 'name': 'Research', 'is_active': False})
        assert result.success
        assert not WorkType.objects.get(code='RND').is_active


class TestUpdate:

    def test_update_keeps_omitted_fields(self, project):
        result = projects.update('apollo', {'name': 'Apollo Program'})

        assert result.success
        assert result.message == 'Project updated successfully'
        project.refresh_from_db()
        assert project.name == 'Apollo Program'
        assert project.description == 'Moon shot'
        assert project.is_active

    def test_deactivate(self, work_type):
        result = work_types.update(work_type.code, {'is_active': False})
        assert result.success
        work_type.refresh_from_db()
        assert not work_type.is_active

    def test_code_cannot_change(self, project):
        projects.update('APOLLO', {'code': 'ZEUS', 'name': 'Zeus'})
        assert not Project.objects.filter(code='ZEUS').exists()
        assert Project.objects.get(code='APOLLO').name == 'Zeus'

    def test_update_missing(self):
        result = projects.update('NOWHERE', {'name': 'x'})
        assert result.kind == KIND_NOT_FOUND
        assert result.error == 'Project not found'

    def test_blank_name(self, project):
        result = projects.update('APOLLO', {'name': ''})
        assert result.validation_errors['name'] == ['Project name is required']


class TestLookup:

    def test_list_active_only(self, project, inactive_project):
        codes = [p.code for p in projects.list().data]
        assert 'APOLLO' in codes
        assert 'LEGACY' not in codes
        assert codes == sorted(codes)

    def test_list_all(self, inactive_project):
        codes = [p.code for p in projects.list(active_only=False).data]
        assert 'LEGACY' in codes

    def test_get(self, work_type):
        assert work_types.get('code').data == work_type
        assert work_types.get('missing').kind == KIND_NOT_FOUND


def test_update_rejects_non_object_payload(project):
    result = projects.update('APOLLO', [1])

    assert result.kind == KIND_VALIDATION
    assert result.validation_errors['non_field_errors'] == [
        'Invalid data. Expected a dictionary, but got list.'
    ]
    project.refresh_from_db()
    assert project.name == 'Apollo'
