from django.db import migrations

PROJECTS = [
    ('INTERNAL', 'Internal Tasks', 'Internal company tasks'),
    ('TRAINING', 'Training & Development', 'Learning and training activities'),
    ('PROJECT-A', 'Project Alpha', 'Main product development'),
]

WORK_TYPES = [
    ('DEV', 'Development', 'Software development work'),
    ('MEET', 'Meetings', 'Meetings and discussions'),
    ('TEST', 'Testing', 'Quality assurance and testing'),
    ('ADMIN', 'Administration', 'Administrative tasks'),
    ('TRAIN', 'Training', 'Training and learning'),
    ('SUPPORT', 'Support', 'Customer support'),
]


def seed_reference_data(apps, schema_editor):
    Project = apps.get_model('projects', 'Project')
    WorkType = apps.get_model('projects', 'WorkType')

    for code, name, description in PROJECTS:
        Project.objects.get_or_create(
            code=code, defaults={'name': name, 'description': description, 'is_active': True}
        )
    for code, name, description in WORK_TYPES:
        WorkType.objects.get_or_create(
            code=code, defaults={'name': name, 'description': description, 'is_active': True}
        )


def remove_reference_data(apps, schema_editor):
    Project = apps.get_model('projects', 'Project')
    WorkType = apps.get_model('projects', 'WorkType')
    Project.objects.filter(code__in=[code for code, _, _ in PROJECTS]).delete()
    WorkType.objects.filter(code__in=[code for code, _, _ in WORK_TYPES]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('projects', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_reference_data, remove_reference_data),
    ]
