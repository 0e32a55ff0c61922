# Generated manually to create the pilot form tables
from django.db import migrations, models
import django.db.models.functions.datetime


def submission_fields(*extra):
    return [
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('name', models.TextField(help_text='Name of the person or organization')),
        ('email', models.CharField(help_text='Email address for follow-up', max_length=320)),
        ('created_at', models.DateTimeField(db_default=django.db.models.functions.datetime.Now(), db_index=True, help_text='When the submission was received')),
        *extra,
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='FamilySubmission',
            fields=submission_fields(
                ('region', models.TextField(help_text='City or region the family lives in')),
                ('interest', models.TextField(blank=True, help_text='What the family is hoping for', null=True)),
            ),
            options={
                'verbose_name': 'Family Submission',
                'verbose_name_plural': 'Family Submissions',
                'db_table': 'families',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='DonorSubmission',
            fields=submission_fields(
                ('focus', models.TextField(blank=True, help_text='Area the donor would like to support', null=True)),
                ('message', models.TextField(blank=True, help_text='Free-form message', null=True)),
            ),
            options={
                'verbose_name': 'Donor Submission',
                'verbose_name_plural': 'Donor Submissions',
                'db_table': 'donors',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='CollaboratorSubmission',
            fields=submission_fields(
                ('expertise', models.TextField(blank=True, help_text='Skills or domain the collaborator brings', null=True)),
                ('idea', models.TextField(blank=True, help_text='Proposal or idea', null=True)),
            ),
            options={
                'verbose_name': 'Collaborator Submission',
                'verbose_name_plural': 'Collaborator Submissions',
                'db_table': 'collaborators',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
    ]
