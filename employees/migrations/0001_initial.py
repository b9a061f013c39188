# Generated manually

import django.utils.timezone
from django.db import migrations, models

import employees.utils


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Employee",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=employees.utils.generate_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=128)),
                ("dob", models.DateTimeField()),
                ("hire_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("job_title", models.CharField(blank=True, default="", max_length=128)),
                ("salary", models.FloatField(default=0)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(blank=True, null=True)),
                ("deleted_at", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "db_table": "employees",
                "ordering": ["created_at", "id"],
            },
        ),
    ]
