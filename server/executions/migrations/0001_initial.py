from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Execution",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("timestamp", models.DateTimeField(auto_now_add=True)),
                ("commands", models.IntegerField()),
                ("result", models.IntegerField()),
                ("duration", models.FloatField()),
            ],
            options={
                "db_table": "executions",
                "ordering": ["-timestamp"],
            },
        ),
    ]
