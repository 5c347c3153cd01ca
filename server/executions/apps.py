from django.apps import AppConfig


class ExecutionsConfig(AppConfig):
    name = "server.executions"
    label = "executions"
    default_auto_field = "django.db.models.AutoField"
