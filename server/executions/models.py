from django.db import models

from vacuum_core.domain.models import SavedExecution


class Execution(models.Model):
    timestamp = models.DateTimeField(auto_now_add=True)
    commands = models.IntegerField()
    result = models.IntegerField()
    duration = models.FloatField()

    class Meta:
        db_table = "executions"
        ordering = ["-timestamp"]

    def to_saved(self) -> SavedExecution:
        return SavedExecution(
            id=self.id,
            timestamp=self.timestamp,
            commands=self.commands,
            result=self.result,
            duration=self.duration,
        )
