"""Development server that listens on the configured PORT by default."""

from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as StaticfilesRunserverCommand


class Command(StaticfilesRunserverCommand):
    @property
    def default_port(self) -> str:
        return str(settings.PORT)
