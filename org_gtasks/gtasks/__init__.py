"""Google Tasks module for org-gtasks."""

from .gateway import TasksGateway
from .tasks import GoogleTasksManager

__all__ = ['TasksGateway', 'GoogleTasksManager']
