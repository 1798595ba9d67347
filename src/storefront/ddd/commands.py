"""Command — base for requests dispatched through Application.execute()."""
from dataclasses import dataclass


@dataclass
class Command:
    """Dataclass base; Application routes each command type to exactly one handler."""
