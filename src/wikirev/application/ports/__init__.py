"""Application ports - interfaces for external adapters."""

from wikirev.application.ports.renderer import Renderer
from wikirev.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Renderer",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
