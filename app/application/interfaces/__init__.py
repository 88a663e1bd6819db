"""Application interfaces (ports) implemented by infrastructure."""

from app.application.interfaces.repositories import IDocumentRepository

__all__ = ["IDocumentRepository"]
