from .document_loader import Document, DocumentLoader, normalize, read_document

__all__ = ['Document', 'DocumentLoader', 'normalize', 'read_document']
