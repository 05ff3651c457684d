"""Data models and type definitions"""

from resume_paginator.models.document import InvalidDocumentError, ResumeDocumentIn
from resume_paginator.models.layout import Block, Page, PlacedBlock

__all__ = [
    "Block",
    "InvalidDocumentError",
    "Page",
    "PlacedBlock",
    "ResumeDocumentIn",
]
