"""Services"""

from resume_paginator.services.controller import PaginationController
from resume_paginator.services.document_loader import load_document_file, parse_document
from resume_paginator.services.measurement import CachedMeasurer, HeightTable, resolve_heights
from resume_paginator.services.navigator import PageNavigator, fit_scale
from resume_paginator.services.packer import pack
from resume_paginator.services.pagination import (
    build_measurer,
    export_resume_pdf,
    paginate,
    render_resume_pdf,
)

__all__ = [
    "pack",
    "paginate",
    "build_measurer",
    "export_resume_pdf",
    "render_resume_pdf",
    "resolve_heights",
    "CachedMeasurer",
    "HeightTable",
    "PageNavigator",
    "PaginationController",
    "fit_scale",
    "load_document_file",
    "parse_document",
]
