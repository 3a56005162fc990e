# ABOUTME: Business logic and orchestration layer
# ABOUTME: Pipeline Stage 3: normalized content → labelled records → CSV rows

"""
Core Layer: Business logic and workflow orchestration

This layer handles:
- Domain models for normalized content and exported records
- Article type / content area labelling
- CSV emission and the export run itself

Data Flow: extraction/ pages → normalize/ content → Labelled records → CSV file
"""

from .models import ArticleLabels, ExportStats, NormalizedContent, NormalizedRecord

# Import service on-demand to avoid circular imports
# Use: from wikirights_export.core.service import ExportService

__all__ = [
    "ArticleLabels",
    "ExportStats",
    "NormalizedContent",
    "NormalizedRecord",
]
