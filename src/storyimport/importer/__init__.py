"""Story archive import and media reconciliation"""

__all__ = [
    "ElementIndex",
    "ImportPhase",
    "ImportResult",
    "LocalResourceConverter",
    "MediaReconciler",
    "ReconciliationResult",
    "StoryImporter",
    "merge_media",
    "merge_state",
]

from .element_index import ElementIndex
from .orchestrator import ImportPhase, ImportResult, StoryImporter
from .reconciler import MediaReconciler, ReconciliationResult
from .resource_converter import LocalResourceConverter
from .state_merge import merge_media, merge_state
