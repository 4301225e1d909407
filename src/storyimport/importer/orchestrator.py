"""Entry point of a story import: validate, extract, reconcile, merge, install"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from storyimport.config import settings
from storyimport.errors import (
    InvalidContainerError,
    MalformedDescriptorError,
    MissingDescriptorError,
)
from storyimport.importer.element_index import ElementIndex
from storyimport.importer.reconciler import MediaReconciler, ReconciliationResult
from storyimport.importer.resource_converter import (
    LocalResourceConverter,
    ResourceConverter,
)
from storyimport.importer.state_merge import merge_media, merge_state
from storyimport.models.dao.archive_reader import ArchiveReader
from storyimport.models.dao.descriptor_parser import parse_descriptor
from storyimport.models.descriptor import ProjectDescriptor
from storyimport.models.import_file import ImportFile
from storyimport.stores import MediaStore, StoryStatus, StoryStore
from storyimport.ui.file_requester import FileRequester
from storyimport.ui.snackbar import Snackbar


class ImportPhase(Enum):
    """Steps of an import"""

    IDLE = "idle"
    VALIDATING = "validating"
    EXTRACTING = "extracting"
    RECONCILING = "reconciling"
    MERGING = "merging"
    INSTALLED = "installed"
    FAILED = "failed"


@dataclass
class ImportResult:
    """What happened during an import"""

    phase: ImportPhase
    message: str = ""
    media_added: int = 0
    failures: dict[str, str] = field(default_factory=dict)
    missing_sources: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.phase == ImportPhase.INSTALLED


class StoryImporter:
    """Imports a previously exported story archive into the live stores"""

    def __init__(
        self,
        story_store: StoryStore,
        media_store: MediaStore,
        status: StoryStatus,
        snackbar: Snackbar,
        converter: ResourceConverter | None = None,
        file_requester: FileRequester | None = None,
    ):
        self.story_store: StoryStore = story_store
        self.media_store: MediaStore = media_store
        self.status: StoryStatus = status
        self.snackbar: Snackbar = snackbar
        self.reconciler: MediaReconciler = MediaReconciler(
            converter or LocalResourceConverter()
        )
        self.file_requester: FileRequester | None = file_requester
        self.phase: ImportPhase = ImportPhase.IDLE
        self.logger: logging.Logger = logging.getLogger("StoryImporter")

    def _enter(self, phase: ImportPhase) -> None:
        self.logger.debug("%s -> %s", self.phase.value, phase.value)
        self.phase = phase

    async def import_story(self) -> ImportResult:
        """Ask the user for an archive and import it"""
        if self.file_requester is None:
            raise RuntimeError("No file requester configured")
        return await self.handle_files(self.file_requester.request_files())

    async def handle_files(self, files: Sequence[ImportFile]) -> ImportResult:
        """Import the first of the selected files"""
        self.status.update_is_importing(True)
        try:
            return await self._run(files)
        finally:
            self.phase = ImportPhase.IDLE
            self.status.update_is_importing(False)

    async def _run(self, files: Sequence[ImportFile]) -> ImportResult:
        self._enter(ImportPhase.VALIDATING)
        if not files or not ArchiveReader.is_supported(files[0]):
            self.logger.warning("Rejected selection: %s", [f.name for f in files])
            return self._fail(settings.MESSAGE_INVALID_CONTAINER, dismissable=True)
        file = files[0]
        if len(files) > 1:
            self.logger.info("Ignoring %d extra selected files", len(files) - 1)

        try:
            archive = await ArchiveReader.open(file)
        except InvalidContainerError as e:
            self.logger.warning("Invalid container: %s", e)
            return self._fail(settings.MESSAGE_INVALID_CONTAINER, dismissable=True)

        with archive:
            self._enter(ImportPhase.EXTRACTING)
            try:
                descriptor = await parse_descriptor(archive)
            except MissingDescriptorError as e:
                self.logger.warning("%s", e)
                return self._fail(settings.MESSAGE_MISSING_DESCRIPTOR)
            except MalformedDescriptorError as e:
                self.logger.warning("%s", e)
                return self._fail(settings.MESSAGE_MALFORMED_DESCRIPTOR)

            self._enter(ImportPhase.RECONCILING)
            index = ElementIndex.build(descriptor)
            result = await self.reconciler.reconcile(
                archive, descriptor, index, self.media_store.value
            )

        self._enter(ImportPhase.MERGING)
        return self._install(descriptor, result)

    def _install(
        self, descriptor: ProjectDescriptor, result: ReconciliationResult
    ) -> ImportResult:
        new_state = merge_state(self.story_store.reducer_state, descriptor, result.pages)
        before = len(self.media_store.value)
        after = len(
            self.media_store.update(lambda prev: merge_media(prev, result.media_items))
        )
        self.story_store.restore(new_state)
        self._enter(ImportPhase.INSTALLED)

        if result.is_partial:
            self.logger.warning(
                "Imported with %d failed and %d missing media (of %d expected)",
                len(result.failures),
                len(result.missing_sources),
                result.expected_count,
            )
            message = settings.MESSAGE_PARTIAL_IMPORT
            self.snackbar.show_snackbar(message, dismissable=True)
        else:
            message = settings.MESSAGE_IMPORT_COMPLETED
            self.snackbar.show_snackbar(message)

        self.logger.info("Imported story '%s'", descriptor.title)
        return ImportResult(
            phase=ImportPhase.INSTALLED,
            message=message,
            media_added=after - before,
            failures=dict(result.failures),
            missing_sources=list(result.missing_sources),
        )

    def _fail(self, message: str, dismissable: bool = False) -> ImportResult:
        self._enter(ImportPhase.FAILED)
        self.snackbar.show_snackbar(message, dismissable=dismissable)
        return ImportResult(phase=ImportPhase.FAILED, message=message)
