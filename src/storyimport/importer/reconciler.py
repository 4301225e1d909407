"""Matches archive entries to descriptor elements and materializes them as media"""

import asyncio
import copy
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import cast

from storyimport.config import settings
from storyimport.errors import AssetConversionError, StoryImportError
from storyimport.importer.element_index import ElementIndex, ElementRef
from storyimport.importer.resource_converter import ResourceConverter
from storyimport.models.dao.archive_reader import Archive
from storyimport.models.descriptor import ProjectDescriptor
from storyimport.models.local_file import LocalFile
from storyimport.models.media_item import MediaItem
from storyimport.models.page import Page
from storyimport.models.page_element import PageElement
from storyimport.models.resource import Resource


def poster_entry_name(entry_name: str) -> str:
    """`media/clip.mp4` -> `media/clip-poster.jpeg`"""
    folder, slash, filename = entry_name.rpartition("/")
    stem = filename.rsplit(".", 1)[0] if "." in filename[1:] else filename
    return f"{folder}{slash}{stem}{settings.POSTER_SUFFIX}"


@dataclass
class ReconciledAsset:
    """A media item and the element it was imported for"""

    ref: ElementRef
    media_item: MediaItem


@dataclass
class ReconciliationResult:
    """Outcome of reconciling every entry of an archive"""

    pages: list[Page]
    media_items: list[MediaItem] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failures: dict[str, str] = field(default_factory=dict)
    missing_sources: list[str] = field(default_factory=list)

    @property
    def expected_count(self) -> int:
        """Number of assets the descriptor needed from the archive"""
        return len(self.media_items) + len(self.failures) + len(self.missing_sources)

    @property
    def is_partial(self) -> bool:
        return bool(self.failures or self.missing_sources)

    @property
    def all_failed(self) -> bool:
        return self.expected_count > 0 and not self.media_items


class MediaReconciler:
    """
    Re-registers the media of an archive as local media items.

    Entries are processed concurrently. A failing entry is recorded in the
    result and never stops the others. The descriptor is left untouched:
    the patched pages are returned as copies.
    """

    def __init__(self, converter: ResourceConverter, max_concurrent: int | None = None):
        self.converter: ResourceConverter = converter
        self.max_concurrent: int = max_concurrent or settings.MAX_CONCURRENT_CONVERSIONS
        self.logger: logging.Logger = logging.getLogger("MediaReconciler")

    async def reconcile(
        self,
        archive: Archive,
        descriptor: ProjectDescriptor,
        index: ElementIndex,
        existing_media: Sequence[MediaItem],
    ) -> ReconciliationResult:
        existing_titles = {item.title for item in existing_media if item.title}
        skipped: list[str] = []
        candidates: list[tuple[int, str, ElementRef]] = []

        for position, name in enumerate(archive.entries):
            if name == settings.DESCRIPTOR_ENTRY_NAME:
                continue
            ref = index.lookup(name)
            resource = ref.element.resource if ref is not None else None
            if (
                ref is None
                or resource is None
                or resource.type not in settings.RECONCILABLE_RESOURCE_TYPES
            ):
                self.logger.debug("Skipping %s: not a referenced media asset", name)
                skipped.append(name)
                continue
            if resource.title and resource.title in existing_titles:
                self.logger.info(
                    "Skipping %s: media titled '%s' already exists", name, resource.title
                )
                skipped.append(name)
                continue
            candidates.append((position, name, ref))

        semaphore = asyncio.Semaphore(self.max_concurrent)
        outcomes = await asyncio.gather(
            *(
                self._reconcile_entry(archive, position, name, ref, semaphore)
                for position, name, ref in candidates
            ),
            return_exceptions=True,
        )

        reconciled: list[ReconciledAsset] = []
        failures: dict[str, str] = {}
        for (_, name, _), outcome in zip(candidates, outcomes):
            if isinstance(outcome, Exception):
                self.logger.warning("Could not import %s: %s", name, outcome)
                failures[name] = str(outcome)
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                reconciled.append(outcome)

        missing_sources = [
            src
            for src in index.referenced_sources(settings.RECONCILABLE_RESOURCE_TYPES)
            if src not in archive and not self._is_duplicate(index, src, existing_titles)
        ]
        if missing_sources:
            self.logger.warning(
                "%d referenced media missing from the archive: %s",
                len(missing_sources),
                ", ".join(missing_sources),
            )

        self.logger.debug(
            "Reconciled %d media, skipped %d entries, %d failures",
            len(reconciled),
            len(skipped),
            len(failures),
        )
        return ReconciliationResult(
            pages=self._patch_pages(descriptor.pages, reconciled),
            media_items=[asset.media_item for asset in reconciled],
            skipped=skipped,
            failures=failures,
            missing_sources=missing_sources,
        )

    @staticmethod
    def _is_duplicate(index: ElementIndex, src: str, existing_titles: set[str]) -> bool:
        ref = index.lookup(src)
        if ref is None or ref.element.resource is None:
            return False
        title = ref.element.resource.title
        return bool(title) and title in existing_titles

    async def _reconcile_entry(
        self,
        archive: Archive,
        position: int,
        name: str,
        ref: ElementRef,
        semaphore: asyncio.Semaphore,
    ) -> ReconciledAsset:
        resource = cast(Resource, ref.element.resource)

        if resource.is_video:
            # Video and poster settle together before the item is built
            converted, poster_outcome = await asyncio.gather(
                self._convert_entry(archive, name, resource.mime_type, semaphore),
                self._convert_poster(archive, name, semaphore),
                return_exceptions=True,
            )
            if isinstance(converted, BaseException):
                raise converted
            if isinstance(poster_outcome, BaseException):
                raise poster_outcome
            local_file, local_resource = converted
            poster = poster_outcome
        else:
            local_file, local_resource = await self._convert_entry(
                archive, name, resource.mime_type, semaphore
            )
            poster = None

        media_item = MediaItem.from_resources(
            media_id=position + 1,
            local_resource=local_resource,
            archive_resource=resource,
            file=local_file,
        )
        media_item.poster = poster
        return ReconciledAsset(ref=ref, media_item=media_item)

    async def _convert_entry(
        self,
        archive: Archive,
        name: str,
        mime_type: str,
        semaphore: asyncio.Semaphore,
    ) -> tuple[LocalFile, Resource]:
        """Extract an entry and turn it into a local resource"""
        async with semaphore:
            data = await archive.read_blob(name)
            local_file = LocalFile(name=name, data=data, mime_type=mime_type)
            try:
                local_resource = await self.converter.convert(local_file)
            except StoryImportError:
                raise
            except Exception as e:
                self.logger.exception("Converter failed on %s", name)
                raise AssetConversionError(f"Cannot convert {name}: {e}") from e

        if not local_resource.src:
            raise AssetConversionError(f"No local reference produced for {name}")
        return local_file, local_resource

    async def _convert_poster(
        self, archive: Archive, video_name: str, semaphore: asyncio.Semaphore
    ) -> str | None:
        """Local reference of the video poster, None when there is none"""
        name = poster_entry_name(video_name)
        if name not in archive:
            self.logger.debug("No poster for %s", video_name)
            return None
        try:
            _, poster_resource = await self._convert_entry(
                archive, name, settings.POSTER_MIME_TYPE, semaphore
            )
        except StoryImportError as e:
            self.logger.warning("Ignoring poster %s: %s", name, e)
            return None
        return poster_resource.src

    @staticmethod
    def _patch_pages(pages: list[Page], reconciled: list[ReconciledAsset]) -> list[Page]:
        """Copy the pages, pointing reconciled elements at their local media"""
        patches = {
            (asset.ref.page_index, asset.ref.element_index): asset.media_item
            for asset in reconciled
        }
        patched_pages: list[Page] = []
        for page_index, page in enumerate(pages):
            elements: list[PageElement] = []
            for element_index, element in enumerate(page.elements):
                media_item = patches.get((page_index, element_index))
                if media_item is None or element.resource is None:
                    elements.append(copy.deepcopy(element))
                    continue
                elements.append(
                    element.with_resource(
                        element.resource.copy_with(
                            src=media_item.src,
                            poster=media_item.poster or element.resource.poster,
                        )
                    )
                )
            patched_pages.append(page.with_elements(elements))
        return patched_pages
