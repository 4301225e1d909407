"""Builds the story state and media collection to install after an import"""

import copy
import logging
from collections.abc import Sequence

from storyimport.config import settings
from storyimport.models.descriptor import ProjectDescriptor
from storyimport.models.media_item import MediaItem
from storyimport.models.page import Page
from storyimport.models.story_state import StoryState


def merge_state(
    current: StoryState, descriptor: ProjectDescriptor, pages: list[Page]
) -> StoryState:
    """
    Combine the live state with an imported descriptor.

    - capabilities always come from the live state, an archive cannot grant
      itself permissions
    - story is the live story overlaid by the imported one, the title falls
      back to an empty string
    - pages come from the import
    """
    story = copy.deepcopy(current.story)
    story.update(copy.deepcopy(descriptor.story))
    story[settings.SERIALIZATION_KEYS.TITLE.value] = descriptor.title

    properties = copy.deepcopy(descriptor.properties)
    if properties.pop(settings.SERIALIZATION_KEYS.CAPABILITIES.value, None) is not None:
        logging.getLogger("StateMerge").warning(
            "Ignoring capabilities found in the imported descriptor"
        )

    return StoryState(
        story=story,
        pages=pages,
        capabilities=copy.deepcopy(current.capabilities),
        properties=properties,
    )


def merge_media(
    previous: Sequence[MediaItem], reconciled: Sequence[MediaItem]
) -> list[MediaItem]:
    """Append the reconciled items whose title or alt text is not already in use"""
    previous_titles = {item.title for item in previous if item.title}
    previous_alts = {item.alt for item in previous if item.alt}
    added = [
        item
        for item in reconciled
        if not (item.title and item.title in previous_titles)
        and not (item.alt and item.alt in previous_alts)
    ]
    if len(added) != len(reconciled):
        logging.getLogger("StateMerge").info(
            "Dropped %d imported media already in the library",
            len(reconciled) - len(added),
        )
    return [*previous, *added]
