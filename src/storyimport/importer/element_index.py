"""Lookup from archive-relative media references to the elements using them"""

from collections.abc import Iterable
from dataclasses import dataclass

from storyimport.models.descriptor import ProjectDescriptor
from storyimport.models.page_element import PageElement


@dataclass(frozen=True)
class ElementRef:
    """Position of an element inside the descriptor pages"""

    page_index: int
    element_index: int
    element: PageElement


class ElementIndex:
    """Maps `resource.src` to the first element referencing it"""

    def __init__(self, refs: list[ElementRef]):
        self._refs: list[ElementRef] = refs
        self._by_src: dict[str, ElementRef] = {}
        for ref in refs:
            resource = ref.element.resource
            if resource is None or not resource.src:
                continue
            # First match wins
            self._by_src.setdefault(resource.src, ref)

    @classmethod
    def build(cls, descriptor: ProjectDescriptor) -> "ElementIndex":
        """Flatten the elements of every page, keeping their order"""
        return cls(
            [
                ElementRef(page_index, element_index, element)
                for page_index, page in enumerate(descriptor.pages)
                for element_index, element in enumerate(page.elements)
            ]
        )

    @property
    def elements(self) -> list[PageElement]:
        return [ref.element for ref in self._refs]

    def lookup(self, src: str) -> ElementRef | None:
        return self._by_src.get(src)

    def referenced_sources(self, resource_types: Iterable[str]) -> list[str]:
        """Sources of the resources having one of the given types"""
        wanted = set(resource_types)
        return [
            src
            for src, ref in self._by_src.items()
            if ref.element.resource is not None and ref.element.resource.type in wanted
        ]

    def __contains__(self, src: object) -> bool:
        return src in self._by_src

    def __len__(self) -> int:
        return len(self._refs)
