"""ResultHydrator - turns raw hits into typed results."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sift.domain.index.model.registry import TypeRegistry
from sift.domain.search.model.result import Result
from sift.domain.shared.service import Service

logger = logging.getLogger(__name__)


class ResultHydrator(Service):
    """Hydrates hits 1:1 into Result instances of their document type.

    Hits whose (index, type) pair is not registered raise
    ``UnknownDocumentTypeError``; nothing is skipped, so the output always
    lines up with the input.
    """

    registry: TypeRegistry

    def hydrate(self, hits: Sequence[Mapping[str, Any]]) -> list[Result]:
        results = [
            self.registry.resolve(hit.get("_index"), hit.get("_type")).hydrate(hit)
            for hit in hits
        ]
        logger.debug("Hydrated %d results", len(results))
        return results
