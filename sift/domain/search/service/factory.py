"""ResponseFactory - builds Responses for the component that executes queries."""

from collections.abc import Mapping
from dataclasses import field
from typing import Any

from sift.domain.index.model.registry import TypeRegistry
from sift.domain.search.model.options import LoadOptions
from sift.domain.search.service.loader import DEFAULT_BATCH_SIZE
from sift.domain.search.service.response import Response
from sift.domain.shared.service import Service


class ResponseFactory(Service):
    """Wraps raw responses against a fixed registry and default load options."""

    registry: TypeRegistry
    default_options: LoadOptions = field(default_factory=LoadOptions)
    batch_size: int = DEFAULT_BATCH_SIZE

    def build(
        self,
        raw: Mapping[str, Any] | None,
        load_options: LoadOptions | Mapping[str, Any] | None = None,
        loaded_objects: bool = False,
    ) -> Response:
        """Wrap a raw response.

        Args:
            raw: Decoded response body.
            load_options: Options for this response; the factory defaults
                are used when omitted.
            loaded_objects: Whether ``collection`` should return objects.
        """
        options = self.default_options if load_options is None else load_options
        return Response(
            raw,
            indexes=self.registry,
            load_options=options,
            loaded_objects=loaded_objects,
            batch_size=self.batch_size,
        )
