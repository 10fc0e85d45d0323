"""
Layered search.

Text is often encoded several times over (e.g. Base64 of a reversed string).
The dispatch engine peels one layer; this search feeds every unverified
candidate of a failed round back in, breadth-first, until something is
accepted or the limits are reached.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable

from unravel.core.config import get_settings
from unravel.models.schemas import DecodeOutcome
from unravel.services.checkers.base import Checker
from unravel.services.filtration import DecoderBatch, Matched

logger = logging.getLogger(__name__)

# Human gate: shown the winning outcome, returns whether to accept it
ConfirmCallback = Callable[[DecodeOutcome], bool]


@dataclass
class SearchNode:
    """One text waiting to be decoded, with how it was reached."""

    text: str
    depth: int
    path: list[DecodeOutcome] = field(default_factory=list)


@dataclass
class SearchResult:
    """Result of a layered search."""

    found: bool
    # Outcomes from the original input to the accepted plaintext
    path: list[DecodeOutcome]
    nodes_expanded: int
    depth_reached: int

    @property
    def plaintext(self) -> str | None:
        if not self.found or not self.path:
            return None
        return self.path[-1].plaintext


class LayeredSearch:
    """
    Breadth-first search over successive decodes.

    - Each node runs the whole decoder batch once.
    - A matched outcome is offered to the optional confirm callback; a
      rejected match is discarded and the search goes on.
    - Texts already seen are never expanded twice, which breaks cycles such
      as Reverse undoing itself or ROT13 applied twice.
    - The search stops after ``max_depth`` layers or ``max_nodes`` batch runs.
    """

    def __init__(
        self,
        batch: DecoderBatch,
        checker: Checker,
        max_depth: int | None = None,
        max_nodes: int | None = None,
        confirm: ConfirmCallback | None = None,
    ):
        settings = get_settings()
        self.batch = batch
        self.checker = checker
        self.max_depth = max_depth or settings.max_search_depth
        self.max_nodes = max_nodes or settings.max_search_nodes
        self.confirm = confirm

    def search(self, text: str) -> SearchResult:
        """
        Search for plaintext under up to ``max_depth`` layers of encoding.

        Args:
            text: The input to decode

        Returns:
            SearchResult with the path of outcomes when something was found
        """
        queue: deque[SearchNode] = deque([SearchNode(text=text, depth=1)])
        seen: set[str] = {text}
        nodes_expanded = 0
        depth_reached = 0

        while queue and nodes_expanded < self.max_nodes:
            node = queue.popleft()
            nodes_expanded += 1
            depth_reached = max(depth_reached, node.depth)

            result = self.batch.run(node.text, self.checker)

            if isinstance(result, Matched):
                path = node.path + [result.outcome]
                if self._accepted(result.outcome):
                    logger.info(
                        "Found plaintext after %d layer(s) and %d node(s)",
                        len(path),
                        nodes_expanded,
                    )
                    return SearchResult(
                        found=True,
                        path=path,
                        nodes_expanded=nodes_expanded,
                        depth_reached=depth_reached,
                    )
                continue

            if node.depth >= self.max_depth:
                continue

            for outcome in result.outcomes:
                for candidate in outcome.candidates:
                    if candidate in seen:
                        continue
                    seen.add(candidate)
                    # Record the candidate actually followed, not the whole list
                    step = outcome.model_copy(update={"candidates": (candidate,)})
                    queue.append(SearchNode(
                        text=candidate,
                        depth=node.depth + 1,
                        path=node.path + [step],
                    ))

        logger.info("No plaintext found after %d node(s)", nodes_expanded)
        return SearchResult(
            found=False,
            path=[],
            nodes_expanded=nodes_expanded,
            depth_reached=depth_reached,
        )

    def _accepted(self, outcome: DecodeOutcome) -> bool:
        if self.confirm is None:
            return True
        accepted = self.confirm(outcome)
        if not accepted:
            logger.info("Match from %s was rejected", outcome.decoder)
        return accepted
