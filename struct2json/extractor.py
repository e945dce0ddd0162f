"""Batch extraction across multiple Go source files."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from .collector import collect_file
from .config import Struct2JsonConfig
from .document import Document
from .errors import SourceParseError
from .fields import FieldTranslator
from .logging import get_logger
from .models import StructDescription
from .tags import TagExtractor


@dataclass(frozen=True)
class UnitRequest:
    """A source file plus the struct names requested from it (empty means all)."""

    path: Path
    names: Tuple[str, ...] = ()


@dataclass(frozen=True)
class UnitResult:
    """Outcome of extracting one unit: its structs, or the parse failure."""

    request: UnitRequest
    structs: Tuple[StructDescription, ...] = ()
    error: Optional[SourceParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    """Per-unit results in request order and the document built from the successes."""

    units: List[UnitResult] = field(default_factory=list)
    document: Document = field(default_factory=Document)

    @property
    def failures(self) -> List[UnitResult]:
        return [unit for unit in self.units if not unit.ok]

    @property
    def ok(self) -> bool:
        return not self.failures

    def raise_for_errors(self) -> None:
        """Re-raise the first unit failure, if any."""
        for unit in self.units:
            if unit.error is not None:
                raise unit.error


class StructExtractor:
    """Runs the struct collector over many units and aggregates the results."""

    def __init__(self, config: Struct2JsonConfig | None = None) -> None:
        self.config = config or Struct2JsonConfig()
        self.translator = FieldTranslator(
            self.config.type_mode,
            TagExtractor(self.config.tags),
            first_name_only=self.config.first_name_only,
        )
        self.logger = get_logger("extractor")

    def extract_unit(self, request: UnitRequest) -> UnitResult:
        self.logger.debug("Collecting structs from %s", request.path)
        try:
            structs = collect_file(request.path, request.names, self.translator)
        except SourceParseError as exc:
            self.logger.error("%s", exc)
            return UnitResult(request=request, error=exc)
        self.logger.debug("Collected %d structs from %s", len(structs), request.path)
        return UnitResult(request=request, structs=tuple(structs))

    def run(self, requests: Iterable[UnitRequest]) -> BatchResult:
        """Extract every request and aggregate the successful units in request order.

        Without ``keep_going`` the batch stops at the first failed unit.
        """
        pending = list(requests)
        if self.config.jobs > 1 and len(pending) > 1:
            units = self._run_parallel(pending)
        else:
            units = self._run_sequential(pending)

        document = Document()
        for unit in units:
            if unit.ok:
                document.extend(unit.structs)
        failed = sum(1 for unit in units if not unit.ok)
        self.logger.debug(
            "Extracted %d structs from %d units (%d failed)", len(document), len(units), failed
        )
        return BatchResult(units=units, document=document)

    def _run_sequential(self, requests: Sequence[UnitRequest]) -> List[UnitResult]:
        units: List[UnitResult] = []
        for request in requests:
            unit = self.extract_unit(request)
            units.append(unit)
            if not unit.ok and not self.config.keep_going:
                break
        return units

    def _run_parallel(self, requests: Sequence[UnitRequest]) -> List[UnitResult]:
        units: List[UnitResult] = []
        workers = min(self.config.jobs, len(requests))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="struct2json") as pool:
            futures: List[Future[UnitResult]] = [
                pool.submit(self.extract_unit, request) for request in requests
            ]
            for index, future in enumerate(futures):
                unit = future.result()
                units.append(unit)
                if not unit.ok and not self.config.keep_going:
                    for remaining in futures[index + 1 :]:
                        remaining.cancel()
                    break
        return units


def extract(
    requests: Iterable[UnitRequest], config: Struct2JsonConfig | None = None
) -> BatchResult:
    return StructExtractor(config).run(requests)


__all__ = ["BatchResult", "StructExtractor", "UnitRequest", "UnitResult", "extract"]
