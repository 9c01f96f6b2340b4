# topmark:header:start
#
#   project      : PipeSeq
#   file         : model.py
#   file_relpath : src/pipeseq/pipeline/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Record and pipeline (channel) model.

Sections:
    * ParsedRecord: one input line in structured form, consumed once by the table.
    * Record: an admitted, decoded record; ordered by identifier.
    * Channel: one pipeline's buffer plus its sequencing state.

Identifiers (pipeline ids, record ids, next ids) are 8-bit unsigned integers.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pipeseq.codec import Encoding
from pipeseq.config.logging import get_logger
from pipeseq.constants import U8_MAX

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pipeseq.config.logging import PipeseqLogger

logger: PipeseqLogger = get_logger(__name__)


def check_u8(value: int, name: str) -> int:
    """Return ``value`` if it fits an 8-bit unsigned identifier.

    Raises:
        ValueError: If ``value`` is outside ``0..255``.
    """
    if not 0 <= value <= U8_MAX:
        raise ValueError(f"{name} must be in range 0..{U8_MAX}, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class ParsedRecord:
    """A record as read from the input, before admission.

    Attributes:
        channel_id (int): The pipeline this record belongs to.
        id (int): The record identifier within its pipeline.
        encoding (Encoding): How ``raw_text`` is encoded.
        raw_text (str): The undecoded payload token.
        next_id (int | None): The id the sender will use for its next record on
            this pipeline, or ``None`` if this is the pipeline's last record.
    """

    channel_id: int
    id: int
    encoding: Encoding
    raw_text: str
    next_id: int | None

    def __post_init__(self) -> None:
        check_u8(self.channel_id, "channel_id")
        check_u8(self.id, "id")
        if self.next_id is not None:
            check_u8(self.next_id, "next_id")


@dataclass(frozen=True, order=True, slots=True)
class Record:
    """An admitted record with its decoded payload.

    Records compare by ``id`` only; ``body`` does not take part in ordering.
    """

    id: int
    body: bytes = field(compare=False)

    def __post_init__(self) -> None:
        check_u8(self.id, "id")


@dataclass
class Channel:
    """One pipeline: an ordered record buffer plus sequencing state.

    The buffer is a binary heap keyed by ``(record, arrival)``, so records drain
    in ascending id order and records sharing an id drain in arrival order.

    Attributes:
        id (int): The pipeline identifier.
        expected_next (int | None): The record id announced by the last admitted
            record, or ``None`` while the pipeline is unconstrained.
        closed (bool): Set once a record announced no successor; a closed
            pipeline admits nothing and its ``expected_next`` stays frozen.
    """

    id: int
    expected_next: int | None = None
    closed: bool = False
    _heap: list[tuple[Record, int]] = field(
        default_factory=lambda: [], init=False, repr=False, compare=False
    )
    _arrivals: Iterator[int] = field(
        default_factory=itertools.count, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        check_u8(self.id, "id")

    def push(self, record: Record) -> None:
        """Insert ``record`` into the buffer."""
        heapq.heappush(self._heap, (record, next(self._arrivals)))
        logger.trace("pipeline %d: buffered record %d (%d pending)", self.id, record.id, len(self))

    def advance(self, next_id: int | None) -> None:
        """Move the sequence cursor to ``next_id``; ``None`` closes the pipeline."""
        self.expected_next = next_id
        if next_id is None:
            self.closed = True
            logger.debug("pipeline %d: closed", self.id)

    def expects(self, record_id: int) -> bool:
        """Return True if ``record_id`` is acceptable under the sequence cursor."""
        return self.expected_next is None or record_id == self.expected_next

    @property
    def buffered(self) -> tuple[Record, ...]:
        """Return the buffered records in drain order, without draining them."""
        return tuple(record for record, _ in sorted(self._heap))

    def drain(self) -> Iterator[Record]:
        """Yield and remove buffered records in ascending id order until empty."""
        while self._heap:
            record, _ = heapq.heappop(self._heap)
            yield record

    def __len__(self) -> int:
        """Return the number of buffered records."""
        return len(self._heap)
