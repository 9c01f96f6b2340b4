# topmark:header:start
#
#   project      : PipeSeq
#   file         : policy.py
#   file_relpath : src/pipeseq/config/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Admission policy model for PipeSeq.

Design:
    * ``MutablePolicy`` uses tri-state options (``bool | None``) to represent
      explicit True/False vs. *unset*. This enables non-destructive merges when
      composing multiple sources (defaults → config files → CLI).
    * ``Policy`` is the fully-resolved, immutable runtime view with plain
      booleans, so the channel table never branches on ``None``.
    * ``MutablePolicy.resolve(base)`` fills unset fields from ``base`` and returns
      a frozen ``Policy``.

TOML mapping:

    [policy]
    discard_invalid_sequence = false
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pipeseq.config.keys import Toml

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class Policy:
    """Immutable, runtime policy used by the channel table.

    Attributes:
        discard_invalid_sequence (bool): Drop records whose id differs from the
            channel's expected-next id. When False, the mismatch is only logged
            and the record is admitted anyway.
    """

    discard_invalid_sequence: bool = False

    def thaw(self) -> MutablePolicy:
        """Return a mutable builder initialized from this frozen policy.

        Returns:
            MutablePolicy: A tri-state mutable policy.
        """
        return MutablePolicy(discard_invalid_sequence=self.discard_invalid_sequence)


@dataclass
class MutablePolicy:
    """Mutable builder for `Policy`, suitable for config loading/merging.

    This class is merged in a **last-wins** manner when reading multiple config files.

    Attributes:
        discard_invalid_sequence (bool | None): See `Policy`. `None` means "inherit".
    """

    discard_invalid_sequence: bool | None = None

    def merge_with(self, other: MutablePolicy) -> MutablePolicy:
        """Return a new MutablePolicy by applying ``other`` over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override explicit values in ``self``.

        Args:
            other (MutablePolicy): The policy whose values override current ones.

        Returns:
            MutablePolicy: Merged policy.
        """
        return MutablePolicy(
            discard_invalid_sequence=(
                other.discard_invalid_sequence
                if other.discard_invalid_sequence is not None
                else self.discard_invalid_sequence
            ),
        )

    def resolve(self, base: Policy | None = None) -> Policy:
        """Resolve tri-state fields against ``base`` and return a frozen `Policy`.

        Args:
            base (Policy | None): Fallback values for unset fields. Defaults to
                ``Policy()``.

        Returns:
            Policy: The resolved immutable policy.
        """
        fallback: Policy = base or Policy()
        return Policy(
            discard_invalid_sequence=(
                self.discard_invalid_sequence
                if self.discard_invalid_sequence is not None
                else fallback.discard_invalid_sequence
            ),
        )


def policy_from_toml_table(tbl: Mapping[str, Any]) -> MutablePolicy:
    """Build a `MutablePolicy` from a ``[policy]`` TOML table.

    Unknown keys are ignored by this helper; validation of their presence is the
    loader's concern.

    Args:
        tbl (Mapping[str, Any]): The ``[policy]`` table as a plain mapping.

    Returns:
        MutablePolicy: Policy with only the keys present in ``tbl`` set.

    Raises:
        TypeError: If a known key holds a non-boolean value.
    """
    key: str = Toml.KEY_POLICY_DISCARD_INVALID_SEQUENCE
    value: Any = tbl.get(key)
    if value is not None and not isinstance(value, bool):
        raise TypeError(f"[{Toml.SECTION_POLICY}].{key} must be a boolean, got {value!r}")
    return MutablePolicy(discard_invalid_sequence=value)
