# topmark:header:start
#
#   project      : PipeSeq
#   file         : enum_mixins.py
#   file_relpath : src/pipeseq/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for PipeSeq (typing-friendly, UI-agnostic).

Provided:
    - ``EnumIntrospectionMixin``:
        Adds ``.value_length`` (cached) to any Enum subclass for formatting
        aligned summary labels.

Example:
    ```python
    from enum import Enum
    from pipeseq.core.enum_mixins import EnumIntrospectionMixin

    class Mode(EnumIntrospectionMixin, str, Enum):
        A = "alpha"
        B = "beta"

    assert Mode.A.value_length == 5
    ```
"""

from __future__ import annotations

from functools import cached_property


class EnumIntrospectionMixin:
    """Small, UI-agnostic mixin that adds introspection conveniences to Enums.

    When mixed into an Enum class, provides ``value_length``: the maximum length
    (in characters) of all ``.value`` strings for the enum class.
    """

    @cached_property
    def value_length(self) -> int:
        """Maximum length of the enum's ``.value`` strings.

        Returns:
            int: The maximum length among all member ``.value`` strings of the
            enum class that this member belongs to.
        """
        # Pyright doesn't know 'self' is an Enum member; runtime guarantees it.
        return max(len(member.value) for member in type(self))  # type: ignore[attr-defined]
