# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""CIDFont /W array encoding and decoding.

The /W array stores per-CID widths in two range formats:

- ``start_cid [w0 w1 ... wn]`` (bracket form) lists the widths of the
  consecutive CIDs ``start_cid .. start_cid + n`` individually.
- ``first_cid last_cid width`` (serial form) gives one width to every CID
  in ``first_cid .. last_cid``.

The encoder walks the ordered ``(cid, width)`` pairs once and decides
between both forms with a three-state machine. A constant-width run is
only entered after two consecutive CIDs with equal widths, and an open
bracket list is closed (never rewritten) when such a run starts.
"""

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pikepdf import Array

from ..exceptions import FormatError
from ..utils import resolve_indirect

WidthElement = int | list[int]
WidthPair = tuple[int, int]


class SegmentKind(enum.Enum):
    """Kind of the segment currently being built by the encoder.

    Attributes:
        FIRST: A single pair is buffered and not yet classified.
        BRACKET: Consecutive CIDs with varying widths.
        SERIAL: Consecutive CIDs sharing one width.
    """

    FIRST = "first"
    BRACKET = "bracket"
    SERIAL = "serial"


@dataclass(frozen=True)
class EncoderState:
    """Encoder state between two pairs.

    Attributes:
        kind: Segment currently being built.
        widths: Open bracket list. Does not include the width of the
            previous pair, which is only appended once the next pair is seen.
    """

    kind: SegmentKind = SegmentKind.FIRST
    widths: tuple[int, ...] = ()


def step(
    state: EncoderState, previous: WidthPair, pair: WidthPair
) -> tuple[EncoderState, list[WidthElement]]:
    """Advances the encoder by one pair.

    Args:
        state: Current encoder state.
        previous: The pair seen before ``pair``.
        pair: The pair being consumed.

    Returns:
        Tuple of (new state, elements to append to the output).
    """
    last_cid, last_width = previous
    cid, width = pair
    consecutive = cid == last_cid + 1
    repeat = consecutive and width == last_width

    if state.kind is SegmentKind.FIRST:
        if repeat:
            return EncoderState(SegmentKind.SERIAL), []
        if consecutive:
            return EncoderState(SegmentKind.BRACKET, (last_width,)), []
        return EncoderState(SegmentKind.FIRST), [[last_width], cid]

    if state.kind is SegmentKind.BRACKET:
        if repeat:
            # The open list ends before the previous CID, which now starts
            # the serial run.
            return EncoderState(SegmentKind.SERIAL), [list(state.widths), last_cid]
        if consecutive:
            return EncoderState(SegmentKind.BRACKET, state.widths + (last_width,)), []
        return EncoderState(SegmentKind.FIRST), [
            list(state.widths + (last_width,)),
            cid,
        ]

    if repeat:
        return state, []
    return EncoderState(SegmentKind.FIRST), [last_cid, last_width, cid]


def finish(state: EncoderState, last: WidthPair) -> list[WidthElement]:
    """Closes the segment that is still open after the last pair.

    Args:
        state: Encoder state after the last pair was consumed.
        last: The last pair of the input.

    Returns:
        Elements to append to the output.
    """
    last_cid, last_width = last
    if state.kind is SegmentKind.FIRST:
        return [[last_width]]
    if state.kind is SegmentKind.BRACKET:
        return [list(state.widths + (last_width,))]
    return [last_cid, last_width]


def encode_widths(pairs: Sequence[WidthPair]) -> list[WidthElement]:
    """Encodes ordered (cid, width) pairs into a /W array.

    CIDs are expected in ascending order. Only each pair and its immediate
    predecessor are compared, so unsorted or duplicate CIDs are encoded
    as gaps.

    Args:
        pairs: Ordered (cid, width) pairs.

    Returns:
        Nested list in /W array format.

    Raises:
        FormatError: If ``pairs`` is empty.
    """
    if not pairs:
        raise FormatError("invalid width list: no (cid, width) pairs")

    previous = pairs[0]
    w_array: list[WidthElement] = [previous[0]]
    state = EncoderState()
    for pair in pairs[1:]:
        state, emitted = step(state, previous, pair)
        w_array.extend(emitted)
        previous = pair
    w_array.extend(finish(state, previous))
    return w_array


def parse_width_tokens(w_string: str) -> list[WidthPair]:
    """Parses a whitespace separated list of cid/width integers.

    Args:
        w_string: Raw ``W`` property value, e.g. ``"1 1000 2 500"``.

    Returns:
        List of (cid, width) pairs.

    Raises:
        FormatError: If a token is not an integer or the token count is
            odd or zero.
    """
    tokens = w_string.split()
    if not tokens or len(tokens) % 2 != 0:
        raise FormatError(
            f"invalid width list: expected an even, non-zero number of "
            f"integers, got {len(tokens)}"
        )
    try:
        values = [int(token) for token in tokens]
    except ValueError as e:
        raise FormatError(f"invalid width list: {e}") from e
    return list(zip(values[0::2], values[1::2]))


def encode_width_string(w_string: str) -> list[WidthElement]:
    """Parses and encodes a raw ``W`` property value."""
    return encode_widths(parse_width_tokens(w_string))


def decode_widths(w_array: Iterable) -> list[WidthPair]:
    """Expands a /W array back into ordered (cid, width) pairs.

    Accepts the nested lists produced by :func:`encode_widths` as well as
    pikepdf Arrays read from a PDF.

    Args:
        w_array: /W array in bracket and serial form.

    Returns:
        List of (cid, width) pairs in array order.

    Raises:
        FormatError: If the array is truncated, has a reversed range or
            contains non-integers.
    """
    items = [resolve_indirect(item) for item in resolve_indirect(w_array)]
    result: list[WidthPair] = []
    i = 0
    try:
        while i < len(items):
            start_cid = int(items[i])
            if i + 1 >= len(items):
                raise FormatError(f"invalid /W array: dangling CID {start_cid}")
            next_item = items[i + 1]
            if isinstance(next_item, (list, tuple, Array)):
                for offset, width in enumerate(next_item):
                    result.append((start_cid + offset, int(width)))
                i += 2
            else:
                if i + 2 >= len(items):
                    raise FormatError(
                        f"invalid /W array: truncated range at CID {start_cid}"
                    )
                end_cid = int(next_item)
                if end_cid < start_cid:
                    raise FormatError(
                        f"invalid /W array: range {start_cid}..{end_cid} is reversed"
                    )
                width = int(items[i + 2])
                for cid in range(start_cid, end_cid + 1):
                    result.append((cid, width))
                i += 3
    except (TypeError, ValueError) as e:
        raise FormatError(f"invalid /W array entry at index {i}: {e}") from e
    return result


def w_array_to_pikepdf(w_array: Sequence[WidthElement]) -> list:
    """Wraps the bracket lists of a /W array in pikepdf Arrays.

    Args:
        w_array: Encoded widths, either the nested lists of
            :func:`encode_widths` or the tuples of ``CIDFontProfile.widths``.

    Returns:
        List of ints and pikepdf Arrays, ready for ``Array(...)``.
    """
    result = []
    for item in w_array:
        if isinstance(item, (list, tuple)):
            result.append(Array(list(item)))
        else:
            result.append(item)
    return result
