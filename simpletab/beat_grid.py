"""Beat grid builder: expands one rhythm line's tokens into time slots."""

from __future__ import annotations

from collections.abc import Sequence

from simpletab.errors import SemanticError, TabSyntaxError
from simpletab.tab_models import Slot
from simpletab.tokens import BeatSpread, NextBeat, Note, Number, Rest, RestSpread, Token


class GridBuilder:
    """
    Turns rhythm-line tokens into a slot sequence at a fixed fidelity.

    Rules, applied left to right
    ----------------------------
    - ``Number``      one fret slot.
    - ``Rest``        one empty slot.
    - ``RestSpread``  ``n`` empty slots.
    - ``NextBeat``    empty slots up to the next beat boundary; nothing when
                      already on one.
    - ``BeatSpread``  ``n`` beats of empty slots. Must start on a boundary.

    A finished line has to land on a beat boundary. The running slot count is
    local to each :meth:`build` call, so one builder serves every line.
    """

    def __init__(self, fidelity: int) -> None:
        """
        Args:
            fidelity: Slots per beat. Must be at least 1.
        """
        if fidelity < 1:
            raise ValueError(f"fidelity must be at least 1, got {fidelity}")
        self.fidelity = fidelity

    def _slots_to_boundary(self, count: int) -> int:
        return -count % self.fidelity

    def build(self, tokens: Sequence[Token]) -> list[Slot]:
        """
        Expand a rhythm line into slots.

        Raises:
            TabSyntaxError: If the line contains a note literal.
            SemanticError:  If a beat spread starts off a beat boundary or the
                            line ends mid-beat.
        """
        slots: list[Slot] = []
        for token in tokens:
            if isinstance(token, Number):
                slots.append(token.value)
            elif isinstance(token, Rest):
                slots.append(None)
            elif isinstance(token, RestSpread):
                slots.extend([None] * token.count)
            elif isinstance(token, NextBeat):
                slots.extend([None] * self._slots_to_boundary(len(slots)))
            elif isinstance(token, BeatSpread):
                if token.count == 0:
                    continue
                if self._slots_to_boundary(len(slots)):
                    raise SemanticError(
                        f"ambiguous beat spread start: ';{token.count}' is not on a beat boundary",
                        line=token.line,
                        column=token.column,
                    )
                slots.extend([None] * (token.count * self.fidelity))
            elif isinstance(token, Note):
                raise TabSyntaxError(
                    f"note '{token}' is only allowed on the tuning line",
                    line=token.line,
                    column=token.column,
                )
            else:
                raise TypeError(f"unhandled token {token!r}")

        if self._slots_to_boundary(len(slots)):
            line = tokens[-1].line if tokens else None
            raise SemanticError(
                f"incomplete beat: {len(slots)} slots is not a multiple of fidelity {self.fidelity}",
                line=line,
            )
        return slots


def build_grid(tokens: Sequence[Token], fidelity: int) -> list[Slot]:
    """Expand one rhythm line at the given fidelity."""
    return GridBuilder(fidelity).build(tokens)
