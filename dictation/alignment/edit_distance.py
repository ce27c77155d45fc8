"""Edit distance alignment algorithm for word sequence matching."""
from __future__ import annotations

from typing import Iterable, List, Sequence

from ..config import DEFAULT_COSTS, AlignmentCosts
from ..models.aligned_word import AlignedWord, AlignmentOp


class SequenceAligner:
    """Minimum-cost alignment of two word sequences.

    Ties between predecessors are broken in a fixed order during
    backtracking: diagonal (match/substitute), then up (delete), then left
    (insert). The order decides which words are reported missing or extra
    when several alignments cost the same.
    """

    def __init__(self, costs: AlignmentCosts = DEFAULT_COSTS):
        self.costs = costs

    def _step_cost(self, ref_word: str, cand_word: str) -> int:
        return self.costs.match if ref_word == cand_word else self.costs.substitute

    def cost_table(self, ref: Sequence[str], cand: Sequence[str]) -> List[List[int]]:
        """Fill the ``(len(ref)+1) x (len(cand)+1)`` DP table."""
        n, m = len(ref), len(cand)
        dp = [[0] * (m + 1) for _ in range(n + 1)]

        for i in range(n + 1):
            dp[i][0] = i * self.costs.delete
        for j in range(m + 1):
            dp[0][j] = j * self.costs.insert

        for i in range(1, n + 1):
            for j in range(1, m + 1):
                dp[i][j] = min(
                    dp[i - 1][j - 1] + self._step_cost(ref[i - 1], cand[j - 1]),
                    dp[i - 1][j] + self.costs.delete,
                    dp[i][j - 1] + self.costs.insert,
                )
        return dp

    def distance(self, ref: Sequence[str], cand: Sequence[str]) -> int:
        """Cost of the cheapest alignment."""
        return self.cost_table(ref, cand)[len(ref)][len(cand)]

    def align(self, ref: Sequence[str], cand: Sequence[str]) -> List[AlignedWord]:
        """Align ``cand`` (user words) onto ``ref`` (reference words).

        Args:
            ref: Reference word sequence
            cand: Candidate word sequence typed by the user

        Returns:
            Alignment steps in sentence order. Its length is the number of
            reference words plus the number of inserted words.
        """
        dp = self.cost_table(ref, cand)
        ops: List[AlignedWord] = []
        i, j = len(ref), len(cand)

        while i > 0 or j > 0:
            current = dp[i][j]
            if i > 0 and j > 0 and current == dp[i - 1][j - 1] + self._step_cost(ref[i - 1], cand[j - 1]):
                op = AlignmentOp.MATCH if ref[i - 1] == cand[j - 1] else AlignmentOp.SUBSTITUTE
                ops.append(AlignedWord(op, ref[i - 1], cand[j - 1]))
                i -= 1
                j -= 1
            elif i > 0 and current == dp[i - 1][j] + self.costs.delete:
                ops.append(AlignedWord(AlignmentOp.DELETE, ref[i - 1], None))
                i -= 1
            else:
                ops.append(AlignedWord(AlignmentOp.INSERT, None, cand[j - 1]))
                j -= 1

        ops.reverse()
        return ops


def alignment_cost(ops: Iterable[AlignedWord], costs: AlignmentCosts = DEFAULT_COSTS) -> int:
    """Sum the cost of each step in an alignment."""
    per_op = {
        AlignmentOp.MATCH: costs.match,
        AlignmentOp.SUBSTITUTE: costs.substitute,
        AlignmentOp.INSERT: costs.insert,
        AlignmentOp.DELETE: costs.delete,
    }
    return sum(per_op[a.op] for a in ops)


def align_sequences(
    ref: Sequence[str], cand: Sequence[str], costs: AlignmentCosts = DEFAULT_COSTS
) -> List[AlignedWord]:
    """Classic edit-distance alignment returning a path of operations."""
    return SequenceAligner(costs).align(ref, cand)
