"""Vote transitions.

Votes are not stored per client. The client remembers its own choice and
sends it back as ``previous`` on the next vote, so a transition is fully
described by (previous, action):

    previous  action    upvotes  downvotes  score
    none      upvote       +1        0        +1
    none      downvote      0       +1        -1
    upvote    upvote        0        0         0   (no-op)
    downvote  downvote      0        0         0   (no-op)
    upvote    downvote     -1       +1        -2
    downvote  upvote       +1       -1        +2
"""

from typing import Optional

from ranker.domain.model.common import DomainModel
from ranker.domain.value import VoteAction, VoteDelta

_CONTRIBUTION: dict[Optional[VoteAction], VoteDelta] = {
    None: VoteDelta(),
    VoteAction.UPVOTE: VoteDelta(upvotes=1),
    VoteAction.DOWNVOTE: VoteDelta(downvotes=1),
}


class VoteTransition(DomainModel):
    """A client's move from its previous vote (if any) to a new one."""

    action: VoteAction
    previous: Optional[VoteAction] = None

    @property
    def is_noop(self) -> bool:
        """Repeating the same vote changes nothing."""
        return self.previous == self.action

    @property
    def delta(self) -> VoteDelta:
        """Counter changes: withdraw the previous vote, add the new one."""
        new = _CONTRIBUTION[self.action]
        old = _CONTRIBUTION[self.previous]
        return VoteDelta(
            upvotes=new.upvotes - old.upvotes,
            downvotes=new.downvotes - old.downvotes,
        )
