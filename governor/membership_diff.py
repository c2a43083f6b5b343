from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from governor.entities.membership import EnumeratedMembership
    from typing import Iterable, List


def find_member_diff(
    before,  # type: Iterable[EnumeratedMembership]
    after,  # type: Iterable[EnumeratedMembership]
):
    # type: (...) -> List[EnumeratedMembership]
    """Return the memberships in after whose exact value does not appear in before.

    Memberships are compared as whole values, not by (group, user) pair, so a pair whose is_admin
    or expires_at changed shows up as new.  Pass the snapshots in the other order to find the
    memberships that were lost.  The order of the result is not meaningful.
    """
    seen = set(before)
    return [membership for membership in after if membership not in seen]
