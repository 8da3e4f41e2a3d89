"""Directory membership module.

Resolves users and groups by mail and checks or adds group membership against
a remote directory (Google Workspace or Microsoft Graph), walking paged
results one page at a time.

Public API:
    - walk / iter_collection: lazy page walker
    - IdentityResolver: first-page mail lookup
    - MembershipChecker: short-circuiting membership check
    - GroupMembershipMutator: single add-member write
    - MembershipService: facade over the above for one directory client
"""

from modules.directory.membership import MembershipChecker
from modules.directory.mutator import GroupMembershipMutator
from modules.directory.pagination import iter_collection, walk
from modules.directory.resolver import IdentityResolver
from modules.directory.service import MembershipService

__all__ = [
    "GroupMembershipMutator",
    "IdentityResolver",
    "MembershipChecker",
    "MembershipService",
    "iter_collection",
    "walk",
]
