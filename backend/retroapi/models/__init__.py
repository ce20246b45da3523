"""
Retro Board Backend — ORM Models
=================================

Importing this package registers every table with `Base.metadata`.

Tables:
    users               User accounts and their access tokens
    retros              Retrospective sessions
    retro_participants  Ordered User references of each retro
    thoughts            Categorized notes attached to a retro
    action_items        Follow-up tasks attached to a retro
"""

from retroapi.models.action_item import ActionItem
from retroapi.models.retro import Retro, retro_participants
from retroapi.models.thought import Thought, ThoughtCategory
from retroapi.models.user import User

__all__ = [
    "ActionItem",
    "Retro",
    "Thought",
    "ThoughtCategory",
    "User",
    "retro_participants",
]
