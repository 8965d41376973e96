# -*- coding: utf-8 -*-
"""Codeforces API 命令（每个远程方法一个类）"""

from .base import CFCommand
from .blog_entry import BlogEntryComments, BlogEntryView
from .contest import ContestHacks, ContestList, ContestRatingChanges, ContestStandings, ContestStatus
from .problemset import ProblemsetProblems, ProblemsetRecentStatus
from .recent_actions import RecentActions
from .user import UserBlogEntries, UserFriends, UserInfo, UserRatedList, UserRating, UserStatus

ALL_COMMANDS = (
    BlogEntryComments,
    BlogEntryView,
    ContestHacks,
    ContestList,
    ContestRatingChanges,
    ContestStandings,
    ContestStatus,
    ProblemsetProblems,
    ProblemsetRecentStatus,
    RecentActions,
    UserBlogEntries,
    UserFriends,
    UserInfo,
    UserRatedList,
    UserRating,
    UserStatus,
)

__all__ = ["CFCommand", "ALL_COMMANDS"] + [cls.__name__ for cls in ALL_COMMANDS]
