# -*- coding: utf-8 -*-
"""结果联合类型

每种载荷形状对应一个 ResultTag 和一个结果类；命令声明自己期望的标签，
解码器据此选择结果类，不做任何猜测。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, List, Type

from ..exceptions import ResultMismatchError
from .models import (
    BlogEntry,
    Comment,
    Contest,
    Hack,
    Problemset,
    RatingChange,
    RecentAction,
    Standings,
    Submission,
    User,
)


class ResultTag(str, Enum):
    """结果标签"""
    COMMENT_LIST = "comment_list"
    BLOG_ENTRY = "blog_entry"
    HACK_LIST = "hack_list"
    CONTEST_LIST = "contest_list"
    RATING_CHANGE_LIST = "rating_change_list"
    CONTEST_STANDINGS = "contest_standings"
    SUBMISSION_LIST = "submission_list"
    PROBLEMSET = "problemset"
    RECENT_ACTION_LIST = "recent_action_list"
    BLOG_ENTRY_LIST = "blog_entry_list"
    FRIENDS = "friends"
    USER_LIST = "user_list"


@dataclass(frozen=True)
class CFResult:
    """所有结果的基类

    子类声明 tag（判别标签）与 payload_type（用于校验 result 字段的类型）。
    """
    tag: ClassVar[ResultTag]
    payload_type: ClassVar[Any]

    value: Any

    def expect(self, tag: ResultTag) -> "CFResult":
        """断言结果标签，返回自身；不一致时抛出 ResultMismatchError"""
        if self.tag is not tag:
            raise ResultMismatchError(tag.value, self.tag.value)
        return self


RESULT_TYPES: Dict[ResultTag, Type[CFResult]] = {}


def register_result(cls: Type[CFResult]) -> Type[CFResult]:
    """注册结果类（装饰器）；同一标签只能注册一次"""
    if cls.tag in RESULT_TYPES and RESULT_TYPES[cls.tag] is not cls:
        raise ValueError(f"结果标签已注册: {cls.tag.value}")
    RESULT_TYPES[cls.tag] = cls
    return cls


def result_class_for(tag: ResultTag) -> Type[CFResult]:
    try:
        return RESULT_TYPES[tag]
    except KeyError:
        raise LookupError(f"未注册的结果标签: {tag}") from None


@register_result
@dataclass(frozen=True)
class CommentListResult(CFResult):
    tag: ClassVar[ResultTag] = ResultTag.COMMENT_LIST
    payload_type: ClassVar[Any] = List[Comment]
    value: List[Comment]


@register_result
@dataclass(frozen=True)
class BlogEntryResult(CFResult):
    tag: ClassVar[ResultTag] = ResultTag.BLOG_ENTRY
    payload_type: ClassVar[Any] = BlogEntry
    value: BlogEntry


@register_result
@dataclass(frozen=True)
class HackListResult(CFResult):
    tag: ClassVar[ResultTag] = ResultTag.HACK_LIST
    payload_type: ClassVar[Any] = List[Hack]
    value: List[Hack]


@register_result
@dataclass(frozen=True)
class ContestListResult(CFResult):
    tag: ClassVar[ResultTag] = ResultTag.CONTEST_LIST
    payload_type: ClassVar[Any] = List[Contest]
    value: List[Contest]


@register_result
@dataclass(frozen=True)
class RatingChangeListResult(CFResult):
    tag: ClassVar[ResultTag] = ResultTag.RATING_CHANGE_LIST
    payload_type: ClassVar[Any] = List[RatingChange]
    value: List[RatingChange]


@register_result
@dataclass(frozen=True)
class ContestStandingsResult(CFResult):
    tag: ClassVar[ResultTag] = ResultTag.CONTEST_STANDINGS
    payload_type: ClassVar[Any] = Standings
    value: Standings


@register_result
@dataclass(frozen=True)
class SubmissionListResult(CFResult):
    tag: ClassVar[ResultTag] = ResultTag.SUBMISSION_LIST
    payload_type: ClassVar[Any] = List[Submission]
    value: List[Submission]


@register_result
@dataclass(frozen=True)
class ProblemsetResult(CFResult):
    tag: ClassVar[ResultTag] = ResultTag.PROBLEMSET
    payload_type: ClassVar[Any] = Problemset
    value: Problemset


@register_result
@dataclass(frozen=True)
class RecentActionListResult(CFResult):
    tag: ClassVar[ResultTag] = ResultTag.RECENT_ACTION_LIST
    payload_type: ClassVar[Any] = List[RecentAction]
    value: List[RecentAction]


@register_result
@dataclass(frozen=True)
class BlogEntryListResult(CFResult):
    tag: ClassVar[ResultTag] = ResultTag.BLOG_ENTRY_LIST
    payload_type: ClassVar[Any] = List[BlogEntry]
    value: List[BlogEntry]


@register_result
@dataclass(frozen=True)
class FriendsResult(CFResult):
    """user.friends 只返回 handle 列表"""
    tag: ClassVar[ResultTag] = ResultTag.FRIENDS
    payload_type: ClassVar[Any] = List[str]
    value: List[str]


@register_result
@dataclass(frozen=True)
class UserListResult(CFResult):
    tag: ClassVar[ResultTag] = ResultTag.USER_LIST
    payload_type: ClassVar[Any] = List[User]
    value: List[User]
