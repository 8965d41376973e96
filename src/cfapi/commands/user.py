# -*- coding: utf-8 -*-
"""user.* 方法"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..responses.result import ResultTag
from .base import CFCommand, Params, require_flag, require_int, require_items, require_text


@dataclass(frozen=True)
class UserBlogEntries(CFCommand):
    method_name: ClassVar[str] = "user.blogEntries"
    result_tag: ClassVar[ResultTag] = ResultTag.BLOG_ENTRY_LIST

    handle: str

    def __post_init__(self):
        require_text("handle", self.handle)

    def parameters(self) -> Params:
        return {"handle": self.handle}


@dataclass(frozen=True)
class UserFriends(CFCommand):
    """user.friends：当前授权用户的好友（需要签名）"""
    method_name: ClassVar[str] = "user.friends"
    result_tag: ClassVar[ResultTag] = ResultTag.FRIENDS

    only_online: Optional[bool] = None

    def __post_init__(self):
        require_flag("onlyOnline", self.only_online)

    def parameters(self) -> Params:
        return {"onlyOnline": self.only_online}


@dataclass(frozen=True)
class UserInfo(CFCommand):
    """user.info：批量查询用户（最多10000个handle）"""
    method_name: ClassVar[str] = "user.info"
    result_tag: ClassVar[ResultTag] = ResultTag.USER_LIST

    handles: Tuple[str, ...]

    def __post_init__(self):
        if not isinstance(self.handles, (tuple, str)) and self.handles is not None:
            object.__setattr__(self, "handles", tuple(self.handles))
        require_items("handles", self.handles)

    def parameters(self) -> Params:
        return {"handles": self.handles}


@dataclass(frozen=True)
class UserRatedList(CFCommand):
    method_name: ClassVar[str] = "user.ratedList"
    result_tag: ClassVar[ResultTag] = ResultTag.USER_LIST

    active_only: Optional[bool] = None

    def __post_init__(self):
        require_flag("activeOnly", self.active_only)

    def parameters(self) -> Params:
        return {"activeOnly": self.active_only}


@dataclass(frozen=True)
class UserRating(CFCommand):
    """user.rating：用户的rating变化历史"""
    method_name: ClassVar[str] = "user.rating"
    result_tag: ClassVar[ResultTag] = ResultTag.RATING_CHANGE_LIST

    handle: str

    def __post_init__(self):
        require_text("handle", self.handle)

    def parameters(self) -> Params:
        return {"handle": self.handle}


@dataclass(frozen=True)
class UserStatus(CFCommand):
    """user.status：用户的提交记录"""
    method_name: ClassVar[str] = "user.status"
    result_tag: ClassVar[ResultTag] = ResultTag.SUBMISSION_LIST

    handle: str
    from_: Optional[int] = None
    count: Optional[int] = None

    def __post_init__(self):
        require_text("handle", self.handle)
        require_int("from", self.from_, optional=True)
        require_int("count", self.count, optional=True)

    def parameters(self) -> Params:
        return {"handle": self.handle, "from": self.from_, "count": self.count}
