# -*- coding: utf-8 -*-
"""contest.* 方法"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..responses.result import ResultTag
from .base import CFCommand, Params, require_flag, require_int, require_items, require_text


@dataclass(frozen=True)
class ContestHacks(CFCommand):
    """contest.hacks：比赛中的hack列表（比赛期间只能看到自己的）"""
    method_name: ClassVar[str] = "contest.hacks"
    result_tag: ClassVar[ResultTag] = ResultTag.HACK_LIST

    contest_id: int

    def __post_init__(self):
        require_int("contestId", self.contest_id)

    def parameters(self) -> Params:
        return {"contestId": self.contest_id}


@dataclass(frozen=True)
class ContestList(CFCommand):
    """contest.list：gym=True 时返回 gym 比赛"""
    method_name: ClassVar[str] = "contest.list"
    result_tag: ClassVar[ResultTag] = ResultTag.CONTEST_LIST

    gym: Optional[bool] = None

    def __post_init__(self):
        require_flag("gym", self.gym)

    def parameters(self) -> Params:
        return {"gym": self.gym}


@dataclass(frozen=True)
class ContestRatingChanges(CFCommand):
    method_name: ClassVar[str] = "contest.ratingChanges"
    result_tag: ClassVar[ResultTag] = ResultTag.RATING_CHANGE_LIST

    contest_id: int

    def __post_init__(self):
        require_int("contestId", self.contest_id)

    def parameters(self) -> Params:
        return {"contestId": self.contest_id}


@dataclass(frozen=True)
class ContestStandings(CFCommand):
    """contest.standings：比赛排行榜

    Args:
        contest_id: 比赛ID
        from_: 起始名次（1-based）
        count: 返回的行数
        handles: 只返回这些用户（最多10000个）
        room: 只返回该房间
        show_unofficial: 是否包含非正式参赛者
    """
    method_name: ClassVar[str] = "contest.standings"
    result_tag: ClassVar[ResultTag] = ResultTag.CONTEST_STANDINGS

    contest_id: int
    from_: Optional[int] = None
    count: Optional[int] = None
    handles: Optional[Tuple[str, ...]] = None
    room: Optional[int] = None
    show_unofficial: Optional[bool] = None

    def __post_init__(self):
        require_int("contestId", self.contest_id)
        require_int("from", self.from_, optional=True)
        require_int("count", self.count, optional=True)
        require_int("room", self.room, optional=True)
        require_flag("showUnofficial", self.show_unofficial)
        if self.handles is not None and not isinstance(self.handles, str):
            object.__setattr__(self, "handles", tuple(self.handles))
        require_items("handles", self.handles, optional=True)

    def parameters(self) -> Params:
        return {
            "contestId": self.contest_id,
            "from": self.from_,
            "count": self.count,
            "handles": self.handles,
            "room": self.room,
            "showUnofficial": self.show_unofficial,
        }


@dataclass(frozen=True)
class ContestStatus(CFCommand):
    """contest.status：比赛的提交记录，可按用户过滤"""
    method_name: ClassVar[str] = "contest.status"
    result_tag: ClassVar[ResultTag] = ResultTag.SUBMISSION_LIST

    contest_id: int
    handle: Optional[str] = None
    from_: Optional[int] = None
    count: Optional[int] = None

    def __post_init__(self):
        require_int("contestId", self.contest_id)
        require_int("from", self.from_, optional=True)
        require_int("count", self.count, optional=True)
        if self.handle is not None:
            require_text("handle", self.handle)

    def parameters(self) -> Params:
        return {
            "contestId": self.contest_id,
            "handle": self.handle,
            "from": self.from_,
            "count": self.count,
        }
