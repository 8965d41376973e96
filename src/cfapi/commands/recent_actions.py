# -*- coding: utf-8 -*-
"""recentActions 方法"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..responses.result import ResultTag
from .base import CFCommand, Params, require_int


@dataclass(frozen=True)
class RecentActions(CFCommand):
    """最近的博客与评论动态（max_count 不超过100）"""
    method_name: ClassVar[str] = "recentActions"
    result_tag: ClassVar[ResultTag] = ResultTag.RECENT_ACTION_LIST

    max_count: int

    def __post_init__(self):
        require_int("maxCount", self.max_count)

    def parameters(self) -> Params:
        return {"maxCount": self.max_count}
