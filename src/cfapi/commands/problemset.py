# -*- coding: utf-8 -*-
"""problemset.* 方法"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..responses.result import ResultTag
from .base import CFCommand, Params, require_int, require_items, require_text


@dataclass(frozen=True)
class ProblemsetProblems(CFCommand):
    """problemset.problems：题库题目及通过人数，可按标签过滤"""
    method_name: ClassVar[str] = "problemset.problems"
    result_tag: ClassVar[ResultTag] = ResultTag.PROBLEMSET

    tags: Optional[Tuple[str, ...]] = None
    problemset_name: Optional[str] = None

    def __post_init__(self):
        if self.tags is not None and not isinstance(self.tags, str):
            object.__setattr__(self, "tags", tuple(self.tags))
        require_items("tags", self.tags, optional=True)
        if self.problemset_name is not None:
            require_text("problemsetName", self.problemset_name)

    def parameters(self) -> Params:
        return {"tags": self.tags, "problemsetName": self.problemset_name}


@dataclass(frozen=True)
class ProblemsetRecentStatus(CFCommand):
    """problemset.recentStatus：最近的提交（count 不超过1000）"""
    method_name: ClassVar[str] = "problemset.recentStatus"
    result_tag: ClassVar[ResultTag] = ResultTag.SUBMISSION_LIST

    count: int
    problemset_name: Optional[str] = None

    def __post_init__(self):
        require_int("count", self.count)
        if self.problemset_name is not None:
            require_text("problemsetName", self.problemset_name)

    def parameters(self) -> Params:
        return {"count": self.count, "problemsetName": self.problemset_name}
