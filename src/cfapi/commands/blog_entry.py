# -*- coding: utf-8 -*-
"""blogEntry.* 方法"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..responses.result import ResultTag
from .base import CFCommand, Params, require_int


@dataclass(frozen=True)
class BlogEntryComments(CFCommand):
    """blogEntry.comments：博客下的评论列表"""
    method_name: ClassVar[str] = "blogEntry.comments"
    result_tag: ClassVar[ResultTag] = ResultTag.COMMENT_LIST

    blog_entry_id: int

    def __post_init__(self):
        require_int("blogEntryId", self.blog_entry_id)

    def parameters(self) -> Params:
        return {"blogEntryId": self.blog_entry_id}


@dataclass(frozen=True)
class BlogEntryView(CFCommand):
    """blogEntry.view：单篇博客"""
    method_name: ClassVar[str] = "blogEntry.view"
    result_tag: ClassVar[ResultTag] = ResultTag.BLOG_ENTRY

    blog_entry_id: int

    def __post_init__(self):
        require_int("blogEntryId", self.blog_entry_id)

    def parameters(self) -> Params:
        return {"blogEntryId": self.blog_entry_id}
