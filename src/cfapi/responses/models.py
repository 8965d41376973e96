# -*- coding: utf-8 -*-
"""Codeforces API 返回的实体模型

字段名使用 snake_case，线上字段为 camelCase（由 alias 生成器映射）。
服务端新增的未知字段直接忽略。
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CFModel(BaseModel):
    """所有实体的基类"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


# ==================== 枚举 ====================

class ContestType(str, Enum):
    CODEFORCES = "CF"
    IOI = "IOI"
    ICPC = "ICPC"


class ContestPhase(str, Enum):
    BEFORE = "BEFORE"
    CODING = "CODING"
    PENDING_SYSTEM_TEST = "PENDING_SYSTEM_TEST"
    SYSTEM_TEST = "SYSTEM_TEST"
    FINISHED = "FINISHED"


class ParticipantType(str, Enum):
    CONTESTANT = "CONTESTANT"
    PRACTICE = "PRACTICE"
    VIRTUAL = "VIRTUAL"
    MANAGER = "MANAGER"
    OUT_OF_COMPETITION = "OUT_OF_COMPETITION"


class ProblemType(str, Enum):
    PROGRAMMING = "PROGRAMMING"
    QUESTION = "QUESTION"


class SubmissionVerdict(str, Enum):
    FAILED = "FAILED"
    OK = "OK"
    PARTIAL = "PARTIAL"
    COMPILATION_ERROR = "COMPILATION_ERROR"
    RUNTIME_ERROR = "RUNTIME_ERROR"
    WRONG_ANSWER = "WRONG_ANSWER"
    PRESENTATION_ERROR = "PRESENTATION_ERROR"
    TIME_LIMIT_EXCEEDED = "TIME_LIMIT_EXCEEDED"
    MEMORY_LIMIT_EXCEEDED = "MEMORY_LIMIT_EXCEEDED"
    IDLENESS_LIMIT_EXCEEDED = "IDLENESS_LIMIT_EXCEEDED"
    SECURITY_VIOLATED = "SECURITY_VIOLATED"
    CRASHED = "CRASHED"
    INPUT_PREPARATION_CRASHED = "INPUT_PREPARATION_CRASHED"
    CHALLENGED = "CHALLENGED"
    SKIPPED = "SKIPPED"
    TESTING = "TESTING"
    REJECTED = "REJECTED"


class Testset(str, Enum):
    SAMPLES = "SAMPLES"
    PRETESTS = "PRETESTS"
    TESTS = "TESTS"
    CHALLENGES = "CHALLENGES"
    TESTS1 = "TESTS1"
    TESTS2 = "TESTS2"
    TESTS3 = "TESTS3"
    TESTS4 = "TESTS4"
    TESTS5 = "TESTS5"
    TESTS6 = "TESTS6"
    TESTS7 = "TESTS7"
    TESTS8 = "TESTS8"
    TESTS9 = "TESTS9"
    TESTS10 = "TESTS10"


class HackVerdict(str, Enum):
    HACK_SUCCESSFUL = "HACK_SUCCESSFUL"
    HACK_UNSUCCESSFUL = "HACK_UNSUCCESSFUL"
    INVALID_INPUT = "INVALID_INPUT"
    GENERATOR_INCOMPILABLE = "GENERATOR_INCOMPILABLE"
    GENERATOR_CRASHED = "GENERATOR_CRASHED"
    IGNORED = "IGNORED"
    TESTING = "TESTING"
    OTHER = "OTHER"


class ProblemResultType(str, Enum):
    PRELIMINARY = "PRELIMINARY"
    FINAL = "FINAL"


# ==================== 用户 / 博客 ====================

class User(CFModel):
    handle: str
    email: Optional[str] = None
    vk_id: Optional[str] = None
    open_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    organization: Optional[str] = None
    contribution: int
    rank: Optional[str] = None
    rating: Optional[int] = None
    max_rank: Optional[str] = None
    max_rating: Optional[int] = None
    last_online_time_seconds: int
    registration_time_seconds: int
    friend_of_count: int
    avatar: str
    title_photo: str


class BlogEntry(CFModel):
    id: int
    original_locale: str
    creation_time_seconds: int
    author_handle: str
    title: str
    content: Optional[str] = None
    locale: str
    modification_time_seconds: int
    allow_view_history: bool
    tags: List[str]
    rating: int


class Comment(CFModel):
    id: int
    creation_time_seconds: int
    commentator_handle: str
    locale: str
    text: str
    parent_comment_id: Optional[int] = None
    rating: int


class RecentAction(CFModel):
    time_seconds: int
    blog_entry: Optional[BlogEntry] = None
    comment: Optional[Comment] = None


class RatingChange(CFModel):
    contest_id: int
    contest_name: str
    handle: str
    rank: int
    rating_update_time_seconds: int
    old_rating: int
    new_rating: int


# ==================== 比赛 / 题目 ====================

class Contest(CFModel):
    id: int
    name: str
    contest_type: ContestType = Field(alias="type")
    phase: ContestPhase
    frozen: Optional[bool] = None
    duration_seconds: int
    start_time_seconds: Optional[int] = None
    relative_time_seconds: Optional[int] = None
    prepared_by: Optional[str] = None
    website_url: Optional[str] = None
    description: Optional[str] = None
    difficulty: Optional[int] = None
    kind: Optional[str] = None
    icpc_region: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    season: Optional[str] = None


class Member(CFModel):
    handle: str
    name: Optional[str] = None


class Party(CFModel):
    contest_id: Optional[int] = None
    members: List[Member]
    participant_type: ParticipantType
    team_id: Optional[int] = None
    team_name: Optional[str] = None
    ghost: bool
    room: Optional[int] = None
    start_time_seconds: Optional[int] = None


class Problem(CFModel):
    contest_id: Optional[int] = None
    problemset_name: Optional[str] = None
    index: Optional[str] = None
    name: str
    problem_type: ProblemType = Field(alias="type")
    points: Optional[float] = None
    rating: Optional[int] = None
    tags: List[str]


class ProblemStatistics(CFModel):
    contest_id: Optional[int] = None
    index: Optional[str] = None
    solved_count: int


class Problemset(CFModel):
    problems: List[Problem]
    problem_statistics: List[ProblemStatistics]


class Submission(CFModel):
    id: int
    contest_id: Optional[int] = None
    creation_time_seconds: int
    relative_time_seconds: Optional[int] = None
    problem: Problem
    author: Party
    programming_language: str
    verdict: Optional[SubmissionVerdict] = None
    testset: Testset
    passed_test_count: int
    time_consumed_millis: int
    memory_consumed_bytes: int
    points: Optional[float] = None


class JudgeProtocol(CFModel):
    manual: str
    protocol: str
    verdict: str


class Hack(CFModel):
    id: int
    creation_time_seconds: int
    hacker: Party
    defender: Party
    verdict: Optional[HackVerdict] = None
    problem: Problem
    test: Optional[str] = None
    judge_protocol: Optional[JudgeProtocol] = None


class ProblemResult(CFModel):
    points: float
    penalty: Optional[int] = None
    rejected_attempt_count: int
    result_type: ProblemResultType = Field(alias="type")
    best_submission_time_seconds: Optional[int] = None


class RanklistRow(CFModel):
    party: Party
    rank: int
    points: float
    penalty: int
    successful_hack_count: int
    unsuccessful_hack_count: int
    problem_results: List[ProblemResult]
    last_submission_time_seconds: Optional[int] = None


class Standings(CFModel):
    contest: Contest
    problems: List[Problem]
    rows: List[RanklistRow]
