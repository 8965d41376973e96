# -*- coding: utf-8 -*-
"""响应模型与解码"""

from .models import (
    BlogEntry,
    Comment,
    Contest,
    ContestPhase,
    ContestType,
    Hack,
    HackVerdict,
    JudgeProtocol,
    Member,
    ParticipantType,
    Party,
    Problem,
    ProblemResult,
    ProblemResultType,
    Problemset,
    ProblemStatistics,
    ProblemType,
    RanklistRow,
    RatingChange,
    RecentAction,
    Standings,
    Submission,
    SubmissionVerdict,
    Testset,
    User,
)
from .result import (
    RESULT_TYPES,
    BlogEntryListResult,
    BlogEntryResult,
    CFResult,
    CommentListResult,
    ContestListResult,
    ContestStandingsResult,
    FriendsResult,
    HackListResult,
    ProblemsetResult,
    RatingChangeListResult,
    RecentActionListResult,
    ResultTag,
    SubmissionListResult,
    UserListResult,
    register_result,
    result_class_for,
)
from .decoder import Envelope, ResponseStatus, decode_payload, decode_response, parse_envelope
