# -*- coding: utf-8 -*-
"""测试用的响应载荷（字段取自真实响应）"""

import json

BLOG_ENTRY = {
    "originalLocale": "en",
    "allowViewHistory": False,
    "creationTimeSeconds": 1598899283,
    "rating": 1033,
    "authorHandle": "MikeMirzayanov",
    "modificationTimeSeconds": 1598899524,
    "id": 82347,
    "title": "Codeforces: Test Blog Entry",
    "locale": "en",
    "tags": ["codeforces", "api"],
}

COMMENT = {
    "id": 691263,
    "creationTimeSeconds": 1598900000,
    "commentatorHandle": "thud",
    "locale": "en",
    "text": "<div>nice</div>",
    "parentCommentId": None,
    "rating": 3,
}

USER = {
    "handle": "thud",
    "contribution": 0,
    "rank": "expert",
    "rating": 1700,
    "maxRank": "expert",
    "maxRating": 1800,
    "lastOnlineTimeSeconds": 1613000000,
    "registrationTimeSeconds": 1500000000,
    "friendOfCount": 12,
    "avatar": "https://userpic.codeforces.org/no-avatar.jpg",
    "titlePhoto": "https://userpic.codeforces.org/no-title.jpg",
}

PROBLEM = {
    "contestId": 1477,
    "index": "B",
    "name": "Nezzar and Binary String",
    "type": "PROGRAMMING",
    "points": 1000.0,
    "rating": 1900,
    "tags": ["data structures", "greedy"],
}

PARTY = {
    "contestId": 1477,
    "members": [{"handle": "thud"}],
    "participantType": "CONTESTANT",
    "ghost": False,
    "room": 5,
    "startTimeSeconds": 1612535700,
}

SUBMISSION = {
    "id": 106826402,
    "contestId": 1477,
    "creationTimeSeconds": 1612537000,
    "relativeTimeSeconds": 1300,
    "problem": PROBLEM,
    "author": PARTY,
    "programmingLanguage": "GNU C++17",
    "verdict": "OK",
    "testset": "TESTS",
    "passedTestCount": 42,
    "timeConsumedMillis": 124,
    "memoryConsumedBytes": 3276800,
}

CONTEST = {
    "id": 1477,
    "name": "Codeforces Round #698 (Div. 1)",
    "type": "CF",
    "phase": "FINISHED",
    "frozen": False,
    "durationSeconds": 8100,
    "startTimeSeconds": 1612535700,
    "relativeTimeSeconds": 1000000,
}

RATING_CHANGE = {
    "contestId": 1477,
    "contestName": "Codeforces Round #698 (Div. 1)",
    "handle": "thud",
    "rank": 500,
    "ratingUpdateTimeSeconds": 1612550000,
    "oldRating": 1700,
    "newRating": 1750,
}

STANDINGS = {
    "contest": CONTEST,
    "problems": [PROBLEM],
    "rows": [
        {
            "party": PARTY,
            "rank": 1,
            "points": 1000.0,
            "penalty": 0,
            "successfulHackCount": 0,
            "unsuccessfulHackCount": 0,
            "problemResults": [
                {
                    "points": 1000.0,
                    "rejectedAttemptCount": 0,
                    "type": "FINAL",
                    "bestSubmissionTimeSeconds": 1300,
                }
            ],
        }
    ],
}

HACK = {
    "id": 700000,
    "creationTimeSeconds": 1612537500,
    "hacker": PARTY,
    "defender": PARTY,
    "verdict": "HACK_SUCCESSFUL",
    "problem": PROBLEM,
    "judgeProtocol": {"manual": "false", "protocol": "ok", "verdict": "Successful hacking attempt"},
}


def ok(result) -> bytes:
    return json.dumps({"status": "OK", "result": result}).encode("utf-8")


def failed(comment, result=None) -> bytes:
    body = {"status": "FAILED", "comment": comment}
    if result is not None:
        body["result"] = result
    return json.dumps(body).encode("utf-8")
