# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .posts.entities import PAGE_SIZE, NewPost, Post, PostChanges
from .users.entities import SessionClaims, User

__all__ = [
    "PAGE_SIZE",
    "NewPost",
    "Post",
    "PostChanges",
    "SessionClaims",
    "User",
]
